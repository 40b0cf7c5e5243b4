"""Sproingy: interactive 2D dot plot viewer with drag panning and wheel zoom."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sproingy.runtime.config import ViewerConfig


def run(config: "ViewerConfig | None" = None) -> None:
    """Open the viewer window and block until it closes."""
    from sproingy.runtime.entrypoint import run as runtime_run

    runtime_run(config)


__all__ = ["run"]
