"""Optional ``KEY=VALUE`` env file loading for viewer settings."""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping, Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.sproingy", ".env.sproingy.local")

logger = logging.getLogger(__name__)


def load_env_file(
    path: str | Path,
    *,
    override_existing: bool = False,
    environ: MutableMapping[str, str] | None = None,
) -> int:
    """Load ``KEY=VALUE`` pairs from an env file into the process environment.

    Blank lines, ``#`` comments and lines without ``=`` are skipped. Matching
    single or double quotes around a value are stripped. Variables already set
    in the environment win unless ``override_existing`` is true. Returns the
    number of variables written; a missing file loads nothing.
    """
    target = os.environ if environ is None else environ
    env_path = Path(path)
    if not env_path.is_file():
        return 0

    written = 0
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in target:
            target[key] = value
            written += 1
    logger.debug("env_file_loaded path=%s written=%d", env_path, written)
    return written


def load_default_env_files(
    *,
    paths: Sequence[str | Path] | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Load the viewer env files in order; later files override earlier ones.

    The process environment still wins over every file.
    """
    target = os.environ if environ is None else environ
    preexisting = set(target)
    for path in paths if paths is not None else DEFAULT_ENV_FILES:
        env_path = Path(path)
        if not env_path.is_file():
            continue
        file_values: dict[str, str] = {}
        load_env_file(env_path, override_existing=True, environ=file_values)
        for key, value in file_values.items():
            if key not in preexisting:
                target[key] = value
