"""Application entry point."""

import logging

from sproingy.runtime.config import initialize_viewer_config
from sproingy.runtime.entrypoint import run
from sproingy.runtime.env_files import load_default_env_files
from sproingy.runtime.logging import configure_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Sproingy plot viewer."""
    load_default_env_files()
    config = initialize_viewer_config()
    configure_logging(config.log)
    logger.info(
        "viewer_config window=%dx%d dots=%d wheel_zoom_step=%.3f log_file=%s",
        config.window.width,
        config.window.height,
        config.dots.count,
        config.axis.wheel_zoom_step,
        config.log.file_path or "-",
    )
    try:
        run(config)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
