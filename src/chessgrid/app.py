"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from chessgrid.config import AppSettings, parse_args

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(settings: AppSettings) -> int:
    """Start the front-end selected by *settings*."""
    if settings.use_console:
        from chessgrid.console import run_console

        _LOGGER.info("Starting console chess game")
        return run_console()

    from chessgrid.ui.bootstrap import run_application

    _LOGGER.info("Starting GUI chess game")
    return run_application(settings)


def main(argv: Sequence[str] | None = None) -> None:
    """Launch chessgrid."""
    settings = parse_args(argv)
    _configure_logging(settings)
    sys.exit(run(settings))


if __name__ == "__main__":
    main()
