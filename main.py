import logging
import os
import signal
import sys
from typing import Optional, Sequence

from cli_args import configure_from_args, parse_arguments
from db_config import DatabaseConfig

LOG_LEVEL_ENV = "PERFPAGES_LOG_LEVEL"

logger = logging.getLogger(__name__)


def signal_handler(_sig, _frame):
    print('\nShutting down gracefully...')
    sys.exit(0)


def configure_logging(debug: bool) -> int:
    """Configure root logging and export the chosen level.

    Returns:
        The logging level that was applied.
    """
    level = logging.DEBUG if debug else logging.INFO
    os.environ[LOG_LEVEL_ENV] = logging.getLevelName(level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return level


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.debug)
    configure_from_args(args)

    # The CLI builds its own app with the chosen database mode
    os.environ.setdefault("PERFPAGES_SKIP_MODULE_APP", "1")
    from app import create_app  # pylint: disable=import-outside-toplevel

    flask_app = create_app()

    if DatabaseConfig.is_memory_mode():
        logger.info("Serving pages from an in-memory database")
    else:
        logger.info("Serving pages from %s", flask_app.config["SQLALCHEMY_DATABASE_URI"])

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        flask_app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)
    except KeyboardInterrupt:
        print('\nShutting down gracefully...')
    return 0


if __name__ == "__main__":
    sys.exit(main())
