"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    Formatter,
    Logger,
    StreamHandler,
    basicConfig,
    getLogger,
)

from bffkit.args import Args


def init_logging(args: Args) -> None:
    """Initialize logging for the application.

    Should be called once when the application starts.
    """
    # Basic config for file logging
    basicConfig(
        level=INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename="bffkit.log",
        filemode="w",
    )

    root_logger = getLogger()
    configure_3p_loggers(root_logger)

    if args.verbose:
        # Console handler for user-facing logs, only in verbose mode
        console_handler = StreamHandler()
        console_handler.setLevel(DEBUG)
        console_formatter = Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

        root_logger.setLevel(DEBUG)
        root_logger.info("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)


def configure_3p_loggers(root_logger: Logger) -> None:
    """Detach handlers from third-party loggers so they only reach the log file."""
    for name in root_logger.manager.loggerDict:
        if name.startswith("bffkit"):
            continue  # Skip our own loggers
        third_party_logger = getLogger(name)
        third_party_logger.handlers.clear()
