# ABOUTME: Logging setup for the squash command line, driven by the CLI's Config
# ABOUTME: Diagnostics go to stderr next to the final report, optionally to a rotating log file
import logging
import logging.handlers

from squash.config import Config

# Rotation keeps at most 5 old logs of 10MB
_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5


def setup_logging(config: Config, debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """
    Configure the ``squash`` logger.

    The console handler prefixes records with the program name so they are
    not mistaken for the ``[ERROR]`` report printed at exit.

    Args:
        config: Configuration built by the CLI (log level, log directory)
        debug: Force DEBUG level, overriding SQUASH_LOG_LEVEL
        log_file: File name inside config.get_log_dir(); None logs to stderr only

    Returns:
        The configured package logger

    Raises:
        OSError: If the log directory or file cannot be created
    """
    level = logging.DEBUG if debug else getattr(logging, config.log_level)

    logger = logging.getLogger("squash")
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("squash: %(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            config.get_log_dir() / log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS
        )
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)} level")
    return logger
