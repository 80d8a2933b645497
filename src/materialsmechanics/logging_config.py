"""
Logging Configuration
Sets up the ``materialsmechanics`` namespace logger.

The models only emit records (debug for computed values, info for state and
catalog changes, warning for fractured or buckled outcomes). Handlers are
attached here, by the host application or the development runner.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "materialsmechanics"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Attach console and file handlers to the engine's namespace logger.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional path; records are also written there (overwritten).
        console: Send records to stdout. Disable when only a file is wanted.

    Returns:
        The configured namespace logger.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running setup (e.g. from a notebook) must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
