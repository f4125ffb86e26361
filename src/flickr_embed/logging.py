"""Loguru configuration for the CLI and the MCP server.

Library modules import ``logger`` from loguru directly; only entry points call
``setup_logging``. Records go to stderr so rendered HTML on stdout stays clean.
"""

import logging
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Per-request chatter from the HTTP stack; our client logs its own calls
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: str | None = None,
) -> None:
    """Replace loguru's handlers with the flickr-embed sinks.

    Args:
        level: Minimum level, e.g. "DEBUG" or "WARNING".
        json_output: Serialize records as JSON lines instead of the colored format.
        log_file: Also append records to this file, rotated at 10 MB.

    """
    logger.remove()

    if json_output:
        logger.add(sys.stderr, format="{message}", serialize=True, level=level)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        logger.add(log_file, format=FILE_FORMAT, level=level, rotation="10 MB", retention=5)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging configured: level={}, json={}, file={}", level, json_output, log_file)
