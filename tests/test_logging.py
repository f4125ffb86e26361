"""Tests for loguru logging setup."""

import json
import logging

from loguru import logger

from flickr_embed.logging import setup_logging


def test_file_output(temp_dir):
    """Test log records reach the configured file."""
    log_file = temp_dir / "embed.log"

    setup_logging(level="INFO", log_file=str(log_file))
    logger.info("rendered photo {}", 123)
    logger.debug("hidden")
    logger.remove()

    content = log_file.read_text()
    assert "rendered photo 123" in content
    assert "hidden" not in content


def test_json_output(capsys):
    """Test JSON output serializes records to stderr."""
    setup_logging(level="DEBUG", json_output=True)
    logger.warning("cache unavailable")
    logger.remove()

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["record"]["message"] == "cache unavailable"
    assert record["record"]["level"]["name"] == "WARNING"


def test_http_loggers_quieted():
    """Test the HTTP client's stdlib loggers are raised to WARNING."""
    setup_logging(level="DEBUG")
    logger.remove()

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
