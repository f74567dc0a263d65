"""Centralized logging configuration."""

import logging
import sys

FORMATS = {
    # Development - human readable
    "standard": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    # Lambda / CloudWatch - one JSON object per line
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
}


def setup_logging(level: str = "INFO", format_style: str = "standard") -> logging.Logger:
    """
    Configure logging for the extension.

    Logs go to stderr so stdout stays free for command output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_style: 'standard' for dev, 'json' for CloudWatch

    Returns:
        Root logger
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=FORMATS.get(format_style, FORMATS["standard"]),
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    # botocore is chatty at DEBUG and may echo request payloads
    logging.getLogger("botocore").setLevel(max(logging.INFO, logging.root.level))

    return logging.getLogger()
