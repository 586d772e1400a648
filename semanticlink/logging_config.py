"""
Logging configuration for semanticlink

The library only creates loggers under the "semanticlink" namespace; handlers
are installed by applications (or the CLI) through setup_logging.
"""

import logging
import sys


def setup_logging(level=logging.INFO, stream=None):
    """
    Configure logging for semanticlink

    Args:
        level: Logging level (default: INFO)
        stream: Stream to write to (default: stderr)

    Returns:
        logging.Logger: The configured "semanticlink" logger
    """
    base_logger = logging.getLogger("semanticlink")
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(name)s %(message)s"))
    base_logger.addHandler(handler)

    return base_logger
