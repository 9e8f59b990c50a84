"""
Logging utilities for extpack
"""

import logging
import os
import sys


def get_logger(name: str = "extpack") -> logging.Logger:
    """
    Get logger instance

    The level defaults to INFO and can be changed with the
    EXTPACK_LOG_LEVEL environment variable.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        # Create console handler
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)

        # Add handler to logger
        logger.addHandler(handler)
        logger.setLevel(os.getenv("EXTPACK_LOG_LEVEL", "INFO").upper())

    return logger
