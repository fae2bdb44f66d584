# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Logging setup for the command-line entry point.

Library code only creates module loggers; handlers are attached here.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a stderr handler to the 'matrix_calculator' logger."""
    logger = logging.getLogger("matrix_calculator")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    ))
    logger.addHandler(handler)
