"""
Logging setup for command-line use.

Library modules only create loggers; handlers are attached here.
"""

import logging
from typing import Optional


def setup_logger(verbose: bool = False, log_file: Optional[str] = None, name: str = "pattern_scanner_py"):
    # Configure Root Logger
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates if called multiple times
    if logger.handlers:
        logger.handlers = []

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    return logging.getLogger(name)
