"""Gives out a production-ready logger.

This module provides:
- setup_logging: a function to assign package logging to std stream and, optionally, a rotating file
"""

import logging
import os
from logging.handlers import RotatingFileHandler


def setup_logging(settings, logger_name: str = "flakeworks") -> logging.Logger:
    """Sets logging of the package to std stream and, if enabled, a .log file.

    Args:
        settings (type[Config]): The config class to read DEBUG, LOG_TO_FILE and LOG_PATH from
        logger_name (str): The logger to configure
    Returns:
        logging.Logger: The configured logger
    """

    log_level = logging.DEBUG if settings.DEBUG else logging.INFO
    logger = logging.getLogger(logger_name)
    logger.handlers = []

    if settings.LOG_TO_FILE:
        log_dir = os.path.dirname(settings.LOG_PATH)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(settings.LOG_PATH, maxBytes=10_000_000, backupCount=5)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]")
        )
        file_handler.setLevel(log_level)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    console_handler.setLevel(log_level)

    logger.addHandler(console_handler)
    logger.setLevel(log_level)
    return logger
