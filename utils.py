"""
Helpers that do not belong to the simulation or rendering itself.
"""
import logging
import logging.handlers
import os

import constants


def setup_logging(level=constants.LOG_LEVEL, log_file=constants.LOG_FILE, log_format=constants.LOG_FORMAT):
    """
    Configure the root logger with a console handler and, when `log_file`
    is given, a rotating file handler (1MB, 5 backups).
    """
    level = str(level).upper()
    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.debug("Logging initialized at %s (file: %s)", level, log_file)
