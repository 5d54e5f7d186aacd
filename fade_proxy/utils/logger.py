"""Logger setup for the fade proxy"""

import logging
import os
import sys
from typing import Optional

from .. import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Setup logging configuration"""
    level = (level or config.LOG_LEVEL).upper()
    log_file = config.LOG_FILE if log_file is None else log_file

    # Root logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Drop handlers from a previous call
    for handler in list(logger.handlers):
        if getattr(handler, '_fade_proxy', False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler._fade_proxy = True
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        try:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            file_handler._fade_proxy = True
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create file handler: {e}")

    logger.info("Logging configured")
