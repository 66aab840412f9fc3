"""
Logging configuration for the reporting API.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import logging
from logging.handlers import RotatingFileHandler
from assessment_reports.config.settings import LogConfig

ROOT_LOGGER_NAME = "assessment_reports"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(log_dir=None, level=None):
    """
    Set up logging for the package.

    Args:
        log_dir: Directory for the rotating log file, defaults to LOG_DIR
        level: Log level name, defaults to LOG_LEVEL

    Returns:
        Package logger configured with console and file handlers
    """
    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if handlers haven't been added yet
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, (level or LogConfig.LEVEL).upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_dir = log_dir or LogConfig.DIR
    try:
        os.makedirs(log_dir, exist_ok=True)
        # delay=True avoids opening the file until the first record
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, LogConfig.FILE_NAME),
            maxBytes=LogConfig.MAX_BYTES,
            backupCount=LogConfig.BACKUP_COUNT,
            delay=True
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not set up file logging: {e}")

    return logger

def get_logger(module_name=None):
    """Get a logger below the package logger"""
    name = f"{ROOT_LOGGER_NAME}.{module_name}" if module_name else ROOT_LOGGER_NAME
    return logging.getLogger(name)
