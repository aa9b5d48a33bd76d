"""
Logging configuration for the book toggle service.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from booktoggle.config.settings import WEB_DIR

# Constants
DEFAULT_LOG_DIR = os.path.join(WEB_DIR, "logs")
LOG_FILE_NAME = "booktoggle.log"
MAX_LOG_SIZE = 30 * 1024 * 1024  # 30 MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(log_dir=None, level=None):
    """
    Set up logging for the service.

    Args:
        log_dir: Directory for the rotating log file (defaults to the LOG_DIR env var, then web/logs)
        level: Console log level name (defaults to the LOG_LEVEL env var, then INFO)

    Returns:
        The configured ``booktoggle`` logger
    """
    log_dir = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIR)
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger("booktoggle")

    # Only configure if handlers haven't been added yet
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level, logging.INFO))
        console_handler.setFormatter(formatter)
        console_handler.addFilter(DuplicateFilter())
        logger.addHandler(console_handler)

        try:
            os.makedirs(log_dir, exist_ok=True)
            # delay=True avoids opening the file until the first record
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, LOG_FILE_NAME),
                maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT,
                delay=True
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(DuplicateFilter())
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    return logger

def get_logger(module_name=None):
    """Get a logger under the service namespace"""
    return logging.getLogger(f"booktoggle.{module_name}" if module_name else "booktoggle")
