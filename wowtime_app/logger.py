# wowtime_app/logger.py

import logging
from .config import AppConfig

PACKAGE_LOGGER = "wowtime_app"

class AppLogger:
    """Application logging manager."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.setup_logging()

    def setup_logging(self):
        """Configure the package logger."""
        log_format = "%(asctime)s [%(levelname)s] %(message)s"
        date_format = "%Y-%m-%d %H:%M:%S"

        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.INFO))

        # Drop handlers from an earlier setup
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(log_format, date_format))
        logger.addHandler(console_handler)

        # File handler (if enabled)
        if self.config.save_logs:
            file_handler = logging.FileHandler(self.config.log_file)
            file_handler.setFormatter(logging.Formatter(log_format, date_format))
            logger.addHandler(file_handler)

        logger.info(f"Starting {self.config.app_name} v{self.config.version}")
        return logger

    @staticmethod
    def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
        """Get a logger instance."""
        return logging.getLogger(name)
