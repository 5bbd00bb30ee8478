import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from places_brief.core.config import settings

class LoggerConfig:
    """
    Sets up the places-brief logger: console on stderr, plus a rotating file
    when a log directory is configured. stdout is left to the places output.
    """
    def __init__(
        self, level=20, logger_name="PLACES-BRIEF", log_directory="logs", log_file="places_brief.log"
    ):
        try:
            self.logger_name = logger_name
            self.level = level
            self.log_directory = os.path.abspath(log_directory) if log_directory else None
            self.log_file_path = os.path.join(self.log_directory, log_file) if self.log_directory else None
            self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

            self.logger = logging.getLogger(self.logger_name)
            self.setup_logger()
        except Exception as e:
            print(f"Failed to initialize logger: {str(e)}", file=sys.stderr)

    def _handlers(self) -> list:
        handlers = [logging.StreamHandler(sys.stderr)]

        if self.log_file_path:
            os.makedirs(self.log_directory, exist_ok=True)
            handlers.append(RotatingFileHandler(
                self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
            ))

        return handlers

    def setup_logger(self):
        try:
            # Avoid adding duplicate handlers if re-initialized
            if not self.logger.handlers:
                formatter = logging.Formatter(self.log_format)
                for handler in self._handlers():
                    handler.setLevel(self.level)
                    handler.setFormatter(formatter)
                    self.logger.addHandler(handler)

            self.logger.setLevel(self.level)
            self.logger.propagate = False

        except Exception as e:
            print(f"Failed to setup logger handlers: {str(e)}", file=sys.stderr)

    def log(self, level: int, message: str, extra: dict = None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message)

# Initialize Logger; LOG_DIRECTORY="" keeps logs on the console only
logs = LoggerConfig(
    level=settings.LOGGER,
    logger_name="PLACES-BRIEF",
    log_directory=settings.LOG_DIRECTORY,
    log_file="places_brief.log"
)
