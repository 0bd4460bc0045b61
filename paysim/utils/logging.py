"""Structured logging configuration"""

import logging
import json
import os
from datetime import datetime
from typing import Any, Dict


class StructuredLogger:
    """Structured JSON logger for the checkout simulator"""

    def __init__(self, name: str, level: str = "INFO"):
        self.logger = logging.getLogger(name)
        level_value = logging.getLevelName(level.upper())
        valid_level = isinstance(level_value, int)
        self.logger.setLevel(level_value if valid_level else logging.INFO)

        # One console handler per named logger, even if get_logger is called repeatedly
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)
            self.logger.propagate = False

        if not valid_level:
            self.warning(f"Unknown log level {level!r}, using INFO")

    def log(self, level: str, message: str, **kwargs):
        """Log structured message"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now().isoformat(),
            "level": level.upper(),
            "message": message,
            **kwargs
        }

        getattr(self.logger, level.lower())(json.dumps(log_data, default=str))

    def info(self, message: str, **kwargs):
        self.log("info", message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.log("warning", message, **kwargs)

    def error(self, message: str, **kwargs):
        self.log("error", message, **kwargs)

    def debug(self, message: str, **kwargs):
        self.log("debug", message, **kwargs)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter"""

    def format(self, record):
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def get_logger(name: str) -> StructuredLogger:
    """Get or create structured logger"""
    log_level = os.getenv("LOG_LEVEL", "INFO")
    return StructuredLogger(name, log_level)
