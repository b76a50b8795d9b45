"""
Structured Logging Configuration
JSON logging for capacity summaries
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger


def setup_structured_logging(
    log_level: str = "INFO",
    json_format: Optional[bool] = None,
    extra_fields: Optional[dict] = None
) -> logging.Logger:
    """
    Setup structured logging with JSON format
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Force JSON format (None = auto-detect from LOG_FORMAT env)
        extra_fields: Additional fields to include in all log entries
    
    Returns:
        Configured root logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    if json_format is None:
        log_format = os.getenv('LOG_FORMAT', 'json').lower()
        use_json = log_format in ('json', 'structured')
    else:
        use_json = json_format
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    
    if use_json:
        format_string = '%(asctime)s %(levelname)s %(name)s %(message)s'
        formatter = jsonlogger.JsonFormatter(format_string, static_fields=extra_fields or {})
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    handler.setFormatter(formatter)
    
    root_logger.addHandler(handler)
    root_logger.propagate = False
    
    return root_logger


class ContextAdapter(logging.LoggerAdapter):
    """Adds a fixed context to every log record"""
    
    def process(self, msg, kwargs):
        extra = kwargs.setdefault('extra', {})
        extra.update(self.extra)
        return msg, kwargs


def get_logger(name: str, extra_context: Optional[dict] = None):
    """
    Get a logger with optional extra context
    
    Args:
        name: Logger name (usually __name__)
        extra_context: Additional context to include in all log messages
    
    Returns:
        Logger or LoggerAdapter instance
    """
    logger = logging.getLogger(name)
    if extra_context:
        return ContextAdapter(logger, extra_context)
    return logger
