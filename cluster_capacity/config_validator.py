"""
Configuration Validator
Validates environment variables used by the capacity analyzer
"""

import logging

from cluster_capacity.attribution import ATTRIBUTION_SOURCES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "structured", "text")
TRUE_VALUES = ("true", "1", "yes")
FALSE_VALUES = ("false", "0", "no", "")


class ConfigValidator:
    """Validate configuration values"""
    
    @staticmethod
    def validate_attribution_source(value: str) -> str:
        """Validate pod attribution source name"""
        name = (value or "").strip().lower()
        if name not in ATTRIBUTION_SOURCES:
            raise ValueError(
                f"Invalid CAPACITY_ATTRIBUTION: {value}. "
                f"Must be one of {', '.join(sorted(ATTRIBUTION_SOURCES))}"
            )
        return name
    
    @staticmethod
    def validate_bool(value: str, name: str) -> bool:
        """Validate boolean flag"""
        normalized = (value or "").strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
        raise ValueError(f"Invalid {name}: {value}. Must be true or false")
    
    @staticmethod
    def validate_log_level(value: str) -> str:
        """Validate log level"""
        level = (value or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL: {value}. Must be one of {', '.join(LOG_LEVELS)}")
        return level
    
    @staticmethod
    def validate_log_format(value: str) -> str:
        """Validate log format"""
        log_format = (value or "").strip().lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"Invalid LOG_FORMAT: {value}. Must be one of {', '.join(LOG_FORMATS)}")
        return log_format
