"""
Configuration Loader
Reads capacity analyzer settings from the environment
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from cluster_capacity.config_validator import ConfigValidator

logger = logging.getLogger(__name__)


@dataclass
class CapacityConfig:
    """Capacity analyzer configuration"""
    attribution_source: str = "nominated"
    exclude_daemonsets: bool = False
    exclude_static_pods: bool = False
    log_level: str = "INFO"
    log_format: str = "json"


class ConfigLoader:
    """Load configuration from environment variables"""
    
    def __init__(self):
        self.config: Optional[CapacityConfig] = None
        self.config_version: int = 0
    
    def load_config(self) -> CapacityConfig:
        """Load and validate configuration from environment variables"""
        logger.info("Loading configuration...")
        
        attribution_source = ConfigValidator.validate_attribution_source(
            os.getenv("CAPACITY_ATTRIBUTION", "nominated")
        )
        exclude_daemonsets = ConfigValidator.validate_bool(
            os.getenv("EXCLUDE_DAEMONSETS", "false"), "EXCLUDE_DAEMONSETS"
        )
        exclude_static_pods = ConfigValidator.validate_bool(
            os.getenv("EXCLUDE_STATIC_PODS", "false"), "EXCLUDE_STATIC_PODS"
        )
        log_level = ConfigValidator.validate_log_level(os.getenv("LOG_LEVEL", "INFO"))
        log_format = ConfigValidator.validate_log_format(os.getenv("LOG_FORMAT", "json"))
        
        self.config = CapacityConfig(
            attribution_source=attribution_source,
            exclude_daemonsets=exclude_daemonsets,
            exclude_static_pods=exclude_static_pods,
            log_level=log_level,
            log_format=log_format
        )
        self.config_version += 1
        
        logger.info(
            f"Configuration loaded (version {self.config_version}): "
            f"attribution={self.config.attribution_source}, "
            f"exclude_daemonsets={self.config.exclude_daemonsets}, "
            f"exclude_static_pods={self.config.exclude_static_pods}"
        )
        
        return self.config
    
    def get_config(self) -> CapacityConfig:
        """Get current configuration"""
        if not self.config:
            return self.load_config()
        return self.config
    
    def get_config_version(self) -> int:
        """Get current configuration version"""
        return self.config_version


# Global config loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get or create global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
