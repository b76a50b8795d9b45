"""
Tests for config loader and validator
"""
import os
import pytest
from unittest.mock import patch


class TestConfigValidator:
    """Test ConfigValidator"""
    
    def test_attribution_source(self):
        from cluster_capacity.config_validator import ConfigValidator
        
        assert ConfigValidator.validate_attribution_source('nominated') == 'nominated'
        assert ConfigValidator.validate_attribution_source(' Bound ') == 'bound'
        with pytest.raises(ValueError, match='CAPACITY_ATTRIBUTION'):
            ConfigValidator.validate_attribution_source('scheduled')
    
    def test_bool(self):
        from cluster_capacity.config_validator import ConfigValidator
        
        assert ConfigValidator.validate_bool('true', 'FLAG') is True
        assert ConfigValidator.validate_bool('YES', 'FLAG') is True
        assert ConfigValidator.validate_bool('false', 'FLAG') is False
        assert ConfigValidator.validate_bool('', 'FLAG') is False
        with pytest.raises(ValueError, match='FLAG'):
            ConfigValidator.validate_bool('maybe', 'FLAG')
    
    def test_log_level(self):
        from cluster_capacity.config_validator import ConfigValidator
        
        assert ConfigValidator.validate_log_level('debug') == 'DEBUG'
        with pytest.raises(ValueError, match='LOG_LEVEL'):
            ConfigValidator.validate_log_level('verbose')
    
    def test_log_format(self):
        from cluster_capacity.config_validator import ConfigValidator
        
        assert ConfigValidator.validate_log_format('JSON') == 'json'
        with pytest.raises(ValueError, match='LOG_FORMAT'):
            ConfigValidator.validate_log_format('xml')


class TestConfigLoader:
    """Test ConfigLoader functionality"""
    
    def test_defaults(self):
        from cluster_capacity.config_loader import ConfigLoader
        
        with patch.dict(os.environ, {}, clear=True):
            config = ConfigLoader().load_config()
        
        assert config.attribution_source == 'nominated'
        assert config.exclude_daemonsets is False
        assert config.exclude_static_pods is False
        assert config.log_level == 'INFO'
        assert config.log_format == 'json'
    
    def test_env_overrides(self):
        from cluster_capacity.config_loader import ConfigLoader
        
        env = {
            'CAPACITY_ATTRIBUTION': 'bound',
            'EXCLUDE_DAEMONSETS': 'true',
            'EXCLUDE_STATIC_PODS': '1',
            'LOG_LEVEL': 'debug',
            'LOG_FORMAT': 'text',
        }
        with patch.dict(os.environ, env, clear=True):
            config = ConfigLoader().load_config()
        
        assert config.attribution_source == 'bound'
        assert config.exclude_daemonsets is True
        assert config.exclude_static_pods is True
        assert config.log_level == 'DEBUG'
        assert config.log_format == 'text'
    
    def test_invalid_env_raises(self):
        from cluster_capacity.config_loader import ConfigLoader
        
        with patch.dict(os.environ, {'CAPACITY_ATTRIBUTION': 'random'}, clear=True):
            with pytest.raises(ValueError):
                ConfigLoader().load_config()
    
    def test_version_increments(self):
        from cluster_capacity.config_loader import ConfigLoader
        
        loader = ConfigLoader()
        with patch.dict(os.environ, {}, clear=True):
            loader.load_config()
            loader.load_config()
        
        assert loader.get_config_version() == 2
    
    def test_get_config_loads_once(self):
        from cluster_capacity.config_loader import ConfigLoader
        
        loader = ConfigLoader()
        with patch.dict(os.environ, {}, clear=True):
            first = loader.get_config()
            second = loader.get_config()
        
        assert first is second
        assert loader.get_config_version() == 1
    
    def test_global_loader(self):
        from cluster_capacity.config_loader import get_config_loader
        
        assert get_config_loader() is get_config_loader()
