"""Tests for settings and logging configuration."""

import logging

import pytest

from content_permissions.config import ContentPermissionsSettings, LoggingConfig
from content_permissions.config.logging_config import get_log_level_from_verbosity


class TestContentPermissionsSettings:
    """Test cases for environment-driven settings."""
    
    def test_defaults(self, settings):
        """Test default settings."""
        assert settings.cache_max_entries is None
        assert settings.warm_content_types == []
        assert settings.log_cache_hits is False
    
    def test_reads_prefixed_environment(self, monkeypatch):
        """Test values are read from CONTENT_PERMISSIONS_ variables."""
        monkeypatch.setenv("CONTENT_PERMISSIONS_CACHE_MAX_ENTRIES", "50")
        monkeypatch.setenv("CONTENT_PERMISSIONS_WARM_CONTENT_TYPES", "Article, BlogPost")
        monkeypatch.setenv("CONTENT_PERMISSIONS_LOG_CACHE_HITS", "true")
        
        settings = ContentPermissionsSettings(_env_file=None)
        
        assert settings.cache_max_entries == 50
        assert settings.warm_content_types == ["Article", "BlogPost"]
        assert settings.log_cache_hits is True
    
    def test_rejects_non_positive_limit(self):
        """Test the cache limit must be positive."""
        with pytest.raises(ValueError):
            ContentPermissionsSettings(_env_file=None, cache_max_entries=0)


class TestLoggingConfig:
    """Test cases for logging configuration."""
    
    @pytest.mark.parametrize("verbosity,level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("unknown", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        """Test verbosity modes map to log levels."""
        assert get_log_level_from_verbosity(verbosity) == level
    
    def test_explicit_log_level_wins(self, monkeypatch):
        """Test LOG_LEVEL overrides LOG_VERBOSITY."""
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        
        config = LoggingConfig.build_config()
        
        assert config["loggers"]["content_permissions"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["level"] == "DEBUG"
    
    def test_quiet_modules_target_the_service_logger(self, monkeypatch):
        """Test the per-build service logger is held at WARNING outside DEBUG."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
        
        config = LoggingConfig.build_config()
        
        service_logger = "content_permissions.features.permissions.services.dynamic_permission_service"
        assert config["loggers"][service_logger]["level"] == "WARNING"
        
        monkeypatch.setenv("LOG_VERBOSITY", "DEBUG")
        assert LoggingConfig.build_config()["loggers"][service_logger]["level"] == "DEBUG"
    
    def test_configure_sets_library_logger_level(self, monkeypatch):
        """Test configure applies the level to the library logger."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
        
        library_logger = logging.getLogger("content_permissions")
        try:
            LoggingConfig.configure()

            assert library_logger.level == logging.INFO
        finally:
            library_logger.handlers.clear()
            library_logger.setLevel(logging.NOTSET)
            for module in LoggingConfig.DEFAULT_QUIET_MODULES:
                logging.getLogger(module).setLevel(logging.NOTSET)
