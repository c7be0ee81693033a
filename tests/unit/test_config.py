"""Tests for environment configuration helpers."""

import pytest
from shared.config.config import Config, _get_env_bool, _get_env_log_level


class TestConfigHelpers:
    """Tests for environment parsing."""
    
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
    def test_bool_true_values(self, monkeypatch, value):
        """Test accepted true spellings."""
        monkeypatch.setenv("QA_TEST_FLAG", value)
        assert _get_env_bool("QA_TEST_FLAG", "false") is True
    
    @pytest.mark.parametrize("value", ["0", "false", "No", "off", ""])
    def test_bool_false_values(self, monkeypatch, value):
        """Test accepted false spellings."""
        monkeypatch.setenv("QA_TEST_FLAG", value)
        assert _get_env_bool("QA_TEST_FLAG", "true") is False
    
    def test_bool_default(self, monkeypatch):
        """Test that the default applies when unset."""
        monkeypatch.delenv("QA_TEST_FLAG", raising=False)
        assert _get_env_bool("QA_TEST_FLAG", "true") is True
    
    def test_bool_invalid(self, monkeypatch):
        """Test that invalid booleans raise ValueError."""
        monkeypatch.setenv("QA_TEST_FLAG", "maybe")
        with pytest.raises(ValueError, match="Invalid boolean value for QA_TEST_FLAG"):
            _get_env_bool("QA_TEST_FLAG", "false")
    
    def test_log_level_normalized(self, monkeypatch):
        """Test that log levels are upper-cased."""
        monkeypatch.setenv("QA_TEST_LEVEL", "debug")
        assert _get_env_log_level("QA_TEST_LEVEL", "INFO") == "DEBUG"
    
    def test_log_level_invalid(self, monkeypatch):
        """Test that unknown log levels raise ValueError."""
        monkeypatch.setenv("QA_TEST_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Invalid log level"):
            _get_env_log_level("QA_TEST_LEVEL", "INFO")
    
    def test_config_defaults_types(self):
        """Test that config attributes have the expected types."""
        assert isinstance(Config.QA_CACHE_FILE, str)
        assert isinstance(Config.QA_PERSIST_PASSWORDS, bool)
        assert isinstance(Config.LOG_LEVEL, str)
