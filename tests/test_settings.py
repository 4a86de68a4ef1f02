"""Tests for output options."""

import pytest

from extension_docs.config import settings
from extension_docs.config.settings import get_all_options, get_option, set_option


class TestOutputOptions:
    """Test option lookup and overrides."""

    def test_option_names(self):
        """Test documented option names are available."""
        assert set(get_all_options()) == {"pretty_print", "xml_declaration", "encoding"}

    def test_env_flag(self, monkeypatch):
        """Test boolean environment values are case-insensitive."""
        monkeypatch.setenv("EXTENSION_DOCS_PRETTY_PRINT", "TRUE")
        assert settings._env_flag("EXTENSION_DOCS_PRETTY_PRINT", "false") is True

        monkeypatch.delenv("EXTENSION_DOCS_PRETTY_PRINT")
        assert settings._env_flag("EXTENSION_DOCS_PRETTY_PRINT", "false") is False

    def test_unknown_option(self):
        """Test unknown option names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown output option"):
            get_option("indent")

        with pytest.raises(KeyError, match="Available options"):
            set_option("indent", 2)

    def test_set_option(self, monkeypatch):
        """Test options can be overridden programmatically."""
        monkeypatch.setattr(settings, "OUTPUT_OPTIONS", dict(settings.OUTPUT_OPTIONS))

        set_option("encoding", "UTF-16")

        assert get_option("encoding") == "UTF-16"

    def test_get_all_options_is_copy(self):
        """Test returned options cannot change settings."""
        original = get_option("encoding")

        options = get_all_options()
        options["encoding"] = "ASCII"

        assert get_option("encoding") == original
