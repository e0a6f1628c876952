"""Tests for the server entry point."""

import logging
from unittest.mock import MagicMock

import pytest

import main
from core.config import reload_config


@pytest.fixture
def fake_run(monkeypatch):
    """Replace server.run so nothing starts."""
    run = MagicMock()
    monkeypatch.setattr(main.server, "run", run)
    return run


class TestConfigureLogging:
    """Test root logger setup."""

    def test_sets_root_level(self):
        main.configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

        main.configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING


class TestMain:
    """Test transport selection."""

    def test_stdio_by_default(self, env_override, fake_run):
        env_override(MDCONVERT_TRANSPORT=None, MDCONVERT_LOG_LEVEL=None)
        reload_config()

        main.main()

        fake_run.assert_called_once_with(transport="stdio")

    def test_streamable_http(self, env_override, fake_run):
        env_override(MDCONVERT_TRANSPORT="streamable-http", MDCONVERT_HOST="0.0.0.0", MDCONVERT_PORT="8123")
        reload_config()
        try:
            main.main()
        finally:
            env_override(MDCONVERT_TRANSPORT=None, MDCONVERT_HOST=None, MDCONVERT_PORT=None)
            reload_config()

        fake_run.assert_called_once_with(transport="streamable-http", host="0.0.0.0", port=8123)

    def test_tools_are_registered(self, env_override, fake_run):
        env_override(MDCONVERT_TRANSPORT=None)
        reload_config()

        main.main()

        import gdocs

        assert gdocs.convert_markdown_selection.name == "convert_markdown_selection"
