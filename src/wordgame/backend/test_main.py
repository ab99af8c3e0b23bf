"""
Tests for the server entry point.
"""

from wordgame.backend import main
from wordgame.config import load_settings


def test_build_app_configures_logging(monkeypatch):
    levels = []
    monkeypatch.setattr(main, "configure_logging", levels.append)

    app = main.build_app()

    assert levels == [load_settings().log_level]
    assert app.state.settings == load_settings()
