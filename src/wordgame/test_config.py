from wordgame.config import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_DATABASE_URL,
    settings_from_env,
)


def test_defaults():
    settings = settings_from_env({})
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.port == 3000
    assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS
    assert settings.reload is False


def test_environment_overrides():
    settings = settings_from_env(
        {
            "DATABASE_URL": "postgresql://u:p@db:5432/games",
            "PORT": "8080",
            "LOG_LEVEL": "DEBUG",
            "ALLOWED_ORIGINS": "https://a.example, https://b.example",
            "RELOAD": "true",
        }
    )
    assert settings.database_url == "postgresql://u:p@db:5432/games"
    assert settings.port == 8080
    assert settings.log_level == "debug"
    assert settings.allowed_origins == ("https://a.example", "https://b.example")
    assert settings.reload is True


def test_legacy_connection_variable():
    settings = settings_from_env({"DB_CONNECTION": "sqlite:///legacy.db"})
    assert settings.database_url == "sqlite:///legacy.db"
