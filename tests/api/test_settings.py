"""
Tests for API settings.
"""

from __future__ import annotations

import pytest

from docspine import __version__
from docspine.api.settings import DocSpineSettings, load_settings
from docspine.core.errors import InvalidConfigError, MissingConfigError

_DB_ENV = (
    "MONGODB_URI",
    "DOCSPINE_MONGODB_URI",
    "DATABASE_NAME",
    "MONGODB_DB_NAME",
    "DOCSPINE_DATABASE_NAME",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No database variables in the environment and no ``.env`` nearby."""
    monkeypatch.chdir(tmp_path)
    for name in _DB_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDocSpineSettings:
    def test_defaults(self, settings):
        assert settings.host == "127.0.0.1"
        assert settings.port == 3000
        assert settings.entities == ["users", "games"]
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is None
        assert settings.server_selection_timeout_ms == 5000
        assert settings.shutdown_grace_s == 10
        assert settings.api_version == __version__

    def test_custom_values(self):
        s = DocSpineSettings(
            mongodb_uri="mongodb://db:27017",
            database_name="games",
            port=9000,
            debug=True,
            entities=["games"],
            _env_file=None,
        )
        assert s.port == 9000
        assert s.debug is True
        assert s.entities == ["games"]

    def test_env_prefix(self):
        """Non-database settings read DOCSPINE_ prefixed env vars."""
        assert DocSpineSettings.model_config["env_prefix"] == "DOCSPINE_"


class TestEnvironment:
    def test_crud_variant_names(self, clean_env):
        clean_env.setenv("MONGODB_URI", "mongodb://crud:27017")
        clean_env.setenv("DATABASE_NAME", "crud")
        s = load_settings()
        assert s.mongodb_uri == "mongodb://crud:27017"
        assert s.database_name == "crud"

    def test_game_variant_database_name(self, clean_env):
        clean_env.setenv("MONGODB_URI", "mongodb://games:27017")
        clean_env.setenv("MONGODB_DB_NAME", "gamestore")
        assert load_settings().database_name == "gamestore"

    def test_database_name_wins_over_game_variant_name(self, clean_env):
        clean_env.setenv("MONGODB_URI", "mongodb://x:27017")
        clean_env.setenv("DATABASE_NAME", "first")
        clean_env.setenv("MONGODB_DB_NAME", "second")
        assert load_settings().database_name == "first"

    def test_prefixed_knobs(self, clean_env):
        clean_env.setenv("MONGODB_URI", "mongodb://x:27017")
        clean_env.setenv("DATABASE_NAME", "db")
        clean_env.setenv("DOCSPINE_PORT", "8080")
        clean_env.setenv("DOCSPINE_ENTITIES", '["users"]')
        clean_env.setenv("DOCSPINE_LOG_JSON", "true")
        s = load_settings()
        assert s.port == 8080
        assert s.entities == ["users"]
        assert s.log_json is True

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text(
            "MONGODB_URI=mongodb://dotenv:27017\nDATABASE_NAME=fromfile\n"
        )
        s = load_settings()
        assert s.mongodb_uri == "mongodb://dotenv:27017"
        assert s.database_name == "fromfile"


class TestLoadSettingsErrors:
    def test_missing_uri(self, clean_env):
        clean_env.setenv("DATABASE_NAME", "db")
        with pytest.raises(MissingConfigError) as exc_info:
            load_settings()
        assert exc_info.value.key == "MONGODB_URI"
        assert exc_info.value.code == "CONFIG"

    def test_missing_database_name(self, clean_env):
        clean_env.setenv("MONGODB_URI", "mongodb://x:27017")
        with pytest.raises(MissingConfigError) as exc_info:
            load_settings()
        assert exc_info.value.key == "DATABASE_NAME or MONGODB_DB_NAME"

    def test_missing_everything_reports_uri_first(self, clean_env):
        with pytest.raises(MissingConfigError, match="MONGODB_URI"):
            load_settings()

    def test_invalid_value(self, clean_env):
        clean_env.setenv("MONGODB_URI", "mongodb://x:27017")
        clean_env.setenv("DATABASE_NAME", "db")
        clean_env.setenv("DOCSPINE_PORT", "not-a-port")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_settings()
        assert exc_info.value.key == "port"
        assert exc_info.value.value == "not-a-port"
