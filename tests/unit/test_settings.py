"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "LOGIN_PATH",
    "LOCAL_STORE_PATH",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_anon_key is None

    def test_dashboard_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.login_path == "/login"
        assert settings.local_store_path == "~/.fitness-dashboard/local_storage.yaml"

    def test_sentry_dsn_default_to_none(self, clean_env):
        assert Settings(_env_file=None).sentry_dsn is None


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_reads_supabase_credentials(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://fitness.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")

        settings = Settings(_env_file=None)

        assert settings.supabase_url == "https://fitness.supabase.co"
        assert settings.supabase_anon_key == "anon-key"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SUPABASE_URL=https://fitness.supabase.co\nLOGIN_PATH=/sign-in\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.supabase_url == "https://fitness.supabase.co"
        assert settings.login_path == "/sign-in"


@pytest.mark.unit
class TestSettingsValidation:
    def test_environment_is_lowercased(self, clean_env):
        assert Settings(environment="PRODUCTION", _env_file=None).environment == "production"

    def test_invalid_environment(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(environment="moon", _env_file=None)

    def test_login_path_must_be_absolute(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(login_path="login", _env_file=None)


@pytest.mark.unit
class TestSettingsHelpers:
    @pytest.mark.parametrize(
        "url,key,expected",
        [
            ("https://fitness.supabase.co", "anon-key", True),
            ("https://fitness.supabase.co", None, False),
            (None, "anon-key", False),
            ("", "", False),
        ],
    )
    def test_is_configured_needs_both_parameters(self, clean_env, url, key, expected):
        settings = Settings(supabase_url=url, supabase_anon_key=key, _env_file=None)
        assert settings.is_configured is expected

    def test_cors_allowed_origins_list(self, clean_env):
        settings = Settings(
            cors_allowed_origins=" https://a.example.com, ,https://b.example.com ",
            _env_file=None,
        )
        assert settings.cors_allowed_origins_list == [
            "https://a.example.com",
            "https://b.example.com",
        ]


@pytest.mark.unit
class TestGetSettings:
    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
