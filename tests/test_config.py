# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import DEFAULT_STATIC_DIR, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove server settings from the environment."""
    for name in ("PORT", "HOST", "STATIC_DIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings loading."""

    def test_port_defaults_to_3000(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.PORT == 3000

    def test_port_from_environment(self, clean_env):
        clean_env.setenv("PORT", "8080")
        assert Settings(_env_file=None).PORT == 8080

    def test_empty_port_uses_default(self, clean_env):
        clean_env.setenv("PORT", "")
        assert Settings(_env_file=None).PORT == 3000

    @pytest.mark.parametrize("port", ["0", "70000", "not-a-port"])
    def test_invalid_port(self, clean_env, port):
        clean_env.setenv("PORT", port)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.HOST == "0.0.0.0"
        assert settings.STATIC_DIR == DEFAULT_STATIC_DIR
        assert settings.index_file == DEFAULT_STATIC_DIR / "index.html"

    def test_static_dir_from_environment(self, clean_env, tmp_path):
        clean_env.setenv("STATIC_DIR", str(tmp_path))
        assert Settings(_env_file=None).STATIC_DIR == tmp_path

    def test_environment_flags(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "production")
        settings = Settings(_env_file=None)

        assert settings.is_production
        assert not settings.is_development

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=5050\n", encoding="utf-8")

        assert Settings(_env_file=env_file).PORT == 5050

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
