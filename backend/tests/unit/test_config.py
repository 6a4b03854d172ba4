import pytest
from pydantic import ValidationError

from fieldbook import main
from fieldbook.core.config import Settings, get_settings

REQUIRED_ENV = {
    "APP_PORT": "8080",
    "JWT_SECRET": "s3cret",
    "POSTGRES_HOST": "db.internal",
    "POSTGRES_PORT": "5432",
    "POSTGRES_DBNAME": "fieldbook",
    "POSTGRES_USERNAME": "fieldbook",
    "POSTGRES_PASSWORD": "p@ss word",
}


@pytest.fixture
def clean_env(monkeypatch):
    for key in list(REQUIRED_ENV) + ["DATABASE_URL", "LOG_LEVEL", "APP_HOST"]:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def _set_env(monkeypatch, **overrides):
    for key, value in {**REQUIRED_ENV, **overrides}.items():
        monkeypatch.setenv(key, value)


class TestSettings:
    def test_loads_required_values_from_environment(self, clean_env):
        _set_env(clean_env)

        settings = Settings()

        assert settings.app_port == 8080
        assert settings.postgres_port == 5432
        assert settings.jwt_secret.get_secret_value() == "s3cret"
        assert settings.app_host == "0.0.0.0"
        assert settings.access_token_expire_hours == 24

    def test_database_url_is_composed_from_postgres_values(self, clean_env):
        _set_env(clean_env)

        url = Settings().database_url

        assert url.startswith("postgresql+psycopg2://fieldbook:")
        assert "@db.internal:5432/fieldbook" in url
        assert "p%40ss" in url

    def test_database_url_override_wins(self, clean_env):
        _set_env(clean_env, DATABASE_URL="sqlite:///./local.db")

        assert Settings().database_url == "sqlite:///./local.db"

    @pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
    def test_missing_required_value_fails(self, clean_env, missing):
        _set_env(clean_env)
        clean_env.delenv(missing)

        with pytest.raises(ValidationError):
            Settings()

    def test_non_numeric_port_fails(self, clean_env):
        _set_env(clean_env, APP_PORT="eighty")

        with pytest.raises(ValidationError):
            Settings()

    def test_out_of_range_port_fails(self, clean_env):
        _set_env(clean_env, POSTGRES_PORT="70000")

        with pytest.raises(ValidationError):
            Settings()

    def test_blank_secret_fails(self, clean_env):
        _set_env(clean_env, JWT_SECRET="   ")

        with pytest.raises(ValidationError):
            Settings()

    def test_log_level_is_normalized(self, clean_env):
        _set_env(clean_env, LOG_LEVEL="debug")

        assert Settings().log_level == "DEBUG"


class TestRunFailsFast:
    def test_run_exits_non_zero_without_configuration(self, clean_env):
        served = []
        clean_env.setattr(main.uvicorn, "run", lambda *args, **kwargs: served.append(args))

        with pytest.raises(SystemExit) as exc_info:
            main.run()

        assert exc_info.value.code == 1
        assert served == []

    def test_run_serves_on_configured_port(self, clean_env):
        _set_env(clean_env, DATABASE_URL="sqlite://")
        calls = []
        clean_env.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

        main.run()

        assert calls == [{"host": "0.0.0.0", "port": 8080, "log_level": "info"}]
