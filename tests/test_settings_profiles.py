from __future__ import annotations

from taskdesk.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True

    test_profile = Settings(environment="test")
    assert test_profile.environment == "test"
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.environment == "ci"
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="testing").environment == "test"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    overridden = Settings(environment="test")
    assert overridden.log_level == "ERROR"


def test_allowed_origins_accept_comma_separated_values(monkeypatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example")
    settings = Settings(environment="test")
    assert settings.cors_allow_origins == ["http://a.example", "http://b.example"]


def test_pool_settings_have_bounded_defaults() -> None:
    settings = Settings(environment="test")
    assert settings.db_pool_size == 10
    assert settings.db_pool_timeout == 30.0
    assert settings.db_pool_recycle == 60


def test_router_prefix_is_normalised() -> None:
    assert Settings(api_prefix="api/").router_prefix == "/api"
    assert Settings(api_prefix="").router_prefix == ""
