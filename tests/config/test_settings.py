import pytest

from config.settings import AppSettings, get_boolean_env, get_int_env
from models import ConfigurationError


def test_reasoning_budget_exceeds_default_budget():
    settings = AppSettings()

    assert settings.poll_budget(reason=True) > settings.poll_budget(reason=False)
    assert settings.poll_budget(reason=False) == settings.poll_limit


def test_from_env_reads_credentials_and_timings(monkeypatch):
    monkeypatch.setenv("OPENAI_EMAIL", "user@example.com")
    monkeypatch.setenv("OPENAI_PASSWORD", "hunter2")
    monkeypatch.setenv("ERKUT_API_KEY", "secret")
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("POLL_LIMIT", "10")
    monkeypatch.setenv("POLL_LIMIT_REASON", "20")
    monkeypatch.setenv("CHATGPT_BASE_URL", "https://chat.example.com/")

    settings = AppSettings.from_env()

    assert settings.email == "user@example.com"
    assert settings.password == "hunter2"
    assert settings.api_key == "secret"
    assert settings.is_permissive is True
    assert settings.poll_budget(reason=False) == 10
    assert settings.poll_budget(reason=True) == 20
    assert settings.base_url == "https://chat.example.com"


def test_enforced_mode_outside_development():
    assert AppSettings(environment="production").is_permissive is False


def test_reasoning_budget_must_be_larger():
    with pytest.raises(ConfigurationError):
        AppSettings(poll_limit=300, poll_limit_reason=300)


def test_repeat_threshold_must_be_positive():
    with pytest.raises(ConfigurationError):
        AppSettings(stable_repeat_threshold=0)


def test_require_credentials_lists_missing_values():
    with pytest.raises(ConfigurationError, match="OPENAI_PASSWORD"):
        AppSettings(email="user@example.com").require_credentials()


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "yes")
    monkeypatch.setenv("SOME_INT", "not-a-number")

    assert get_boolean_env("SOME_FLAG") is True
    assert get_boolean_env("UNSET_FLAG", default=True) is True
    assert get_int_env("SOME_INT", 7) == 7
