import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("development", "config.development"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected
