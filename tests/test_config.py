from __future__ import annotations

import pytest

from config import get_settings_module, load_settings


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("whatever", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_testing_settings_are_loadable():
    settings = load_settings("config.testing")

    assert settings.TESTING is True
    assert settings.AUTO_INIT_DB is False
    assert settings.PASSWORD_MIN_LENGTH == 4
