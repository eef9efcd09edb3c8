"""
Test settings loading from the environment.

Verifies defaults, environment overrides and validation of the
AutoFix settings sections.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.settings import AutoFixSettings, MockCollaboratorSettings, get_app_settings


def _collect_alias_map(model) -> dict[str, str]:
    """
    Return map: ENV_ALIAS -> field_name for a Pydantic model.
    """
    alias_map: dict[str, str] = {}
    for field_name, field in type(model).model_fields.items():
        alias = field.alias
        if alias:
            alias_map[alias] = field_name
    return alias_map


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for cls in (AutoFixSettings, MockCollaboratorSettings):
        for field in cls.model_fields.values():
            monkeypatch.delenv(field.alias, raising=False)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults():
    settings = AutoFixSettings(_env_file=None)

    assert settings.confidence_threshold == 90.0
    assert settings.audit_actor == "AutoFixWorkflow"
    assert settings.default_branch == "main"
    assert settings.commit_summary_length == 50
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AUTOFIX_CONFIDENCE_THRESHOLD", "75.5")
    monkeypatch.setenv("AUTOFIX_DEFAULT_BRANCH", "trunk")
    monkeypatch.setenv("AUTOFIX_LOG_LEVEL", "debug")

    settings = AutoFixSettings(_env_file=None)

    assert settings.confidence_threshold == 75.5
    assert settings.default_branch == "trunk"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env_key, value",
    [
        ("AUTOFIX_CONFIDENCE_THRESHOLD", "120"),
        ("AUTOFIX_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, env_key, value):
    monkeypatch.setenv(env_key, value)

    with pytest.raises(ValidationError):
        AutoFixSettings(_env_file=None)


def test_mock_settings_reject_negative_latency(monkeypatch):
    monkeypatch.setenv("AUTOFIX_MOCK_FIX_LATENCY", "-1")

    with pytest.raises(ValidationError):
        MockCollaboratorSettings(_env_file=None)


def test_every_alias_is_prefixed_and_unique():
    settings = get_app_settings()

    aliases: list[str] = []
    for model in (settings.autofix, settings.mocks):
        aliases.extend(_collect_alias_map(model))

    assert len(aliases) == len(set(aliases))
    assert all(alias.startswith("AUTOFIX_") for alias in aliases)


def test_app_settings_are_cached():
    assert get_app_settings() is get_app_settings()
