"""Configuration resolution tests: defaults, env, overrides, scopes."""

from __future__ import annotations

import asyncio

from pydantic import ValidationError
import pytest

from itry.config import (
    Settings,
    clear_config_cache,
    config_scope,
    current_config,
    load_env,
    resolve_config,
)
from itry.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    cfg = resolve_config()

    assert cfg.validate_callbacks is True
    assert cfg.log_captured is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("off", False)],
)
def test_env_booleans_are_coerced(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("ITRY_LOG_CAPTURED", raw)

    assert load_env() == {"log_captured": expected}


def test_unknown_env_vars_are_ignored(monkeypatch) -> None:
    monkeypatch.setenv("ITRY_NOT_A_SETTING", "1")

    assert load_env() == {}


def test_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv("ITRY_LOG_CAPTURED", "1")

    cfg = resolve_config({"log_captured": False})

    assert cfg.log_captured is False


def test_unknown_override_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as info:
        resolve_config({"colour": "blue"})

    assert "colour" in str(info.value)
    assert info.value.hint is not None


def test_settings_are_immutable() -> None:
    cfg = resolve_config()

    with pytest.raises(ValidationError):
        cfg.log_captured = True  # type: ignore[misc]


def test_env_resolution_is_cached_until_cleared(monkeypatch) -> None:
    assert current_config().log_captured is False

    monkeypatch.setenv("ITRY_LOG_CAPTURED", "1")
    assert current_config().log_captured is False

    clear_config_cache()
    assert current_config().log_captured is True


def test_scope_overrides_and_restores() -> None:
    with config_scope(log_captured=True) as cfg:
        assert current_config() is cfg
        assert cfg.log_captured is True

    assert current_config().log_captured is False


def test_scope_accepts_settings_instance_and_overrides() -> None:
    base = Settings(validate_callbacks=False)

    with config_scope(base) as cfg:
        assert cfg is base

    with config_scope(base, log_captured=True) as cfg:
        assert cfg.validate_callbacks is False
        assert cfg.log_captured is True


@pytest.mark.asyncio
async def test_scopes_are_isolated_between_tasks() -> None:
    seen: dict[str, bool] = {}
    entered = asyncio.Event()

    async def scoped() -> None:
        with config_scope(log_captured=True):
            entered.set()
            await asyncio.sleep(0)
            seen["scoped"] = current_config().log_captured

    async def unscoped() -> None:
        await entered.wait()
        seen["unscoped"] = current_config().log_captured

    await asyncio.gather(scoped(), unscoped())

    assert seen == {"scoped": True, "unscoped": False}
