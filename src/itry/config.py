"""Configuration schema and resolution.

Settings resolve as: defaults < ``ITRY_*`` environment variables (optionally
from a ``.env`` file) < programmatic overrides. The resolved ``Settings`` is
immutable; ``config_scope`` swaps it for the current context only.

Example:
    with config_scope(log_captured=True):
        data, err = itry(load)
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from itry.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "clear_config_cache",
    "config_scope",
    "current_config",
    "load_env",
    "resolve_config",
]

log = logging.getLogger(__name__)

ENV_PREFIX = "ITRY_"


class Settings(BaseModel):
    """Validated, immutable library settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: Reject non-callable ``on_failure`` arguments instead of ignoring them.
    validate_callbacks: bool = Field(default=True)
    #: Log failures that ``itry`` captures or ``swallow`` replaces at WARNING,
    #: with traceback. Otherwise they are logged at DEBUG.
    log_captured: bool = Field(default=False)


_SCOPED: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "itry_settings", default=None
)

_DOTENV_LOADED: bool = False


def _coerce_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once, ignoring a missing or unreadable file."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    try:
        from dotenv import load_dotenv

        load_dotenv()
    except Exception as exc:
        log.debug("Skipping .env loading: %s", exc)


def load_env() -> Mapping[str, Any]:
    """Read ``ITRY_*`` variables for known fields, coercing booleans.

    Unknown ``ITRY_*`` variables are ignored.
    """
    _try_load_dotenv()
    config: dict[str, Any] = {}
    for name, info in Settings.model_fields.items():
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        config[name] = _coerce_bool(raw) if info.annotation is bool else raw
    return config


def resolve_config(overrides: Mapping[str, Any] | None = None) -> Settings:
    """Resolve settings from the environment and ``overrides``."""
    merged = {**load_env(), **(overrides or {})}
    try:
        return Settings(**merged)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid itry settings: {fields}",
            hint=f"Known settings: {', '.join(sorted(Settings.model_fields))}",
        ) from exc


@cache
def _env_config() -> Settings:
    return resolve_config()


def clear_config_cache() -> None:
    """Forget the environment-resolved settings so the next call re-reads them."""
    _env_config.cache_clear()


def current_config() -> Settings:
    """Return the settings active in this context."""
    scoped = _SCOPED.get()
    if scoped is not None:
        return scoped
    return _env_config()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | Settings | None = None,
    **overrides: Any,
) -> Generator[Settings]:
    """Run a block with specific settings, without touching other contexts.

    Backed by a ``ContextVar``, so concurrent asyncio tasks each see their
    own scope.
    """
    if isinstance(cfg_or_overrides, Settings):
        cfg = cfg_or_overrides
        if overrides:
            cfg = resolve_config({**cfg.model_dump(), **overrides})
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})
    token = _SCOPED.set(cfg)
    try:
        yield cfg
    finally:
        _SCOPED.reset(token)
