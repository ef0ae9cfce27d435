"""Pytest configuration and fixtures.

Provides environment isolation and shared test doubles. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import asyncio
from contextlib import suppress
from dataclasses import dataclass, field
import os
from typing import Any

import pytest

from itry.config import ENV_PREFIX, clear_config_cache

# =============================================================================
# Test Doubles
# =============================================================================


class NonErrorFailure(Exception):
    """A failure that is not one of the builtin error types under test."""


class TypeErrorSubclass(TypeError):
    """Subtype used to check subclass-aware matching."""


@dataclass
class Recorder:
    """Side-effect double that records every failure it is called with."""

    calls: list[Any] = field(default_factory=list)

    def __call__(self, failure: Any) -> str:
        self.calls.append(failure)
        return "ignored"


def failing(exc: BaseException):
    """Return a zero-argument callable that raises ``exc``."""

    def run() -> Any:
        raise exc

    return run


async def rejecting(exc: BaseException) -> Any:
    await asyncio.sleep(0)
    raise exc


async def resolving(value: Any) -> Any:
    await asyncio.sleep(0)
    return value


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_itry_env(monkeypatch):
    """Clear ITRY_* env vars and cached settings around each test."""
    for key in list(os.environ.keys()):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


def pytest_configure(config):
    config.addinivalue_line("markers", "allow_dotenv: let python-dotenv read .env")
