"""Swallow: replace any failure of a computation with a fallback value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, overload

from itry._report import report_captured
from itry.computation import Deferred, discard, resolve_computation
from itry.config import current_config
from itry.errors import HINTS, ArgumentError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

__all__ = ["swallow"]

T = TypeVar("T")
F = TypeVar("F")


def _checked_callback(on_failure: Any) -> Callable[[Exception], object] | None:
    """Return ``on_failure`` if usable, ``None`` if it should be ignored."""
    if on_failure is None or callable(on_failure):
        return on_failure
    if current_config().validate_callbacks:
        raise ArgumentError(
            f"on_failure must be callable, got {type(on_failure).__name__}",
            hint=HINTS["on_failure"],
        )
    return None


@overload
def swallow(
    computation: Awaitable[T],
    fallback: F,
    on_failure: Callable[[Exception], object] | None = ...,
) -> Coroutine[Any, Any, T | F]: ...


@overload
def swallow(
    computation: Callable[[], Coroutine[Any, Any, T]],
    fallback: F,
    on_failure: Callable[[Exception], object] | None = ...,
) -> Coroutine[Any, Any, T | F]: ...


@overload
def swallow(
    computation: Callable[[], T],
    fallback: F,
    on_failure: Callable[[Exception], object] | None = ...,
) -> T | F: ...


def swallow(computation: Any, fallback: Any, on_failure: Any = None) -> Any:
    """Return the computation's value, or ``fallback`` if it fails.

    ``on_failure`` runs with the failure before the fallback is returned; its
    return value is ignored and anything it raises propagates.
    """
    try:
        callback = _checked_callback(on_failure)
    except ArgumentError:
        discard(computation)
        raise
    resolved = resolve_computation(computation)
    if isinstance(resolved, Deferred):
        return _swallow_deferred(resolved.awaitable, fallback, callback)

    try:
        return resolved.fn()
    except Exception as exc:
        report_captured("swallow", exc)
        if callback is not None:
            callback(exc)
        return fallback


async def _swallow_deferred(
    awaitable: Awaitable[Any],
    fallback: Any,
    callback: Callable[[Exception], object] | None,
) -> Any:
    try:
        return await awaitable
    except Exception as exc:
        report_captured("swallow", exc)
        if callback is not None:
            callback(exc)
        return fallback
