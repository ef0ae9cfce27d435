"""Tap-on-error: observe a failure, then let it propagate untouched."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from itry.computation import Deferred, discard, resolve_computation
from itry.errors import HINTS, ArgumentError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

__all__ = ["tap_error"]

log = logging.getLogger(__name__)

T = TypeVar("T")


@overload
def tap_error(
    computation: Awaitable[T], on_failure: Callable[[Exception], object]
) -> Coroutine[Any, Any, T]: ...


@overload
def tap_error(
    computation: Callable[[], Coroutine[Any, Any, T]],
    on_failure: Callable[[Exception], object],
) -> Coroutine[Any, Any, T]: ...


@overload
def tap_error(
    computation: Callable[[], T], on_failure: Callable[[Exception], object]
) -> T: ...


def tap_error(computation: Any, on_failure: Any) -> Any:
    """Return the computation's value; on failure call ``on_failure`` and re-raise.

    The original failure is re-raised as-is. If ``on_failure`` itself raises,
    that exception propagates instead, with the original as its context.
    """
    if not callable(on_failure):
        discard(computation)
        raise ArgumentError(
            f"on_failure must be callable, got {type(on_failure).__name__}",
            hint=HINTS["tap_on_failure"],
        )
    resolved = resolve_computation(computation)
    if isinstance(resolved, Deferred):
        return _tap_error_deferred(resolved.awaitable, on_failure)

    try:
        return resolved.fn()
    except Exception as exc:
        log.debug("tap_error observed %s", type(exc).__name__)
        on_failure(exc)
        raise


async def _tap_error_deferred(
    awaitable: Awaitable[Any], on_failure: Callable[[Exception], object]
) -> Any:
    try:
        return await awaitable
    except Exception as exc:
        log.debug("tap_error observed %s", type(exc).__name__)
        on_failure(exc)
        raise
