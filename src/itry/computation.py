"""Entry-time dispatch between immediate and deferred computations."""

from __future__ import annotations

from dataclasses import dataclass
import inspect
from typing import TYPE_CHECKING, Any

from itry.errors import HINTS, ArgumentError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = ["Deferred", "Immediate", "discard", "is_deferred", "resolve_computation"]


@dataclass(frozen=True, slots=True)
class Immediate:
    """A zero-argument callable run synchronously on the caller's stack."""

    fn: Callable[[], Any]


@dataclass(frozen=True, slots=True)
class Deferred:
    """An awaitable owned by the host event loop."""

    awaitable: Awaitable[Any]


def is_deferred(obj: Any) -> bool:
    """Return True for coroutines, Futures, Tasks and other awaitables."""
    return inspect.isawaitable(obj)


def discard(obj: Any) -> None:
    """Close ``obj`` if it is a coroutine that will never be awaited."""
    if inspect.iscoroutine(obj):
        obj.close()


def resolve_computation(obj: Any) -> Immediate | Deferred:
    """Classify ``obj`` once, before any of it runs.

    A coroutine function is called here (it takes no arguments) and its
    coroutine becomes the deferred computation.
    """
    if is_deferred(obj):
        return Deferred(obj)
    if inspect.iscoroutinefunction(obj):
        return Deferred(obj())
    if callable(obj):
        return Immediate(obj)
    raise ArgumentError(
        f"Expected a callable or an awaitable, got {type(obj).__name__}",
        hint=HINTS["computation"],
    )
