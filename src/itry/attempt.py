"""Try-and-classify: run a computation and return its outcome as a tuple.

Usage::

    data, err = itry(lambda: json.loads(raw))
    if err:
        ...

    data, missing, bad = await itry(fetch(url), KeyError, ValueError)

On success the result is ``(value,)``. On failure the failure lands at the
position of the first matching kind, preceded by ``NOTHING``; with no kinds
it is always captured as ``(NOTHING, failure)``. A failure that matches none
of the given kinds propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, overload

from itry._report import report_captured
from itry.classify import classify
from itry.computation import Deferred, discard, resolve_computation
from itry.discriminators import normalize_kinds
from itry.errors import ArgumentError
from itry.types import Classification

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

    from itry.discriminators import Discriminator

__all__ = ["ftry", "itry"]

T = TypeVar("T")


def _capturable(
    exc: BaseException, discriminators: tuple[Discriminator, ...]
) -> bool:
    """Only listed kinds may capture a non-``Exception`` such as cancellation."""
    return bool(discriminators) or isinstance(exc, Exception)


@overload
def itry(
    computation: Awaitable[T], *kinds: Any
) -> Coroutine[Any, Any, Classification]: ...


@overload
def itry(
    computation: Callable[[], Coroutine[Any, Any, T]], *kinds: Any
) -> Coroutine[Any, Any, Classification]: ...


@overload
def itry(computation: Callable[[], T], *kinds: Any) -> Classification: ...


def itry(computation: Any, *kinds: Any) -> Any:
    """Run ``computation`` and classify its failure against ``kinds``.

    Args:
        computation: A zero-argument callable, a coroutine function, or an
            awaitable.
        *kinds: Exception classes, predicates or ``Discriminator`` objects,
            either as separate arguments or as one list/tuple.

    Returns:
        A ``Classification`` for callables; for awaitables, a coroutine that
        resolves to one.

    Raises:
        ArgumentError: ``computation`` or one of ``kinds`` is unusable.
        BaseException: the computation's own failure, when ``kinds`` is non-empty
            and none of them matches.
    """
    try:
        discriminators = normalize_kinds(kinds)
    except ArgumentError:
        discard(computation)
        raise
    resolved = resolve_computation(computation)
    if isinstance(resolved, Deferred):
        return _itry_deferred(resolved.awaitable, discriminators)

    try:
        value = resolved.fn()
    except BaseException as exc:
        if not _capturable(exc, discriminators):
            raise
        result = classify(discriminators, exc)
        report_captured("itry", exc)
        return result
    return Classification.success(value)


async def _itry_deferred(
    awaitable: Awaitable[Any], discriminators: tuple[Discriminator, ...]
) -> Classification:
    try:
        value = await awaitable
    except BaseException as exc:
        if not _capturable(exc, discriminators):
            raise
        result = classify(discriminators, exc)
        report_captured("itry", exc)
        return result
    return Classification.success(value)


ftry = itry
