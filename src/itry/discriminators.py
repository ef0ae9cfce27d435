"""Failure-kind discriminators.

A discriminator answers one question: does this failure belong to my kind?
Exception classes are the common case and match subclasses too. Predicates
and custom objects with a ``matches`` method cover everything else.
"""

from __future__ import annotations

from dataclasses import dataclass
import inspect
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from itry.errors import HINTS, ArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "Discriminator",
    "KindOf",
    "Predicate",
    "as_discriminator",
    "normalize_kinds",
]


@runtime_checkable
class Discriminator(Protocol):
    """Duck-typed protocol for failure-kind tests."""

    def matches(self, failure: BaseException) -> bool: ...  # noqa: D102


@dataclass(frozen=True, slots=True)
class KindOf:
    """Nominal match: the failure is an instance of ``kind`` or a subclass."""

    kind: type[Any]

    def matches(self, failure: BaseException) -> bool:
        return isinstance(failure, self.kind)


@dataclass(frozen=True, slots=True)
class Predicate:
    """Structural match decided by a callable.

    Errors raised by the callable are not caught; they surface to whoever
    called ``itry``.
    """

    fn: Callable[[BaseException], Any]

    def matches(self, failure: BaseException) -> bool:
        return bool(self.fn(failure))


def as_discriminator(obj: Any) -> Discriminator:
    """Coerce one user-supplied kind into a ``Discriminator``.

    - classes become ``KindOf``
    - objects exposing a callable ``matches`` are used as-is
    - any other callable becomes a ``Predicate``
    """
    if inspect.isclass(obj):
        return KindOf(obj)
    if callable(getattr(obj, "matches", None)):
        return obj
    if callable(obj):
        return Predicate(obj)
    raise ArgumentError(
        f"Cannot use {obj!r} as a failure discriminator",
        hint=HINTS["discriminator"],
    )


def normalize_kinds(kinds: tuple[Any, ...]) -> tuple[Discriminator, ...]:
    """Flatten the positional kinds of a call into one ordered tuple.

    A single ``list`` or ``tuple`` argument is taken as the whole list, so
    ``itry(f, A, B)`` and ``itry(f, [A, B])`` are the same call. Order and
    duplicates are preserved.
    """
    if len(kinds) == 1 and isinstance(kinds[0], (list, tuple)):
        kinds = tuple(kinds[0])
    return tuple(as_discriminator(k) for k in kinds)
