"""Result types shared by the helpers.

``Classification`` is a plain tuple underneath so results destructure
positionally::

    data, failure = itry(load)
    data, type_error, value_error = itry(parse, TypeError, ValueError)

Slots that hold no value contain ``NOTHING`` rather than ``None``, because
``None`` is a perfectly good return value for a computation.
"""

from __future__ import annotations

from typing import Any, Final, final


@final
class _Nothing:
    """Marker for a result position that holds no value."""

    __slots__ = ()
    _instance: _Nothing | None = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"

    def __copy__(self) -> _Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Nothing:
        return self


NOTHING: Final = _Nothing()


class Classification(tuple[Any, ...]):
    """Outcome of ``itry``.

    Shapes:
    - ``(value,)`` when the computation succeeded.
    - ``(NOTHING, failure)`` when it failed and no discriminators were given.
    - ``(NOTHING, ..., NOTHING, failure)`` of length ``index + 2`` when it failed
      and the discriminator at ``index`` was the first to match.
    """

    __slots__ = ()

    @classmethod
    def success(cls, value: Any) -> Classification:
        return cls((value,))

    @classmethod
    def unclassified(cls, failure: BaseException) -> Classification:
        return cls((NOTHING, failure))

    @classmethod
    def matched(cls, index: int, failure: BaseException) -> Classification:
        if index < 0:
            raise ValueError("Classification.matched index must be >= 0")
        return cls((NOTHING,) * (index + 1) + (failure,))

    @property
    def ok(self) -> bool:
        """True when the computation succeeded."""
        return len(self) == 1

    @property
    def value(self) -> Any:
        """The success value, or ``NOTHING`` on failure."""
        return self[0]

    @property
    def failure(self) -> Any:
        """The captured failure, or ``NOTHING`` on success."""
        return NOTHING if self.ok else self[-1]

    @property
    def matched_index(self) -> int | None:
        """Position of the matching discriminator, or ``None`` on success.

        An unclassified failure has the same shape as a match at index 0, so
        it also reports 0.
        """
        if self.ok:
            return None
        return len(self) - 2

    def __repr__(self) -> str:
        return f"Classification{tuple.__repr__(self)}"
