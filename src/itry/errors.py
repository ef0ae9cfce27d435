"""Exception hierarchy for itry.

These are raised for misuse of the helpers themselves. Failures raised by the
wrapped computations are never wrapped in these types.
"""

from __future__ import annotations


class ItryError(Exception):
    """Base exception for all itry errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ArgumentError(ItryError, TypeError):
    """A helper was called with an argument it cannot use."""


class ConfigurationError(ItryError):
    """Configuration validation or resolution failed."""


HINTS = {
    "computation": (
        "Pass a zero-argument callable, a coroutine function, or an awaitable "
        "(coroutine, Future, Task)."
    ),
    "discriminator": (
        "Pass exception classes, objects with a matches(failure) method, or "
        "predicates taking the failure."
    ),
    "on_failure": (
        "Pass a callable taking the failure, or None. "
        "Set ITRY_VALIDATE_CALLBACKS=0 to ignore non-callables instead."
    ),
    "tap_on_failure": (
        "tap_error needs a callable taking the failure; it cannot be omitted."
    ),
}
