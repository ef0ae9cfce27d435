"""itry: exceptions and failed awaitables as inspectable values.

Public API:
    - itry() / ftry(): Run a computation, classify its failure by position
    - swallow(): Replace any failure with a fallback value
    - tap_error(): Observe a failure, then re-raise it
    - NOTHING: Marker for result positions without a value
    - config_scope(): Scoped settings
"""

from __future__ import annotations

import logging

from itry.attempt import ftry, itry
from itry.classify import classify
from itry.config import Settings, config_scope, current_config, resolve_config
from itry.discriminators import Discriminator, KindOf, Predicate
from itry.errors import ArgumentError, ConfigurationError, ItryError
from itry.swallow import swallow
from itry.tap import tap_error
from itry.types import NOTHING, Classification

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("itry")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("itry").addHandler(logging.NullHandler())

__all__ = [
    "NOTHING",
    "ArgumentError",
    "Classification",
    "ConfigurationError",
    "Discriminator",
    "ItryError",
    "KindOf",
    "Predicate",
    "Settings",
    "classify",
    "config_scope",
    "current_config",
    "ftry",
    "itry",
    "resolve_config",
    "swallow",
    "tap_error",
]
