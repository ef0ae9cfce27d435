"""Ordered failure classification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itry.types import Classification

if TYPE_CHECKING:
    from collections.abc import Sequence

    from itry.discriminators import Discriminator

log = logging.getLogger(__name__)


def classify(
    kinds: Sequence[Discriminator], failure: BaseException
) -> Classification:
    """Place ``failure`` at the position of the first discriminator it matches.

    With no discriminators every failure is captured as ``(NOTHING, failure)``.
    Otherwise the first match at index ``i`` yields a result of length
    ``i + 2``; no match re-raises ``failure`` unchanged.
    """
    if not kinds:
        return Classification.unclassified(failure)

    for index, kind in enumerate(kinds):
        if kind.matches(failure):
            return Classification.matched(index, failure)

    log.debug(
        "No discriminator matched %s; re-raising", type(failure).__name__
    )
    raise failure
