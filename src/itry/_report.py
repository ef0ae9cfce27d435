"""Logging for failures that the helpers keep from propagating."""

from __future__ import annotations

import logging

from itry.config import current_config

log = logging.getLogger("itry")


def report_captured(helper: str, failure: BaseException) -> None:
    """Log a failure that ``helper`` turned into a value.

    DEBUG by default; WARNING with traceback when ``log_captured`` is set.
    """
    if current_config().log_captured:
        log.warning(
            "%s captured %s: %s",
            helper,
            type(failure).__name__,
            failure,
            exc_info=(type(failure), failure, failure.__traceback__),
        )
    elif log.isEnabledFor(logging.DEBUG):
        log.debug("%s captured %s: %s", helper, type(failure).__name__, failure)
