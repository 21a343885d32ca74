"""Audit logging for guard decisions and schema builds."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from graphql_authz.policy._result import GuardResult

if TYPE_CHECKING:
    from graphql_authz.transform._guard import FieldGuard

__all__ = ["log_guard_decision", "log_schema_built"]

logger = logging.getLogger("graphql_authz")


def log_guard_decision(guard: FieldGuard, result: GuardResult) -> None:
    """Log a guard decision.

    Logging levels:
    - INFO: Access granted (field, directive count)
    - WARNING: Access denied (field, denying predicate)
    - DEBUG: Detailed (directive usages on the field)

    Subjects and argument values are never logged.

    Example::

        log_guard_decision(guard, GuardResult.deny("...", predicate="owner"))
    """
    if result.allowed:
        logger.info(
            "Guard passed: %s (%d directive(s) satisfied)",
            guard.coordinate,
            len(guard.usages),
        )
    else:
        logger.warning(
            "Guard denied: %s: %s (predicate %s)",
            guard.coordinate,
            result.reason,
            result.predicate,
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Directives on %s: %s",
            guard.coordinate,
            [str(u) for u in guard.usages],
        )


def log_schema_built(guards: Sequence[FieldGuard]) -> None:
    """Log a summary of the guards installed by a schema build.

    Example::

        log_schema_built(guarded_fields(schema))
    """
    logger.info("Schema built: %d guarded field(s)", len(guards))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Guarded fields: %s", [g.coordinate for g in guards])
