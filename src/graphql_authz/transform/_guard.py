"""FieldGuard: the check installed in front of a guarded field's resolver."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from graphql import GraphQLField, GraphQLResolveInfo, default_field_resolver

from graphql_authz._audit import log_guard_decision
from graphql_authz._types import Resolver
from graphql_authz.config._config import AuthzConfig
from graphql_authz.directives._base import DirectiveUsage
from graphql_authz.exceptions import AuthorizationError
from graphql_authz.policy._identity import resolve_identity
from graphql_authz.policy._predicate import Predicate
from graphql_authz.policy._result import GuardResult

__all__ = ["GUARD_EXTENSION_KEY", "FieldGuard", "get_field_guard", "wrap_field"]

# Key under GraphQLField.extensions holding the installed FieldGuard.
GUARD_EXTENSION_KEY = "graphql_authz"


@dataclass(frozen=True, slots=True, eq=False)
class FieldGuard:
    """Authorization guard for one object field.

    Holds only immutable state, so one guard serves concurrent requests.
    The bound predicates are evaluated as a conjunction in usage order.

    Attributes:
        type_name: Name of the object type owning the field.
        field_name: Name of the guarded field.
        usages: The authorization directive usages found on the field.
        predicates: One predicate per usage, in the same order.
        resolver: The original resolver (or the default field resolver), or
            the original ``subscribe`` for a subscription guard.
        config: Config snapshot taken when the guard was installed.
    """

    type_name: str
    field_name: str
    usages: tuple[DirectiveUsage, ...]
    predicates: tuple[Predicate, ...]
    resolver: Resolver
    config: AuthzConfig

    @property
    def coordinate(self) -> str:
        return f"{self.type_name}.{self.field_name}"

    def check(self, context: Any, arguments: Mapping[str, Any]) -> GuardResult:
        """Evaluate every predicate against the context's identity and *arguments*.

        Stops at the first denial; which predicate is reported first is
        advisory only and does not change the outcome.
        """
        identity = resolve_identity(context, self.config)
        for usage, pred in zip(self.usages, self.predicates):
            if not pred.evaluate(identity, arguments, usage.arguments):
                if identity is None:
                    reason = f"@{usage.name} requires an authenticated caller"
                else:
                    reason = f"@{usage.name} denied the caller"
                return GuardResult.deny(reason, predicate=pred.name)
        return GuardResult.allow()

    def __call__(self, parent: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        result = self.check(info.context, args)
        if self.config.log_decisions:
            log_guard_decision(self, result)
        if not result.allowed:
            # Returned, not raised: graphql-core reports it as this field's error.
            return AuthorizationError(reason=result.reason)
        return self.resolver(parent, info, **args)


def wrap_field(
    field: GraphQLField,
    *,
    type_name: str,
    field_name: str,
    usages: tuple[DirectiveUsage, ...],
    predicates: tuple[Predicate, ...],
    config: AuthzConfig,
) -> GraphQLField:
    """Return a new field whose resolver is guarded; *field* is not modified.

    A subscription field's ``subscribe`` gets a guard of its own, so a
    denied caller never starts the event source.
    """
    guard = FieldGuard(
        type_name=type_name,
        field_name=field_name,
        usages=usages,
        predicates=predicates,
        resolver=field.resolve or default_field_resolver,
        config=config,
    )
    kwargs = field.to_kwargs()
    kwargs["resolve"] = guard
    if field.subscribe is not None:
        kwargs["subscribe"] = replace(guard, resolver=field.subscribe)
    kwargs["extensions"] = {**(field.extensions or {}), GUARD_EXTENSION_KEY: guard}
    return GraphQLField(**kwargs)


def get_field_guard(field: GraphQLField) -> FieldGuard | None:
    """Return the guard installed on *field*, or ``None`` if it is unguarded."""
    guard = (field.extensions or {}).get(GUARD_EXTENSION_KEY)
    return guard if isinstance(guard, FieldGuard) else None
