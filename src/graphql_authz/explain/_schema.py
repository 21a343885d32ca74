"""explain_schema() and explain_field_access(): inspect installed guards."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, is_introspection_type

from graphql_authz.explain._models import (
    FieldAccessExplanation,
    GuardedFieldExplanation,
    PredicateEvaluation,
    SchemaExplanation,
)
from graphql_authz.policy._identity import resolve_identity
from graphql_authz.transform._guard import get_field_guard

__all__ = ["explain_field_access", "explain_schema"]


def _object_types(schema: GraphQLSchema) -> list[GraphQLObjectType]:
    return [
        t
        for t in schema.type_map.values()
        if isinstance(t, GraphQLObjectType) and not is_introspection_type(t)
    ]


def _lookup_field(schema: GraphQLSchema, coordinate: str) -> GraphQLField:
    type_name, _, field_name = coordinate.partition(".")
    named_type = schema.get_type(type_name)
    if not isinstance(named_type, GraphQLObjectType) or field_name not in named_type.fields:
        raise KeyError(f"No object field {coordinate!r} in schema")
    return named_type.fields[field_name]


def explain_schema(schema: GraphQLSchema) -> SchemaExplanation:
    """List every guarded field of a transformed schema.

    Example::

        print(explain_schema(schema))
        # Authorization guards: 2 of 9 object field(s)
        #   User.email: @private
        #   Mutation.updateProfile: @owner(argumentName: "id")
    """
    total = 0
    fields: list[GuardedFieldExplanation] = []
    for object_type in _object_types(schema):
        for field in object_type.fields.values():
            total += 1
            guard = get_field_guard(field)
            if guard is None:
                continue
            fields.append(
                GuardedFieldExplanation(
                    coordinate=guard.coordinate,
                    directives=[str(u) for u in guard.usages],
                    predicates=[p.name for p in guard.predicates],
                )
            )
    return SchemaExplanation(object_field_count=total, fields=fields)


def explain_field_access(
    schema: GraphQLSchema,
    coordinate: str,
    context: Any,
    arguments: Mapping[str, Any] | None = None,
) -> FieldAccessExplanation:
    """Explain whether the caller in *context* may resolve *coordinate*.

    Unlike the guard itself, every predicate is evaluated so the report
    shows each outcome. The field's resolver is never called.

    Args:
        schema: A transformed schema.
        coordinate: ``"Type.field"``.
        context: The request context, as passed to graphql execution.
        arguments: The field arguments to evaluate against.

    Raises:
        KeyError: If *coordinate* does not name an object type field.

    Example::

        explanation = explain_field_access(
            schema, "Mutation.updateProfile", {"user": {"subject": "99"}}, {"id": "42"}
        )
        assert not explanation.allowed
    """
    field = _lookup_field(schema, coordinate)
    guard = get_field_guard(field)
    if guard is None:
        return FieldAccessExplanation(
            coordinate=coordinate,
            guarded=False,
            authenticated=False,
            allowed=True,
            predicates=[],
        )

    args = arguments if arguments is not None else {}
    identity = resolve_identity(context, guard.config)
    evaluations = [
        PredicateEvaluation(
            directive=str(usage),
            predicate=pred.name,
            passed=pred.evaluate(identity, args, usage.arguments),
        )
        for usage, pred in zip(guard.usages, guard.predicates)
    ]
    return FieldAccessExplanation(
        coordinate=coordinate,
        guarded=True,
        authenticated=identity is not None,
        allowed=all(e.passed for e in evaluations),
        predicates=evaluations,
    )
