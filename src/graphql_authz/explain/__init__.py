"""Explain/dry-run mode: structured insight into installed guards."""

from graphql_authz.explain._models import (
    FieldAccessExplanation,
    GuardedFieldExplanation,
    PredicateEvaluation,
    SchemaExplanation,
)
from graphql_authz.explain._schema import explain_field_access, explain_schema

__all__ = [
    "FieldAccessExplanation",
    "GuardedFieldExplanation",
    "PredicateEvaluation",
    "SchemaExplanation",
    "explain_field_access",
    "explain_schema",
]
