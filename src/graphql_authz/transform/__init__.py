"""Schema transformer: installs authorization guards on annotated fields."""

from graphql_authz.transform._build import ResolverMap, build_schema
from graphql_authz.transform._guard import (
    GUARD_EXTENSION_KEY,
    FieldGuard,
    get_field_guard,
    wrap_field,
)
from graphql_authz.transform._transformer import (
    collect_directive_usages,
    guarded_fields,
    transform_schema,
)

__all__ = [
    "GUARD_EXTENSION_KEY",
    "FieldGuard",
    "ResolverMap",
    "build_schema",
    "collect_directive_usages",
    "get_field_guard",
    "guarded_fields",
    "transform_schema",
    "wrap_field",
]
