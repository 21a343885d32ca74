"""build_schema(): the startup phase producing the schema that gets served."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from graphql import (
    DirectiveDefinitionNode,
    GraphQLError,
    GraphQLObjectType,
    GraphQLSchema,
    build_ast_schema,
    parse,
    validate_schema,
)

from graphql_authz._audit import log_schema_built
from graphql_authz.config._config import AuthzConfig
from graphql_authz.directives._catalog import DirectiveCatalog, get_default_catalog
from graphql_authz.exceptions import SchemaConfigurationError
from graphql_authz.transform._transformer import guarded_fields, transform_schema

__all__ = ["ResolverMap", "build_schema"]

# {"User": {"email": resolve_email}, "Mutation": {"updateProfile": ...}}
ResolverMap = Mapping[str, Mapping[str, Callable[..., Any]]]


def _merge_type_defs(type_defs: str | Sequence[str], catalog: DirectiveCatalog) -> str:
    sdl = type_defs if isinstance(type_defs, str) else "\n".join(type_defs)
    try:
        document = parse(sdl)
    except GraphQLError as exc:
        raise SchemaConfigurationError(f"invalid type definitions: {exc.message}") from exc
    declared = {
        definition.name.value
        for definition in document.definitions
        if isinstance(definition, DirectiveDefinitionNode)
    }
    missing = [d.to_sdl() for d in catalog.declarations() if d.name not in declared]
    if not missing:
        return sdl
    return sdl + "\n" + "\n".join(missing) + "\n"


def _attach_resolvers(schema: GraphQLSchema, resolvers: ResolverMap) -> None:
    for type_name, field_resolvers in resolvers.items():
        named_type = schema.get_type(type_name)
        if named_type is None:
            raise SchemaConfigurationError(f"resolvers given for unknown type {type_name!r}")
        if not isinstance(named_type, GraphQLObjectType):
            raise SchemaConfigurationError(
                f"resolvers given for {type_name!r}, which is not an object type"
            )
        for field_name, resolve in field_resolvers.items():
            field = named_type.fields.get(field_name)
            if field is None:
                raise SchemaConfigurationError(
                    "resolver given for unknown field",
                    type_name=type_name,
                    field_name=field_name,
                )
            if not callable(resolve):
                raise SchemaConfigurationError(
                    f"resolver must be callable, got {type(resolve).__name__}",
                    type_name=type_name,
                    field_name=field_name,
                )
            field.resolve = resolve


def build_schema(
    type_defs: str | Sequence[str],
    resolvers: ResolverMap | None = None,
    *,
    catalog: DirectiveCatalog | None = None,
    config: AuthzConfig | None = None,
) -> GraphQLSchema:
    """Compile type definitions into a guarded, ready-to-serve schema.

    Merges the catalog's directive declarations into *type_defs* (unless
    the SDL already declares them), compiles and validates the schema,
    attaches *resolvers* and installs authorization guards. Either the
    complete schema is returned or nothing is: every failure surfaces as
    ``SchemaConfigurationError`` before any request can be served.

    Args:
        type_defs: SDL source, or several SDL sources to concatenate.
        resolvers: Resolvers keyed by object type name and field name.
            Fields without one use graphql-core's default resolver.
        catalog: The recognized directives. Defaults to the global catalog.
        config: Config snapshot for the guards. Defaults to the global config.

    Returns:
        The transformed ``GraphQLSchema``.

    Raises:
        SchemaConfigurationError: On invalid SDL, undeclared or misused
            directives, or resolvers for unknown types or fields.

    Example::

        schema = build_schema(
            '''
            type User { id: ID! email: String @private }
            type Query { me: User }
            ''',
            {"Query": {"me": resolve_me}},
        )
        result = await graphql(schema, "{ me { email } }", context_value=context)
    """
    target_catalog = catalog if catalog is not None else get_default_catalog()
    sdl = _merge_type_defs(type_defs, target_catalog)
    try:
        schema = build_ast_schema(parse(sdl))
    except (GraphQLError, TypeError) as exc:
        raise SchemaConfigurationError(f"invalid type definitions: {exc}") from exc
    errors = validate_schema(schema)
    if errors:
        raise SchemaConfigurationError(
            "invalid schema: " + "; ".join(error.message for error in errors)
        )

    if resolvers:
        _attach_resolvers(schema, resolvers)

    transformed = transform_schema(schema, target_catalog, config=config)
    log_schema_built(guarded_fields(transformed))
    return transformed
