"""transform_schema(): install authorization guards on annotated fields."""

from __future__ import annotations

from copy import deepcopy

from graphql import (
    GraphQLDirective,
    GraphQLError,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    get_argument_values,
    is_introspection_type,
    is_non_null_type,
    is_object_type,
)

from graphql_authz.config._config import AuthzConfig, get_global_config
from graphql_authz.directives._base import DirectiveDeclaration, DirectiveUsage
from graphql_authz.directives._catalog import DirectiveCatalog, get_default_catalog
from graphql_authz.exceptions import SchemaConfigurationError
from graphql_authz.transform._guard import FieldGuard, get_field_guard, wrap_field

__all__ = ["collect_directive_usages", "guarded_fields", "transform_schema"]


def _check_declaration(
    schema_directive: GraphQLDirective, declaration: DirectiveDeclaration
) -> None:
    """Fail if the schema declares a catalog directive with a different argument schema."""
    declared = set(schema_directive.args)
    expected = {a.name for a in declaration.arguments}
    if declared != expected:
        raise SchemaConfigurationError(
            f"schema declares @{declaration.name} with arguments {sorted(declared)!r}, "
            f"expected {sorted(expected)!r}",
            directive=declaration.name,
        )
    for arg in declaration.arguments:
        schema_arg = schema_directive.args[arg.name]
        if is_non_null_type(schema_arg.type) != arg.required or str(
            schema_arg.type
        ).rstrip("!") != arg.type_name:
            raise SchemaConfigurationError(
                f"schema declares @{declaration.name}({arg.name}: {schema_arg.type}), "
                f"expected {arg.sdl_type}",
                directive=declaration.name,
            )


def collect_directive_usages(
    schema: GraphQLSchema,
    type_name: str,
    field_name: str,
    field: GraphQLField,
    catalog: DirectiveCatalog,
) -> tuple[DirectiveUsage, ...]:
    """Return the catalog directive usages on *field*, in the order they appear.

    Directives the catalog does not know (``@deprecated``, federation
    directives, ...) are ignored.

    Raises:
        SchemaConfigurationError: If a usage references a directive the
            schema does not declare, or its arguments violate the catalog's
            argument schema.
    """
    node = field.ast_node
    if node is None or not node.directives:
        return ()
    usages: list[DirectiveUsage] = []
    for directive_node in node.directives:
        name = directive_node.name.value
        declaration = catalog.lookup(name)
        if declaration is None:
            continue
        schema_directive = schema.get_directive(name)
        if schema_directive is None:
            raise SchemaConfigurationError(
                f"@{name} is used but not declared in the schema",
                type_name=type_name,
                field_name=field_name,
                directive=name,
            )
        try:
            values = get_argument_values(schema_directive, directive_node)
        except GraphQLError as exc:
            raise SchemaConfigurationError(
                f"invalid @{name} usage: {exc.message}",
                type_name=type_name,
                field_name=field_name,
                directive=name,
            ) from exc
        arguments = values or {}
        problems = declaration.validate_usage(arguments)
        if problems:
            raise SchemaConfigurationError(
                f"invalid @{name} usage: {'; '.join(problems)}",
                type_name=type_name,
                field_name=field_name,
                directive=name,
            )
        usages.append(DirectiveUsage(name, arguments))
    return tuple(usages)


def transform_schema(
    schema: GraphQLSchema,
    catalog: DirectiveCatalog | None = None,
    *,
    config: AuthzConfig | None = None,
) -> GraphQLSchema:
    """Return a copy of *schema* with guarded resolvers on annotated fields.

    Every object type field carrying one or more catalog directives gets a
    resolver that evaluates the conjunction of the directives' predicates
    and only then delegates to the original resolver, or to graphql-core's
    ``default_field_resolver`` when the field had none. All other fields
    keep their resolver. The input schema is never modified.

    Fields that already carry a guard are left as they are, so
    transforming a transformed schema is a no-op.

    Args:
        schema: A compiled, validated ``GraphQLSchema``.
        catalog: The recognized directives. Defaults to the global catalog.
        config: Config snapshot stored in every guard. Defaults to the
            global config at the time of the call.

    Returns:
        A new ``GraphQLSchema``.

    Raises:
        SchemaConfigurationError: If a directive usage or declaration
            disagrees with the catalog.

    Example::

        schema = graphql.build_schema(type_defs + get_default_catalog().type_defs())
        schema = transform_schema(schema)
    """
    target_catalog = catalog if catalog is not None else get_default_catalog()
    effective_config = config if config is not None else get_global_config()

    for declaration in target_catalog.declarations():
        schema_directive = schema.get_directive(declaration.name)
        if schema_directive is not None:
            _check_declaration(schema_directive, declaration)

    result = deepcopy(schema)
    for type_name, named_type in result.type_map.items():
        if not is_object_type(named_type) or is_introspection_type(named_type):
            continue
        assert isinstance(named_type, GraphQLObjectType)
        fields = named_type.fields
        for field_name, field in list(fields.items()):
            if get_field_guard(field) is not None:
                continue
            usages = collect_directive_usages(result, type_name, field_name, field, target_catalog)
            if not usages:
                continue
            predicates = tuple(target_catalog.lookup(u.name).predicate for u in usages)  # type: ignore[union-attr]
            fields[field_name] = wrap_field(
                field,
                type_name=type_name,
                field_name=field_name,
                usages=usages,
                predicates=predicates,
                config=effective_config,
            )
    return result


def guarded_fields(schema: GraphQLSchema) -> list[FieldGuard]:
    """Return every guard installed on *schema*, in type map order."""
    guards: list[FieldGuard] = []
    for named_type in schema.type_map.values():
        if not is_object_type(named_type) or is_introspection_type(named_type):
            continue
        assert isinstance(named_type, GraphQLObjectType)
        for field in named_type.fields.values():
            guard = get_field_guard(field)
            if guard is not None:
                guards.append(guard)
    return guards
