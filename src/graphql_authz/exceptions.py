"""Exception hierarchy for graphql-authz."""

from __future__ import annotations

from graphql import GraphQLError

__all__ = [
    "NOT_AUTHORIZED",
    "NOT_AUTHORIZED_MESSAGE",
    "AuthorizationError",
    "AuthzError",
    "SchemaConfigurationError",
]

# Stable machine-readable kind and public message of a denial.
NOT_AUTHORIZED = "NOT_AUTHORIZED"
NOT_AUTHORIZED_MESSAGE = "Not authorized!"


class AuthzError(Exception):
    """Base exception for all graphql-authz errors."""


class SchemaConfigurationError(AuthzError):
    """A directive usage or declaration does not match the directive catalog.

    Raised only while a schema is being built or transformed. It signals a
    deployment bug and is never produced at request time.

    Attributes:
        type_name: Object type owning the offending field, if known.
        field_name: The offending field, if known.
        directive: The directive name involved, if known.

    Example::

        try:
            schema = build_schema(type_defs, resolvers)
        except SchemaConfigurationError as exc:
            sys.exit(f"refusing to start: {exc}")
    """

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        field_name: str | None = None,
        directive: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.field_name = field_name
        self.directive = directive
        if type_name is not None and field_name is not None:
            message = f"{type_name}.{field_name}: {message}"
        super().__init__(message)


class AuthorizationError(GraphQLError, AuthzError):  # noqa: N818
    """The caller is not authorized to resolve a guarded field.

    Guards hand this back as the field's value; graphql-core then reports
    it as a located error for that field while sibling fields still
    resolve. The serialized form is always the fixed message plus
    ``extensions={"code": "NOT_AUTHORIZED"}``, whatever predicate denied.

    Attributes:
        code: Always ``"NOT_AUTHORIZED"``.
        reason: Advisory name of the first predicate that denied. Kept for
            in-process diagnostics only, never serialized.

    Example::

        result = graphql_sync(schema, "{ me { email } }", context_value={"user": None})
        assert result.errors[0].extensions == {"code": "NOT_AUTHORIZED"}
    """

    code = NOT_AUTHORIZED

    def __init__(self, *, reason: str | None = None) -> None:
        super().__init__(NOT_AUTHORIZED_MESSAGE, extensions={"code": NOT_AUTHORIZED})
        self.reason = reason
