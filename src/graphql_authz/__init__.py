"""graphql-authz: Declarative field-level authorization for graphql-core schemas.

Annotate fields with ``@private`` or ``@owner(argumentName: ...)`` and the
schema transformer wraps their resolvers with a guard that checks the
caller identity found on the request context. Unannotated fields are left
untouched.

Example::

    from graphql import graphql
    from graphql_authz import build_schema

    schema = build_schema(
        '''
        type User { id: ID! email: String @private }
        type Mutation { updateProfile(id: ID!, name: String): User @owner(argumentName: "id") }
        type Query { me: User }
        ''',
        resolvers,
    )
    result = await graphql(schema, query, context_value={"user": {"subject": "42"}})
"""

from importlib.metadata import PackageNotFoundError, version

from graphql_authz._types import CallerIdentity
from graphql_authz.config._config import AuthzConfig, configure
from graphql_authz.directives._base import DirectiveArgument, DirectiveDeclaration, DirectiveUsage
from graphql_authz.directives._catalog import DirectiveCatalog, get_default_catalog
from graphql_authz.directives._decorator import directive
from graphql_authz.exceptions import (
    NOT_AUTHORIZED,
    AuthorizationError,
    AuthzError,
    SchemaConfigurationError,
)
from graphql_authz.explain._schema import explain_field_access, explain_schema
from graphql_authz.policy._predicate import Predicate, predicate
from graphql_authz.policy._result import GuardResult
from graphql_authz.transform._build import build_schema
from graphql_authz.transform._guard import FieldGuard
from graphql_authz.transform._transformer import guarded_fields, transform_schema

try:
    __version__ = version("graphql-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "NOT_AUTHORIZED",
    "AuthorizationError",
    "AuthzConfig",
    "AuthzError",
    "CallerIdentity",
    "DirectiveArgument",
    "DirectiveCatalog",
    "DirectiveDeclaration",
    "DirectiveUsage",
    "FieldGuard",
    "GuardResult",
    "Predicate",
    "SchemaConfigurationError",
    "build_schema",
    "configure",
    "directive",
    "explain_field_access",
    "explain_schema",
    "get_default_catalog",
    "guarded_fields",
    "predicate",
    "transform_schema",
]
