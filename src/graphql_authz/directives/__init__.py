"""Directive catalog: declarations of the recognized authorization directives."""

from graphql_authz.directives._base import DirectiveArgument, DirectiveDeclaration, DirectiveUsage
from graphql_authz.directives._catalog import (
    OWNER,
    PRIVATE,
    DirectiveCatalog,
    create_default_catalog,
    get_default_catalog,
)
from graphql_authz.directives._decorator import directive

__all__ = [
    "OWNER",
    "PRIVATE",
    "DirectiveArgument",
    "DirectiveCatalog",
    "DirectiveDeclaration",
    "DirectiveUsage",
    "create_default_catalog",
    "directive",
    "get_default_catalog",
]
