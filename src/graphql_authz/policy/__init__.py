"""Predicate evaluation: the checks that authorization directives install."""

from graphql_authz.policy._arguments import MISSING, resolve_argument_path
from graphql_authz.policy._identity import (
    Identity,
    identity_from_claims,
    resolve_identity,
    subject_of,
)
from graphql_authz.policy._predicate import (
    Predicate,
    always_allow,
    always_deny,
    authenticated,
    owner,
    predicate,
)
from graphql_authz.policy._result import GuardResult

__all__ = [
    "MISSING",
    "GuardResult",
    "Identity",
    "Predicate",
    "always_allow",
    "always_deny",
    "authenticated",
    "identity_from_claims",
    "owner",
    "predicate",
    "resolve_argument_path",
    "resolve_identity",
    "subject_of",
]
