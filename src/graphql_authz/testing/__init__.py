"""graphql-authz testing utilities: identities, assertions, and fixtures.

- **MockIdentity / context factories**: request contexts for tests.
- **Assertion helpers**: ``assert_authorized``, ``assert_denied``,
  ``assert_guarded``.
- **Fixtures**: ``authz_catalog``, ``authz_config``,
  ``isolated_authz_state``.

Example::

    from graphql_authz.testing import assert_denied, make_anonymous_context

    def test_email_is_private(schema):
        assert_denied(schema, "{ me { email } }", make_anonymous_context(), field="me.email")
"""

from graphql_authz.testing._assertions import (
    assert_authorized,
    assert_denied,
    assert_guarded,
    denied_paths,
)
from graphql_authz.testing._fixtures import (
    authz_catalog,
    authz_config,
    isolated_authz_state,
)
from graphql_authz.testing._identities import (
    MockIdentity,
    make_anonymous_context,
    make_context,
    make_identity,
)
from graphql_authz.testing._isolation import isolated_authz

__all__ = [
    "MockIdentity",
    "assert_authorized",
    "assert_denied",
    "assert_guarded",
    "authz_catalog",
    "authz_config",
    "denied_paths",
    "isolated_authz",
    "isolated_authz_state",
    "make_anonymous_context",
    "make_context",
    "make_identity",
]
