"""Pytest fixtures for testing graphql-authz guarded schemas."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from graphql_authz.config._config import AuthzConfig
from graphql_authz.directives._catalog import DirectiveCatalog, create_default_catalog

__all__ = ["authz_catalog", "authz_config", "isolated_authz_state"]


@pytest.fixture()
def authz_catalog() -> DirectiveCatalog:
    """Provide a fresh catalog holding only ``@private`` and ``@owner``.

    The catalog is not shared with the global default catalog, so tests
    may register extra directives freely.

    Example::

        def test_staff_directive(authz_catalog):
            authz_catalog.register(DirectiveDeclaration(name="staff", predicate=is_staff))
            schema = build_schema(type_defs, resolvers, catalog=authz_catalog)
    """
    return create_default_catalog()


@pytest.fixture()
def authz_config() -> AuthzConfig:
    """Provide a default ``AuthzConfig``.

    Example::

        def test_with_config(authz_config):
            assert authz_config.identity_key == "user"
    """
    return AuthzConfig()


@pytest.fixture()
def isolated_authz_state() -> Generator[tuple[AuthzConfig, DirectiveCatalog], None, None]:
    """Isolate the global config and default catalog for one test.

    Example::

        def test_something(isolated_authz_state):
            cfg, catalog = isolated_authz_state
            configure(log_decisions=True)  # undone after the test
    """
    from graphql_authz.testing._isolation import isolated_authz

    with isolated_authz() as state:
        yield state
