"""Import fixtures from graphql_authz.testing for test discovery."""

from graphql_authz.testing._fixtures import authz_catalog, authz_config, isolated_authz_state

__all__ = ["authz_catalog", "authz_config", "isolated_authz_state"]
