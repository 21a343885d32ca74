"""Configuration module for graphql-authz."""

from __future__ import annotations

from graphql_authz.config._config import AuthzConfig, configure, get_global_config

__all__ = ["AuthzConfig", "configure", "get_global_config"]
