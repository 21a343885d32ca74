"""FastAPI dependencies that build the GraphQL request context."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from fastapi import Depends, Request

from graphql_authz.config._config import AuthzConfig, get_global_config

__all__ = ["context_getter_for", "get_caller_identity", "get_graphql_context"]

logger = logging.getLogger("graphql_authz.integrations.fastapi")


def _read_identity(request: Request, header: str) -> dict[str, Any] | None:
    raw = request.headers.get(header)
    if not raw:
        return None
    try:
        claims = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed %r identity header", header)
        return None
    if not isinstance(claims, dict):
        logger.warning("Ignoring %r identity header that is not a JSON object", header)
        return None
    return claims


def get_caller_identity(request: Request) -> dict[str, Any] | None:
    """Read the caller identity asserted by the upstream gateway.

    The gateway authenticates the request and forwards the verified
    claims as a JSON object in the configured header (``user`` by
    default), e.g. ``user: {"sub": "auth0|42"}``. A missing header, a
    malformed value, or anything but a JSON object yields ``None``, which
    guarded fields treat as unauthenticated.

    The header name comes from the global config at request time. Guards
    keep the config they were built with, so call ``configure()`` before
    ``build_schema()``; ``create_graphql_router`` avoids the question by
    reading the schema's own config.

    Override via ``app.dependency_overrides[get_caller_identity]`` to read
    identities from somewhere else.
    """
    return _read_identity(request, get_global_config().identity_header)


def get_graphql_context(
    request: Request,
    identity: dict[str, Any] | None = Depends(get_caller_identity),
) -> dict[str, Any]:
    """Build the per-request context passed to graphql execution.

    Returns ``{"request": request, "user": <identity or None>}``, using the
    global config's ``identity_key``. A fresh context is built for every
    request.

    Example::

        app.dependency_overrides[get_graphql_context] = my_context_builder
    """
    return {
        "request": request,
        get_global_config().identity_key: identity,
    }


def context_getter_for(config: AuthzConfig) -> Callable[..., dict[str, Any]]:
    """Return a context dependency bound to *config* instead of the global config.

    The identity header and the context key are taken from *config*, so the
    context always matches what guards built with the same config expect.

    Example::

        getter = context_getter_for(AuthzConfig(identity_key="viewer"))
        app.include_router(create_graphql_router(schema, context_getter=getter))
    """

    def caller_identity(request: Request) -> dict[str, Any] | None:
        return _read_identity(request, config.identity_header)

    def graphql_context(
        request: Request,
        identity: dict[str, Any] | None = Depends(caller_identity),
    ) -> dict[str, Any]:
        return {"request": request, config.identity_key: identity}

    return graphql_context
