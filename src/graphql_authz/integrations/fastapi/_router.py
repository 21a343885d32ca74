"""GraphQL-over-HTTP endpoint serving a transformed schema."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from graphql import GraphQLSchema, graphql

from graphql_authz.config._config import AuthzConfig, get_global_config
from graphql_authz.integrations.fastapi._dependencies import context_getter_for
from graphql_authz.transform._transformer import guarded_fields

__all__ = ["create_graphql_router"]


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": [{"message": message}]})


def _schema_config(schema: GraphQLSchema) -> AuthzConfig:
    guards = guarded_fields(schema)
    return guards[0].config if guards else get_global_config()


def create_graphql_router(
    schema: GraphQLSchema,
    *,
    path: str = "/graphql",
    context_getter: Callable[..., Any] | None = None,
    config: AuthzConfig | None = None,
) -> APIRouter:
    """Build an ``APIRouter`` that executes GraphQL requests against *schema*.

    This is the serving half of the startup lifecycle: build the schema
    first with :func:`~graphql_authz.build_schema`, which raises before
    anything is served if the schema is misconfigured, then mount the
    router.

    ``POST {path}`` accepts ``{"query", "variables", "operationName"}`` and
    answers ``{"data": ..., "errors": [...]}``. Denied fields appear as
    errors with ``extensions.code == "NOT_AUTHORIZED"`` while the rest of
    the response still resolves. Malformed request bodies get HTTP 400.

    The default context reads the identity header and stores the identity
    under the key of the config the schema's guards were built with, so a
    later ``configure()`` call cannot put the two out of step.

    Execution goes straight through graphql-core rather than a library
    router such as strawberry's ``GraphQLRouter``, which only serves its own
    schema types and cannot take an SDL-built ``GraphQLSchema``.

    Args:
        schema: The transformed schema to serve.
        path: Route path for the endpoint.
        context_getter: FastAPI dependency producing the request context.
            Defaults to one bound to the effective config.
        config: Config for the default context. Defaults to the config
            stored in the schema's guards, else the global config.

    Returns:
        An ``APIRouter`` to pass to ``app.include_router``.

    Example::

        schema = build_schema(type_defs, resolvers)
        app = FastAPI()
        app.include_router(create_graphql_router(schema))
    """
    if context_getter is None:
        context_getter = context_getter_for(config or _schema_config(schema))
    router = APIRouter()

    @router.post(path)
    async def graphql_endpoint(  # pyright: ignore[reportUnusedFunction]
        request: Request,
        context: Any = Depends(context_getter),
    ) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            return _bad_request("Request body must be JSON")
        if not isinstance(body, dict) or not isinstance(body.get("query"), str):
            return _bad_request("Request body must contain a 'query' string")
        variables = body.get("variables")
        if variables is not None and not isinstance(variables, dict):
            return _bad_request("'variables' must be an object")
        operation_name = body.get("operationName")
        if operation_name is not None and not isinstance(operation_name, str):
            return _bad_request("'operationName' must be a string")

        result = await graphql(
            schema,
            body["query"],
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
        )
        payload: dict[str, Any] = {"data": result.data}
        if result.errors:
            payload["errors"] = [error.formatted for error in result.errors]
        return JSONResponse(content=payload)

    return router
