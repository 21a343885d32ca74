"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from graphql_authz.exceptions import AuthorizationError, SchemaConfigurationError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for graphql-authz errors on a FastAPI app.

    Covers errors raised outside GraphQL execution, for example by REST
    routes sharing the app:

    - ``AuthorizationError`` -> 403 Forbidden with ``code: NOT_AUTHORIZED``
    - ``SchemaConfigurationError`` -> 500 Internal Server Error

    Args:
        app: The FastAPI application instance.

    Example::

        from fastapi import FastAPI
        from graphql_authz.integrations.fastapi import install_error_handlers

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(AuthorizationError)
    async def authz_denied_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AuthorizationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"detail": exc.message, "code": exc.code},
        )

    @app.exception_handler(SchemaConfigurationError)
    async def schema_configuration_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: SchemaConfigurationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
