"""FastAPI application factory for the id_token issuer."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from idp.core.errors import ErrorKind, IdTokenError
from idp.core.issuer import ISSUER_PATH, IssuerConfig
from idp.core.settings import IdpSettings
from idp.oidc.routes_discovery import router as discovery_router

logger = logging.getLogger(__name__)

HTTP_BAD_REQUEST = 400
HTTP_SERVER_ERROR = 500

_CLIENT_ERRORS = {ErrorKind.INVALID_INPUT, ErrorKind.UNSUPPORTED_ALGORITHM}


async def _id_token_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Map IdTokenError kinds to OAuth-style error responses."""
    assert isinstance(exc, IdTokenError)
    if exc.kind in _CLIENT_ERRORS:
        return JSONResponse(
            {"error": "invalid_request", "error_description": str(exc)},
            status_code=HTTP_BAD_REQUEST,
        )
    logger.error("Signing key configuration error: %s", exc)
    return JSONResponse(
        {"error": "server_error", "error_description": str(exc.kind)},
        status_code=HTTP_SERVER_ERROR,
    )


def create_app(settings: IdpSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or IdpSettings()
    logging.basicConfig(level=settings.log_level.upper())

    issuer = IssuerConfig.from_settings(settings)
    logger.info("Issuing id_tokens as %s", issuer.issuer_url)

    app = FastAPI(
        title="IdP id_token issuer",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.issuer = issuer

    origins = settings.get_cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET"],
            allow_headers=["Content-Type"],
        )

    app.add_exception_handler(IdTokenError, _id_token_error_handler)
    app.include_router(discovery_router, prefix=ISSUER_PATH)

    return app
