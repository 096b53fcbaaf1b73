"""OIDC discovery and JWKS endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from idp.core.issuer import IssuerConfig
from idp.core.settings import IdpSettings
from idp.crypto.types import JWKSResponse
from idp.oidc.discovery import DiscoveryDocument, build_discovery, build_jwks

router = APIRouter()

JWKS_CACHE_CONTROL = "public, max-age=3600"


def _load_settings(request: Request) -> IdpSettings:
    return request.app.state.settings


def _get_issuer(request: Request) -> IssuerConfig:
    return request.app.state.issuer


@router.get("/.well-known/openid-configuration")
async def openid_configuration(
    issuer: Annotated[IssuerConfig, Depends(_get_issuer)],
) -> DiscoveryDocument:
    """OpenID Connect Discovery 1.0."""
    return build_discovery(issuer)


@router.get("/.well-known/jwks.json")
async def jwks(
    response: Response,
    settings: Annotated[IdpSettings, Depends(_load_settings)],
) -> JWKSResponse:
    """JSON Web Key Set endpoint."""
    document = build_jwks(settings.rsa_public_key, settings.signing_key_id)
    response.headers["Cache-Control"] = JWKS_CACHE_CONTROL
    return document
