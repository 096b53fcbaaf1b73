"""OpenID Connect discovery and JWKS document builders."""

import logging

from pydantic import BaseModel

from idp.core.errors import MalformedKeyError, MissingKeyMaterialError
from idp.core.issuer import IssuerConfig
from idp.crypto.keys import SIGNING_ALGORITHM, KeyBackend, default_backend
from idp.crypto.types import JWKSResponse

logger = logging.getLogger(__name__)


class DiscoveryDocument(BaseModel):
    """OIDC .well-known/openid-configuration response."""

    issuer: str
    jwks_uri: str
    subject_types_supported: list[str]
    id_token_signing_alg_values_supported: list[str]


def build_discovery(issuer: IssuerConfig) -> DiscoveryDocument:
    """Build the OIDC discovery document for the resolved issuer."""
    return DiscoveryDocument(
        issuer=issuer.issuer_url,
        jwks_uri=issuer.jwks_uri,
        subject_types_supported=["public"],
        id_token_signing_alg_values_supported=[SIGNING_ALGORITHM],
    )


def build_jwks(
    public_key_pem: str | None,
    kid: str,
    backend: KeyBackend = default_backend,
) -> JWKSResponse:
    """Publish an RSA public key as a single-entry JWKS."""
    if not public_key_pem:
        logger.warning("Missing RSA public key")
        raise MissingKeyMaterialError("missing RSA public key")
    try:
        public_key = backend.parse_public_key(public_key_pem)
    except MalformedKeyError as exc:
        logger.warning("Unusable RSA public key: %s", exc.message)
        raise
    return JWKSResponse(keys=[backend.to_jwk(public_key, kid)])
