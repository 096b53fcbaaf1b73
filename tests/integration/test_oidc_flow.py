"""Integration test: a relying party verifies a minted id_token via JWKS."""

import json

import jwt
import pytest
from httpx import AsyncClient
from jwt.algorithms import RSAAlgorithm

from idp.core.issuer import IssuerConfig
from idp.crypto.types import SigningKeyData
from idp.core.settings import IdpSettings
from idp.oidc.id_token import IdTokenMinter
from idp.oidc.types import SigningOptions, UserRecord

HTTP_OK = 200
CLIENT_ID = "client-123"


@pytest.fixture
def minted_token(settings: IdpSettings) -> str:
    minter = IdTokenMinter(IssuerConfig.from_settings(settings))
    return minter.mint(
        CLIENT_ID,
        SigningOptions(
            signing_algorithm="RS256",
            key_id=settings.signing_key_id,
            private_key=settings.rsa_private_key,
        ),
        UserRecord(
            user_id="u1",
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            email_verified=True,
        ),
    )


async def test_consumer_verifies_token_from_published_metadata(
    client: AsyncClient, minted_token: str
) -> None:
    """Discovery -> JWKS -> select key by kid -> verify signature and claims."""
    discovery = await client.get("/api/.well-known/openid-configuration")
    assert discovery.status_code == HTTP_OK
    config = discovery.json()

    jwks_path = config["jwks_uri"].removeprefix("https://example.com")
    jwks = await client.get(jwks_path)
    assert jwks.status_code == HTTP_OK

    kid = jwt.get_unverified_header(minted_token)["kid"]
    (jwk,) = [k for k in jwks.json()["keys"] if k["kid"] == kid]
    public_key = RSAAlgorithm.from_jwk(json.dumps(jwk))

    claims = jwt.decode(
        minted_token,
        public_key,  # type: ignore[arg-type]
        algorithms=config["id_token_signing_alg_values_supported"],
        audience=CLIENT_ID,
        issuer=config["issuer"],
    )
    assert claims["sub"] == "u1"
    assert claims["given_name"] == "Jane"
    assert claims["family_name"] == "Doe"
    assert claims["email"] == "jane@example.com"
    assert claims["email_verified"] is True
    assert claims["exp"] - claims["iat"] == 3600


def test_embedding_app_mints_with_key_from_environment(
    monkeypatch: pytest.MonkeyPatch, keypair: SigningKeyData
) -> None:
    """IDP_RSA_PRIVATE_KEY feeds SigningOptions in an embedding application."""
    monkeypatch.setenv("IDP_CANONICAL_ROOT_URL", "https://example.com")
    monkeypatch.setenv("IDP_SIGNING_KEY_ID", "key-1")
    monkeypatch.setenv("IDP_RSA_PRIVATE_KEY", keypair.private_key_pem)
    settings = IdpSettings()

    token = IdTokenMinter(IssuerConfig.from_settings(settings)).mint(
        CLIENT_ID,
        {
            "signingAlgorithm": "RS256",
            "keyId": settings.signing_key_id,
            "rsaPrivateKey": settings.rsa_private_key,
        },
        {"userId": "u1"},
    )
    claims = jwt.decode(
        token,
        keypair.public_key_pem,
        algorithms=["RS256"],
        audience=CLIENT_ID,
        issuer="https://example.com/api",
    )
    assert claims["sub"] == "u1"
