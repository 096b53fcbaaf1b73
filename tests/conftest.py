"""Shared test fixtures for the id_token issuer."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from idp.core.app import create_app
from idp.core.issuer import IssuerConfig
from idp.core.settings import IdpSettings
from idp.crypto.keys import generate_rsa_keypair
from idp.crypto.types import SigningKeyData

ISSUER_URL = "https://example.com/api"


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings independent of the developer's environment."""
    for name in (
        "IDP_ENVIRONMENT",
        "IDP_DEV_API_SERVER_PORT",
        "IDP_CANONICAL_ROOT_URL",
        "IDP_SIGNING_KEY_ID",
        "IDP_RSA_PUBLIC_KEY",
        "IDP_RSA_PRIVATE_KEY",
        "IDP_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def keypair() -> SigningKeyData:
    """One RSA-2048 keypair shared by the whole session."""
    return generate_rsa_keypair()


@pytest.fixture
def issuer() -> IssuerConfig:
    return IssuerConfig(issuer_url=ISSUER_URL)


@pytest.fixture
def settings(keypair: SigningKeyData) -> IdpSettings:
    return IdpSettings(
        canonical_root_url="https://example.com",
        signing_key_id="key-1",
        rsa_public_key=keypair.public_key_pem,
        rsa_private_key=keypair.private_key_pem,
    )


@pytest.fixture
async def client(settings: IdpSettings) -> AsyncIterator[AsyncClient]:
    """Create an httpx test client against the ASGI app."""
    app = create_app(settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
