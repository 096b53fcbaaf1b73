"""Type definitions for signing key, JWKS, and JWT operations."""

from pydantic import BaseModel, ConfigDict


class SigningKeyData(BaseModel):
    """An RSA keypair for JWT signing."""

    kid: str
    private_key_pem: str
    public_key_pem: str


class JWKEntry(BaseModel):
    """Single public JWK entry in a JWKS response."""

    kty: str = "RSA"
    n: str
    e: str
    alg: str = "RS256"
    kid: str
    use: str = "sig"


class JWKSResponse(BaseModel):
    """JSON Web Key Set response."""

    keys: list[JWKEntry]


class DecodedIdToken(BaseModel):
    """Decoded and verified id_token claims."""

    model_config = ConfigDict(extra="allow")

    iss: str = ""
    sub: str = ""
    aud: str = ""
    iat: int = 0
    exp: int = 0
    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
