"""RSA key parsing, signing, JWK conversion, and keypair generation."""

import base64
from typing import Any, Protocol

import jwt
import uuid_utils
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from idp.core.errors import MalformedKeyError
from idp.crypto.types import JWKEntry, SigningKeyData

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
SIGNING_ALGORITHM = "RS256"


class KeyBackend(Protocol):
    """Cryptographic capabilities used by the minter and the publisher."""

    def parse_private_key(self, pem: str) -> Any: ...

    def parse_public_key(self, pem: str) -> Any: ...

    def sign(
        self, payload: dict[str, Any], private_key: Any, headers: dict[str, Any]
    ) -> str: ...

    def to_jwk(self, public_key: Any, kid: str) -> JWKEntry: ...


def _int_to_base64url(value: int) -> str:
    """Encode an integer as base64url without padding."""
    byte_length = (value.bit_length() + 7) // 8
    raw = value.to_bytes(byte_length, byteorder="big")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


class RSAKeyBackend:
    """KeyBackend over ``cryptography`` key handles and PyJWT RS256."""

    def parse_private_key(self, pem: str) -> RSAPrivateKey:
        """Load a PEM private key, rejecting anything that is not RSA."""
        try:
            loaded = serialization.load_pem_private_key(pem.encode(), password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise MalformedKeyError("private key could not be parsed") from exc
        if not isinstance(loaded, RSAPrivateKey):
            raise MalformedKeyError("private key is not an RSA key")
        return loaded

    def parse_public_key(self, pem: str) -> RSAPublicKey:
        """Load a PEM public key, rejecting anything that is not RSA."""
        try:
            loaded = serialization.load_pem_public_key(pem.encode())
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise MalformedKeyError("public key could not be parsed") from exc
        if not isinstance(loaded, RSAPublicKey):
            raise MalformedKeyError("public key is not an RSA key")
        return loaded

    def sign(
        self,
        payload: dict[str, Any],
        private_key: RSAPrivateKey,
        headers: dict[str, Any],
    ) -> str:
        """Produce an RS256 compact JWS."""
        return jwt.encode(
            payload,
            private_key,
            algorithm=SIGNING_ALGORITHM,
            headers=headers,
        )

    def to_jwk(self, public_key: RSAPublicKey, kid: str) -> JWKEntry:
        """Convert an RSA public key to its JWK entry."""
        numbers = public_key.public_numbers()
        return JWKEntry(
            kid=kid,
            n=_int_to_base64url(numbers.n),
            e=_int_to_base64url(numbers.e),
        )


default_backend = RSAKeyBackend()


def generate_rsa_keypair() -> SigningKeyData:
    """Generate a new RSA-2048 keypair for JWT signing."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    kid = str(uuid_utils.uuid7())
    return SigningKeyData(
        kid=kid, private_key_pem=private_pem, public_key_pem=public_pem
    )
