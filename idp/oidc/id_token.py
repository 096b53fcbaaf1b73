"""id_token minting for an external identity provider login."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import ValidationError

from idp.core.errors import (
    InvalidInputError,
    MalformedKeyError,
    MissingKeyMaterialError,
    UnsupportedAlgorithmError,
)
from idp.core.issuer import IssuerConfig
from idp.crypto.keys import SIGNING_ALGORITHM, KeyBackend, default_backend
from idp.oidc.types import IdTokenClaims, SigningOptions, UserRecord

logger = logging.getLogger(__name__)

ID_TOKEN_TTL = 3600

_M = TypeVar("_M", SigningOptions, UserRecord)


def _coerce(
    value: _M | Mapping[str, Any] | None, model: type[_M], what: str
) -> _M:
    if value is None:
        logger.warning("Missing %s", what)
        raise InvalidInputError(f"missing {what}")
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        logger.warning("Invalid %s: %d validation error(s)", what, exc.error_count())
        raise InvalidInputError(f"invalid {what}") from exc


class IdTokenMinter:
    """Creates RS256-signed id_tokens for a fixed issuer."""

    def __init__(
        self,
        issuer: IssuerConfig,
        backend: KeyBackend = default_backend,
    ) -> None:
        self._issuer = issuer
        self._backend = backend

    def mint(
        self,
        audience_client_id: str | None,
        options: SigningOptions | Mapping[str, Any] | None,
        user: UserRecord | Mapping[str, Any] | None,
    ) -> str:
        """Validate inputs and return a signed id_token.

        ``audience_client_id`` is the client id the identity provider was
        registered with; it becomes the ``aud`` claim. Raises an
        ``IdTokenError`` subclass for any caller error, before signing.
        """
        if not audience_client_id:
            logger.warning("Missing idp client id")
            raise InvalidInputError("missing audience client id")
        user = _coerce(user, UserRecord, "user information")
        options = _coerce(options, SigningOptions, "signing options")

        if options.signing_algorithm != SIGNING_ALGORITHM:
            logger.warning(
                "Signing algorithm %s is not supported", options.signing_algorithm
            )
            raise UnsupportedAlgorithmError(
                f"{options.signing_algorithm} is not supported, use {SIGNING_ALGORITHM}"
            )
        if not options.private_key:
            logger.warning("Missing RSA private key")
            raise MissingKeyMaterialError("missing RSA private key")

        try:
            private_key = self._backend.parse_private_key(options.private_key)
        except MalformedKeyError as exc:
            logger.warning("Unusable RSA private key: %s", exc.message)
            raise

        iat = int(datetime.now(UTC).timestamp())
        claims = IdTokenClaims(
            given_name=user.first_name,
            family_name=user.last_name,
            email=user.email,
            email_verified=user.email_verified,
            iss=self._issuer.issuer_url,
            sub=user.user_id,
            aud=audience_client_id,
            iat=iat,
            exp=iat + ID_TOKEN_TTL,
        )
        headers: dict[str, Any] = {"typ": None}
        if options.key_id:
            headers["kid"] = options.key_id

        token = self._backend.sign(claims.to_payload(), private_key, headers)
        logger.debug(
            "Minted id_token sub=%s aud=%s kid=%s",
            claims.sub,
            claims.aud,
            options.key_id,
        )
        return token


def create_id_token(
    issuer: IssuerConfig,
    audience_client_id: str | None,
    options: SigningOptions | Mapping[str, Any] | None,
    user: UserRecord | Mapping[str, Any] | None,
) -> str:
    """Mint an id_token with the default RSA backend."""
    return IdTokenMinter(issuer).mint(audience_client_id, options, user)
