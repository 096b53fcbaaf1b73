"""Type definitions for id_token minting inputs."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for caller-facing field names."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class SigningOptions(BaseModel):
    """Per-call signing configuration supplied by the caller."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    signing_algorithm: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "signingAlgorithm", "signingAlg", "signing_algorithm"
        ),
    )
    key_id: str | None = None
    private_key: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("privateKey", "rsaPrivateKey", "private_key"),
    )


class UserRecord(BaseModel):
    """User attributes asserted in the id_token."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        frozen=True,
    )

    user_id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    email_verified: bool | None = None


class IdTokenClaims(BaseModel):
    """Payload of a minted id_token."""

    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    iss: str
    sub: str
    aud: str
    iat: int
    exp: int

    def to_payload(self) -> dict[str, object]:
        """JWT payload with absent profile claims omitted."""
        return self.model_dump(exclude_none=True)
