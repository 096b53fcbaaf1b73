"""Issuer URL resolution from deployment settings."""

from pydantic import BaseModel, ConfigDict

from idp.core.settings import IdpSettings

ISSUER_PATH = "/api"
LOCAL_HOST = "http://localhost"
MAX_PORT = 65535


def _parse_port(raw: str | None) -> int | None:
    """Return a positive integer port, or None when unset or invalid."""
    if raw is None:
        return None
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    port = int(raw)
    if not 0 < port <= MAX_PORT:
        return None
    return port


def resolve_issuer_url(settings: IdpSettings) -> str:
    """Compute the canonical issuer URL for this deployment.

    The local development API server issues tokens as
    ``http://localhost:{port}/api``; every other deployment uses the
    canonical root URL with the ``/api`` path appended.
    """
    port = _parse_port(settings.dev_api_server_port)
    if settings.is_development and port is not None:
        return f"{LOCAL_HOST}:{port}{ISSUER_PATH}"
    root = settings.canonical_root_url.rstrip("/")
    return f"{root}{ISSUER_PATH}"


class IssuerConfig(BaseModel):
    """Immutable issuer identity, resolved once at startup."""

    model_config = ConfigDict(frozen=True)

    issuer_url: str

    @classmethod
    def from_settings(cls, settings: IdpSettings) -> "IssuerConfig":
        return cls(issuer_url=resolve_issuer_url(settings))

    @property
    def jwks_uri(self) -> str:
        return f"{self.issuer_url}/.well-known/jwks.json"
