"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_ENVIRONMENT = "development"
CANONICAL_ROOT_URL_DEFAULT = "http://localhost:3000"


class IdpSettings(BaseSettings):
    """Issuer, signing key and HTTP settings."""

    model_config = SettingsConfigDict(env_prefix="IDP_")

    environment: str = "production"
    dev_api_server_port: str | None = None
    canonical_root_url: str = CANONICAL_ROOT_URL_DEFAULT
    signing_key_id: str = ""
    rsa_public_key: str = ""
    rsa_private_key: str = ""
    cors_origins: str = ""
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        """True when running the local development API server."""
        return self.environment == DEVELOPMENT_ENVIRONMENT

    def get_cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
