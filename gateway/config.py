"""Application settings loaded from environment."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Utility Gateway configuration (env vars / .env)."""

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    # Value of the "creator" field attached to every response envelope
    creator: str = "Goku"
    # Keys accepted at startup; the store is rebuilt from these on every restart
    default_api_keys: list[str] = ["APIKEY"]
    # Upper bound for a single QR encode or YouTube metadata fetch
    delegate_timeout_seconds: float = 30.0
    # Worker threads per delegate library (QR encoder, YouTube extractor)
    delegate_max_workers: int = 4
    qrcode_size: int = 256
    views_dir: Path = _PACKAGE_DIR / "views"
    public_dir: Path = _PACKAGE_DIR / "public"
    # Public URL of this deployment; pinged periodically so hosts don't idle it out
    app_url: str | None = None
    keep_alive_interval_seconds: float = 300.0

    model_config = {"env_file": ".env"}

    @field_validator("app_url")
    @classmethod
    def _check_app_url(cls, value: str | None) -> str | None:
        if not value:
            return None
        if not value.startswith(("http://", "https://")):
            raise ValueError("APP_URL must start with http:// or https://")
        return value


settings = Settings()
