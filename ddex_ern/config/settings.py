"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# Settings are read from TWO sources (in priority order):
#
#   1. **Environment variables**: e.g., API_KEYS=key-one,key-two
#      (highest priority, always wins)
#   2. **.env file**: key=value lines in the project root .env file
#
# Field name `sender_party_id` maps to env var `SENDER_PARTY_ID`.
# Defaults are used when neither an env var nor a .env entry exists.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from ddex_ern.models.options import (
    DEFAULT_RECIPIENT_PARTY_ID,
    DEFAULT_RECIPIENT_PARTY_NAME,
    DEFAULT_SENDER_PARTY_ID,
    DealProfile,
)
from ddex_ern.utils.identifiers import DEFAULT_PREFIX


class Settings(BaseSettings):
    """ERN generator service settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Authentication ===
    # Comma-separated list; empty disables API-key checks (local development).
    api_keys: str = ""

    # === DDEX message header ===
    sender_party_id: str = DEFAULT_SENDER_PARTY_ID
    recipient_party_id: str = DEFAULT_RECIPIENT_PARTY_ID
    recipient_party_name: str = DEFAULT_RECIPIENT_PARTY_NAME
    message_id_prefix: str = DEFAULT_PREFIX

    # === Deal catalog ===
    deal_profile: DealProfile = DealProfile.FULL

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    app_env: str = "development"
    log_level: str = "INFO"
    # Comma-separated; empty allows any origin.
    cors_origins: str = ""

    def get_api_keys(self) -> list[str]:
        """Return the configured API keys, trimmed, without empty entries."""
        return [key.strip() for key in self.api_keys.split(",") if key.strip()]

    def get_cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
