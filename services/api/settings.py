# services/api/settings.py
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, ConfigDict, Field
from typing import List
from pathlib import Path

DEFAULT_SPREADSHEET_ID = "1r4CeqEpV315mvCQMy7M77fppCwdX2mW4sC_5ZvUJQNo"


class Settings(BaseSettings):
    # Deployment environment. Accepts APP_ENV, or NODE_ENV from older deploys.
    app_env: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )

    # Spreadsheet holding the sellers / clients / sells tabs
    sheets_spreadsheet_id: str = DEFAULT_SPREADSHEET_ID

    # Local service-account file (used outside production when GOOGLE_TYPE is unset)
    google_credentials_file: str = "credentials.json"

    # ===== Service account from environment (Railway/production) =====
    google_type: str = ""
    google_project_id: str = ""
    google_private_key_id: str = ""
    # Usually pasted with literal "\n" sequences; converted when credentials load
    google_private_key: str = ""
    google_client_email: str = ""
    google_client_id: str = ""
    google_auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    google_token_uri: str = "https://oauth2.googleapis.com/token"
    google_auth_provider_x509_cert_url: str = "https://www.googleapis.com/oauth2/v1/certs"
    google_client_x509_cert_url: str = ""
    google_universe_domain: str = "googleapis.com"

    # CORS settings
    allowed_origins: str = "*"

    # Server
    host: str = "0.0.0.0"
    port: int = 1337

    # Server-generated sale timestamps are rendered in this zone
    timestamp_timezone: str = "America/Lima"

    log_level: str = "INFO"

    model_config = ConfigDict(
        # Always load .env from the same folder as this settings.py
        env_file=str(Path(__file__).resolve().parent / ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def uses_env_credentials(self) -> bool:
        """
        True when the service account must be assembled from GOOGLE_* variables.
        Local development without GOOGLE_TYPE reads google_credentials_file instead.
        """
        return self.is_production() or bool(self.google_type)

    def get_origins_list(self) -> List[str]:
        """Parse comma-separated origins into a list."""
        if not self.allowed_origins:
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


_settings_instance = None

def get_settings() -> Settings:
    """Singleton pattern for settings."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
