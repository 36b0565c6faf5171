# services/api/core/credentials.py
"""
Service-account credential sources.

The source is picked once at process start from Settings:
  - LocalFileCredentials: outside production when GOOGLE_TYPE is not set
  - EnvCredentials: production, or whenever GOOGLE_TYPE is set

Credentials themselves are materialized on every call to load(), so a
missing variable only fails the request that needs it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from google.oauth2.service_account import Credentials

from settings import Settings


SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

# info key -> environment variable that feeds it
_REQUIRED_ENV_FIELDS = {
    "project_id": "GOOGLE_PROJECT_ID",
    "private_key": "GOOGLE_PRIVATE_KEY",
    "client_email": "GOOGLE_CLIENT_EMAIL",
}


class CredentialsError(RuntimeError):
    """Raised when the service account cannot be assembled from the environment."""


@dataclass(frozen=True)
class LocalFileCredentials:
    path: str

    mode = "local-file"

    def load(self, scopes: List[str] = SCOPES) -> Credentials:
        return Credentials.from_service_account_file(self.path, scopes=scopes)


@dataclass(frozen=True)
class EnvCredentials:
    info: Dict[str, Any] = field(default_factory=dict)

    mode = "environment"

    def missing_variables(self) -> List[str]:
        return [env for key, env in _REQUIRED_ENV_FIELDS.items() if not self.info.get(key)]

    def load(self, scopes: List[str] = SCOPES) -> Credentials:
        missing = self.missing_variables()
        if missing:
            raise CredentialsError(
                f"Missing environment variable(s): {', '.join(missing)}"
            )
        info = dict(self.info)
        info["private_key"] = info["private_key"].replace("\\n", "\n")
        return Credentials.from_service_account_info(info, scopes=scopes)


CredentialSource = Union[LocalFileCredentials, EnvCredentials]


def resolve_credential_source(settings: Settings) -> CredentialSource:
    """Choose where the service account comes from for this process."""
    if not settings.uses_env_credentials():
        return LocalFileCredentials(path=settings.google_credentials_file)

    return EnvCredentials(
        info={
            "type": settings.google_type or "service_account",
            "project_id": settings.google_project_id,
            "private_key_id": settings.google_private_key_id,
            "private_key": settings.google_private_key,
            "client_email": settings.google_client_email,
            "client_id": settings.google_client_id,
            "auth_uri": settings.google_auth_uri,
            "token_uri": settings.google_token_uri,
            "auth_provider_x509_cert_url": settings.google_auth_provider_x509_cert_url,
            "client_x509_cert_url": settings.google_client_x509_cert_url,
            "universe_domain": settings.google_universe_domain,
        }
    )
