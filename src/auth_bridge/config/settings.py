"""Configuration Settings for Auth Bridge

Manages environment variables and application configuration.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Service info
    service_name: str = "kakao-firebase-auth-bridge"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # OAuth provider (get client details from https://developers.kakao.com)
    provider_name: str = "kakao"
    provider_claim: str = "KAKAO"
    kakao_client_id: str = ""  # Kakao REST API key
    kakao_client_secret: Optional[str] = None
    kakao_redirect_uri: str = "http://localhost:8080/auth/kakao/callback"
    kakao_authorize_url: str = "https://kauth.kakao.com/oauth/authorize"
    kakao_token_url: str = "https://kauth.kakao.com/oauth/token"
    kakao_profile_url: str = "https://kapi.kakao.com/v2/user/me?secure_resource=true"
    kakao_scopes: list[str] = ["profile_nickname", "profile_image", "account_email"]
    http_timeout_seconds: float = 10.0

    # Firebase (service account JSON; falls back to Application Default Credentials)
    firebase_credentials_path: Optional[str] = None
    firebase_project_id: Optional[str] = None

    # CORS configuration
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Returns:
        Settings instance
    """
    return Settings()
