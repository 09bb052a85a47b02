import logging
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_AUTH_SECRET = "change-me-in-production"


class AuthConfig(BaseModel):
    """Credentials and signing secret, fixed for the life of the process."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    username: str = ""
    password: str = ""
    secret: str = DEFAULT_AUTH_SECRET


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "NavHive"
    debug: bool = False

    # CORS
    cors_origins: list[str] = Field(default=["http://localhost:5173", "http://localhost:3000"])

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./navhive.db")
    database_echo: bool = False

    # Authentication
    auth_enabled: bool = Field(default=False)
    auth_username: str = Field(default="")
    auth_password: str = Field(default="")
    auth_secret: str = Field(default=DEFAULT_AUTH_SECRET)

    def validate_security(self) -> None:
        if not self.auth_enabled:
            return

        if self.auth_secret == DEFAULT_AUTH_SECRET and not self.debug:
            raise RuntimeError(
                "AUTH_SECRET is still the default value. "
                "Set a secure AUTH_SECRET or enable DEBUG mode for development."
            )

        if not self.auth_username or not self.auth_password:
            raise RuntimeError(
                "AUTH_ENABLED is true but AUTH_USERNAME or AUTH_PASSWORD is empty."
            )

    def get_auth_mode(self) -> str:
        if not self.auth_enabled:
            return "disabled"
        if self.auth_secret == DEFAULT_AUTH_SECRET:
            return "dev"
        return "password"

    def auth_config(self) -> AuthConfig:
        return AuthConfig(
            enabled=self.auth_enabled,
            username=self.auth_username,
            password=self.auth_password,
            secret=self.auth_secret,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
