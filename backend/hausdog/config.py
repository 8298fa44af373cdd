import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import HttpUrl, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_URL_ADAPTER = TypeAdapter(HttpUrl)


class InvalidEnvironmentError(RuntimeError):
    """Raised when required environment variables are missing or malformed."""

    def __init__(self, fields: dict[str, list[str]]):
        self.fields = fields
        names = ", ".join(sorted(fields))
        super().__init__(f"Invalid server environment variables: {names}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Hausdog API"
    app_version: str = "0.1.0"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Supabase (auth)
    supabase_url: str
    supabase_key: str
    supabase_service_key: str | None = None

    # Database
    database_url: str

    # LLM providers (document extraction and chat run elsewhere)
    gemini_api_key: str
    anthropic_api_key: str

    # Background jobs
    trigger_api_key: str | None = None
    trigger_api_url: str | None = None

    # Server
    port: int = 3333
    public_url: str | None = None
    node_env: Literal["development", "production", "test"] = "development"

    # Inbound document email, e.g. "ingest.hausdog.app"
    ingest_email_domain: str | None = None

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_auth: str = "INFO"             # Supabase auth client
    log_color: bool = True

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("supabase_key", "database_url", "gemini_api_key", "anthropic_api_key")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("supabase_service_key", "trigger_api_key")
    @classmethod
    def _optional_non_empty(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("must not be empty when set")
        return value

    @field_validator("supabase_url", "trigger_api_url", "public_url")
    @classmethod
    def _valid_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            raise ValueError("must be a valid URL") from None
        return value.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.node_env == "development"

    def get_base_url(self) -> str:
        """Public base URL of this server."""
        if self.public_url:
            return self.public_url
        return f"http://localhost:{self.port}"


def load_settings(**overrides: object) -> Settings:
    """Build and validate settings, reporting every offending field."""
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        fields: dict[str, list[str]] = {}
        for error in exc.errors():
            name = str(error["loc"][0]).upper() if error["loc"] else "__root__"
            fields.setdefault(name, []).append(error["msg"])
        _config_logger.error("Invalid server environment variables: %s", fields)
        raise InvalidEnvironmentError(fields) from exc


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return load_settings()
