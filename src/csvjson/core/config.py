"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_MAX_UPLOAD_BYTES = 10 << 20


class ServerConfig(BaseSettings):
    """HTTP server configuration, built by the CLI from its flags."""

    model_config = {"env_prefix": "CSVJSON_SERVER_"}

    host: str = "localhost"
    port: int = Field(default=8080, ge=0, le=65535)
    verbose: bool = False
    max_upload_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, gt=0)

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


class AppSettings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "CSVJSON_"}

    log_level: str = "INFO"

    server: ServerConfig = ServerConfig()
