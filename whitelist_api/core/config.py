"""Service-wide configuration.

Settings are read from the environment once at startup and never change
afterwards. The app factory receives them explicitly.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_PORT = 8008

# Environment variable -> Settings field
ENV_FIELDS = {
    "PT_API": "api_url",
    "PT_SERVER_ID": "server_id",
    "PT_API_KEY": "api_key",
    "HOST": "host",
    "PORT": "port",
}


class ConfigError(RuntimeError):
    """Raised when the environment does not describe a usable configuration."""


class Settings(BaseModel):
    """Immutable process configuration."""

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(..., min_length=1, description="Base URL of the Pterodactyl panel API")
    server_id: str = Field(..., min_length=1, description="Target server identifier")
    api_key: str = Field(..., min_length=1, description="Client API key sent as bearer token")
    host: str = Field("", description="Bind address, empty for all interfaces")
    port: int = Field(DEFAULT_PORT, ge=1, le=65535, description="Bind port")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        for var, field in ENV_FIELDS.items():
            raw = env.get(var)
            # An empty PORT falls back to the default, like an unset one
            if raw is None or (field == "port" and raw == ""):
                continue
            values[field] = raw

        try:
            return cls(**values)
        except ValidationError as e:
            field_to_var = {field: var for var, field in ENV_FIELDS.items()}
            problems = ", ".join(
                f"{field_to_var.get(str(err['loc'][0]), err['loc'][0])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(f"Invalid environment configuration ({problems})") from e
