"""Relay configuration with environment variable loading.

Pydantic-based configuration for the Ollama inference server connection.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class RelayConfig(BaseModel):
    """Configuration for the chat relay.

    Attributes:
        base_url: Root URL of the Ollama server.
        default_model: Model used when a chat request names none.
        timeout: Seconds to wait for the inference server before giving up.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_BASE_URL", "http://localhost:11434"),
        description="Ollama server base URL",
    )
    default_model: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_MODEL", "llama3"),
        min_length=1,
        description="Model to use when the request does not specify one",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("OLLAMA_TIMEOUT", "120")),
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("OLLAMA_BASE_URL must start with http:// or https://")
        return v.rstrip("/")


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return RelayConfig()
