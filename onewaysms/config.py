"""Configuration loader from .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://gateway.onewaysms.sg:10002"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """OneWaySMS client configuration."""

    # Gateway URL, e.g. http://gatewayd2.onewaysms.sg:10002
    base_url: str

    # API credentials (API section of the OneWaySMS account)
    api_username: str
    api_password: str

    # Default sender, up to 11 alphanumeric characters
    sender_id: str

    # Seconds, only used when the client opens its own HTTP connection
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))


def load_config(env_path: str | Path | None = None) -> ClientConfig:
    """Load configuration from .env file."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    return ClientConfig(
        base_url=os.getenv("ONEWAY_BASE_URL", DEFAULT_BASE_URL),
        api_username=os.getenv("ONEWAY_API_USERNAME", ""),
        api_password=os.getenv("ONEWAY_API_PASSWORD", ""),
        sender_id=os.getenv("ONEWAY_SENDER_ID", ""),
        timeout=float(os.getenv("ONEWAY_TIMEOUT", DEFAULT_TIMEOUT)),
    )
