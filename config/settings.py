"""Configuration settings for the JSONPlaceholder API client."""
import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Resolved client configuration."""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(description="API root URL without trailing slash")
    timeout: float = Field(gt=0, description="Request timeout in seconds")
    log_level: str = Field(description="Logging level name")


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(
            f"API_TIMEOUT must be a number of seconds, got {raw!r}. "
            "Please fix it in your .env file."
        ) from None
    if timeout <= 0:
        raise ValueError(f"API_TIMEOUT must be positive, got {timeout}")
    return timeout


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Returns:
        Settings with base URL (trailing slash stripped), timeout and log level
    """
    base_url = os.getenv("API_BASE_URL") or DEFAULT_BASE_URL
    return Settings(
        base_url=base_url.rstrip("/"),
        timeout=_parse_timeout(os.getenv("API_TIMEOUT")),
        log_level=(os.getenv("API_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
