"""
Configuration for the Pocket client, read from the environment and .env.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional
import requests
from dotenv import load_dotenv

from pocket_client import DEFAULT_TIMEOUT, PocketClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PocketSettings:
    consumer_key: str = ""
    access_token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def has_credentials(self) -> bool:
        return bool(self.consumer_key.strip()) and bool((self.access_token or "").strip())


def _read_timeout() -> float:
    value = os.getenv("POCKET_TIMEOUT")
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        timeout = 0
    if timeout <= 0:
        logger.warning(f"Ignoring invalid POCKET_TIMEOUT '{value}', using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(use_dotenv: bool = True) -> PocketSettings:
    """Load settings from environment variables, after applying .env if present."""
    if use_dotenv:
        load_dotenv()
    return PocketSettings(
        consumer_key=os.getenv("POCKET_CONSUMER_KEY", ""),
        access_token=os.getenv("POCKET_ACCESS_TOKEN"),
        timeout=_read_timeout(),
    )


def create_client(settings: PocketSettings) -> PocketClient:
    return PocketClient(
        consumer_key=settings.consumer_key,
        session=requests.Session(),
        timeout=settings.timeout,
    )
