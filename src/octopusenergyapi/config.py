from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

BASE_URL = "https://api.octopus.energy/v1"  # official base
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_PAGES = 1000


@dataclass
class ClientSettings:
    """Configuration for the Octopus Energy API client."""
    api_key: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_pages: int = DEFAULT_MAX_PAGES  # safety cap for paginated listings

    @staticmethod
    def from_env() -> 'ClientSettings':
        """Create client settings from environment variables."""
        try:
            api_key = os.environ['OCTOPUS_API_KEY']
        except KeyError:
            raise ConfigurationError("OCTOPUS_API_KEY is not set") from None
        base_url = os.environ.get('OCTOPUS_BASE_URL', BASE_URL)
        try:
            timeout = float(os.environ.get('OCTOPUS_TIMEOUT', DEFAULT_TIMEOUT))
            max_pages = int(os.environ.get('OCTOPUS_MAX_PAGES', DEFAULT_MAX_PAGES))
        except ValueError as e:
            raise ConfigurationError(f"Malformed numeric setting: {e}") from e

        return ClientSettings(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_pages=max_pages,
        )


@dataclass
class ConsumptionQuery:
    """Optional filters for a consumption request; unset fields are not sent."""
    period_from: Optional[dt.datetime] = None
    period_to: Optional[dt.datetime] = None
    page_size: Optional[int] = None
    order_by: Optional[str] = None  # 'period' or '-period'
    group_by: Optional[str] = None  # 'hour', 'day', 'week', 'month', 'quarter'
    page: Optional[int] = None
