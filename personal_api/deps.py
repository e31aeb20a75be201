# personal_api/deps.py
from typing import Optional

import httpx

from personal_api.config import Settings, settings


def get_settings() -> Settings:
    return settings


def get_email_transport() -> Optional[httpx.AsyncBaseTransport]:
    # None -> httpx default network transport
    return None
