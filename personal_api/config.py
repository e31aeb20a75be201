# personal_api/config.py
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# load .env from the working directory into process env vars (missing file is fine)
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:8080",
    "http://localhost:8081",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
    "http://127.0.0.1:8080",
    "http://127.0.0.1:8081",
    "https://michaelhenry.me",
]

DEFAULT_RESUME_PATH = "assets/Michael Henry Resume - Staff Software Engineer.pdf"


def _as_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "y", "on")


def _as_int(name: str, default: int) -> int:
    try:
        return int(str(os.getenv(name, default)).strip())
    except ValueError:
        return default


def _as_str(name: str) -> Optional[str]:
    val = (os.getenv(name) or "").strip()
    return val or None


def _parse_origins(raw: Optional[str]) -> list[str]:
    """
    Accepts:  'http://localhost:3000, https://example.com'
    Returns:  ['http://localhost:3000', 'https://example.com']
    Empty/unset falls back to the built-in allow-list.
    """
    origins = [o.strip().rstrip("/") for o in (raw or "").split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


class Settings:
    """Process settings, read once from the environment."""

    def __init__(self):
        # App
        self.ENV: str = os.getenv("ENV", "dev")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = _as_int("PORT", 3030)

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_DIR: str = os.getenv("LOG_DIR", "logs")

        # CORS
        self.CORS_ORIGINS: list[str] = _parse_origins(os.getenv("CORS_ORIGINS"))

        # Resume
        self.RESUME_PATH: str = os.getenv("RESUME_PATH", DEFAULT_RESUME_PATH)

        # Brevo
        self.BREVO_API_KEY: Optional[str] = _as_str("BREVO_API_KEY")
        self.BREVO_SENDER_EMAIL: Optional[str] = _as_str("BREVO_SENDER_EMAIL")
        self.BREVO_SENDER_NAME: Optional[str] = _as_str("BREVO_SENDER_NAME")
        self.CONTACT_RECIPIENT_EMAIL: Optional[str] = _as_str("CONTACT_RECIPIENT_EMAIL")
        self.BREVO_API_URL: str = (os.getenv("BREVO_API_URL") or "https://api.brevo.com/v3").rstrip("/")
        self.EMAIL_DRY_RUN: bool = _as_bool("EMAIL_DRY_RUN", False)

    def missing_email_settings(self) -> list[str]:
        required = {
            "BREVO_API_KEY": self.BREVO_API_KEY,
            "BREVO_SENDER_EMAIL": self.BREVO_SENDER_EMAIL,
            "BREVO_SENDER_NAME": self.BREVO_SENDER_NAME,
        }
        return [name for name, value in required.items() if not value]


# instantiate settings once at import
settings = Settings()
