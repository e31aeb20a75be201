# personal_api/logging_config.py
import logging
import logging.config
from pathlib import Path
from typing import Optional

from personal_api.config import settings


def build_logging_config(log_dir: str, level: str = "INFO") -> dict:
    log_file = Path(log_dir) / "app.log"
    return {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
        },

        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": str(log_file),
                "maxBytes": 5 * 1024 * 1024,  # 5 MB
                "backupCount": 5,
                "encoding": "utf-8",
                "level": level,
            },
        },

        "loggers": {
            # Uvicorn core logs; per-request lines come from our middleware
            "uvicorn": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": [],
                "level": "WARNING",
                "propagate": False,
            },
            "httpx": {
                "handlers": ["console", "file"],
                "level": "WARNING",
                "propagate": False,
            },
            "personal_api": {
                "handlers": ["console", "file"],
                "level": level,
                "propagate": False,
            },
        },

        "root": {
            "handlers": ["console", "file"],
            "level": level,
        },
    }


def setup_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> None:
    log_dir = log_dir or settings.LOG_DIR
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir, level or settings.LOG_LEVEL))
    logging.getLogger("personal_api").info("✅ Logging initialized")
