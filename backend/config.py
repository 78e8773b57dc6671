import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
load_dotenv()


DEFAULT_API_BASE_URL = "http://192.168.0.176:8000"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_NAME = "Настя"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class AppConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    workouts_csv: Optional[str] = None
    user_name: str = DEFAULT_USER_NAME

    @staticmethod
    def from_env() -> "AppConfig":
        timeout_raw = os.getenv("API_TIMEOUT", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"API_TIMEOUT must be a number of seconds, got {timeout_raw!r}")
        return AppConfig(
            api_base_url=os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL).strip().rstrip("/"),
            api_timeout=timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            workouts_csv=os.getenv("WORKOUTS_CSV", "").strip() or None,
            user_name=os.getenv("USER_NAME", DEFAULT_USER_NAME).strip() or DEFAULT_USER_NAME,
        )


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package root logger (once)."""
    logger = logging.getLogger("backend")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    return logger
