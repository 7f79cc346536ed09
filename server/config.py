"""Server configuration loaded from environment variables.

Values can also be placed in a ``.env`` file at the repository root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from nmeadecode.nmea.decoders import SUPPORTED_SENTENCE_TYPES

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _sentence_types(value: str) -> tuple[str, ...]:
    if not value:
        return tuple(sorted(SUPPORTED_SENTENCE_TYPES))
    requested = (item.strip().upper() for item in value.split(","))
    return tuple(item for item in requested if item in SUPPORTED_SENTENCE_TYPES)


class Config:
    """Centralized configuration loaded from environment variables."""

    NMEA_SOURCE = os.getenv("NMEA_SOURCE", "/dev/ttyACM0")
    SENTENCE_TYPES = _sentence_types(os.getenv("NMEA_SENTENCE_TYPES", ""))
    QUEUE_MAX_SIZE = int(os.getenv("NMEA_QUEUE_MAX_SIZE", "10"))
    TIMEOUT_SECONDS = float(os.getenv("NMEA_WS_TIMEOUT_SECONDS", "5.0"))
    LOG_LEVEL = os.getenv("NMEA_LOG_LEVEL", "INFO").upper()
