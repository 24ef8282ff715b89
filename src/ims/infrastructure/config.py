"""Runtime settings read from environment variables.

IMS_DATABASE_URL         SQLAlchemy URL (default: SQLite file under data/)
IMS_LOG_LEVEL            logging level name (default: WARNING)
IMS_LOW_STOCK_THRESHOLD  stock level at or below which a product is "low"
IMS_USER                 e-mail of the user the CLI acts as
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD

# Project root (parent of src/); the default database lives in data/ below it.
ROOT = Path(__file__).resolve().parents[3]
DEFAULT_DATABASE_URL = f"sqlite:///{ROOT / 'data' / 'ims.db'}"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "WARNING"
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    user_email: str | None = None

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_threshold = env.get("IMS_LOW_STOCK_THRESHOLD")
        threshold = DEFAULT_LOW_STOCK_THRESHOLD
        if raw_threshold:
            try:
                threshold = int(raw_threshold)
            except ValueError as exc:
                raise ValidationError(
                    f"IMS_LOW_STOCK_THRESHOLD must be an integer, got {raw_threshold!r}"
                ) from exc
            if threshold < 0:
                raise ValidationError("IMS_LOW_STOCK_THRESHOLD cannot be negative")

        return Settings(
            database_url=env.get("IMS_DATABASE_URL") or DEFAULT_DATABASE_URL,
            log_level=(env.get("IMS_LOG_LEVEL") or "WARNING").upper(),
            low_stock_threshold=threshold,
            user_email=env.get("IMS_USER") or None,
        )
