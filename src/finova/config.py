"""Runtime settings."""

from dataclasses import dataclass
import os
from typing import Optional

DEFAULT_OWNER = "admin"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Settings sourced from the environment.

    Attributes:
        db_path: SQLite database path, or None for the default location.
        owner: Ledger owner whose transactions are loaded.
        log_level: Logging level name for the finova logger.
    """

    db_path: Optional[str] = None
    owner: str = DEFAULT_OWNER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from FINOVA_* environment variables."""
        db_path = os.environ.get("FINOVA_DB_PATH") or None
        owner = os.environ.get("FINOVA_OWNER", "").strip() or DEFAULT_OWNER
        log_level = (
            os.environ.get("FINOVA_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        )
        return cls(db_path=db_path, owner=owner, log_level=log_level)
