import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DB_PATH = Path("data/employees.db")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Runtime configuration read from the environment."""

    db_path: Path = DEFAULT_DB_PATH
    log_level: str = "INFO"
    log_dir: Optional[Path] = None


def load_env() -> None:
    """Load .env from project root if present.
    Variables already set in the environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def load_settings() -> Settings:
    """
    Build Settings from EMPLOYEES_* environment variables.

    EMPLOYEES_DB: SQLite database path (default: data/employees.db)
    EMPLOYEES_LOG_LEVEL: log level (default: INFO, also used for unknown names)
    EMPLOYEES_LOG_DIR: directory for log files (default: no file logging)
    """
    log_dir = os.getenv("EMPLOYEES_LOG_DIR")
    log_level = os.getenv("EMPLOYEES_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"
    return Settings(
        db_path=Path(os.getenv("EMPLOYEES_DB", str(DEFAULT_DB_PATH))),
        log_level=log_level,
        log_dir=Path(log_dir) if log_dir else None,
    )
