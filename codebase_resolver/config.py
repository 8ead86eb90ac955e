"""
Runtime settings, read from the environment.

A `.env` file next to this package is loaded first (without overriding
variables already set in the process):

    CODEBASE_EXTRACT_ROOT   parent directory for expanded archives (default: system temp dir)
    CODEBASE_PROGRESS_LOG   1/true/yes/on to log a state snapshot after every resolver node
    CODEBASE_LOG_LEVEL      level name used by configure_logging() (default: INFO)
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PACKAGE_ENV = Path(__file__).resolve().parent / ".env"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    extract_root: Optional[Path] = None
    progress_log: bool = False
    log_level: str = "INFO"


def _flag(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() in _TRUTHY


def load_settings(env_file: Optional[Path | str] = PACKAGE_ENV) -> Settings:
    if env_file is not None:
        load_dotenv(env_file, override=False)

    root = os.getenv("CODEBASE_EXTRACT_ROOT", "").strip()
    return Settings(
        extract_root=Path(root).expanduser() if root else None,
        progress_log=_flag(os.getenv("CODEBASE_PROGRESS_LOG")),
        log_level=(os.getenv("CODEBASE_LOG_LEVEL") or "INFO").strip().upper(),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
