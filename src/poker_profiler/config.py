"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Logging
LOG_LEVEL = os.getenv("POKER_PROFILER_LOG_LEVEL", "WARNING").upper()

# Reports
MIN_HANDS = int(os.getenv("POKER_PROFILER_MIN_HANDS", "0"))
AF_INCLUDE_CHECKS = _flag("POKER_PROFILER_AF_INCLUDE_CHECKS")
