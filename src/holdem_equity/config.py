"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


# Table
DEFAULT_PLAYERS = int(os.getenv("HOLDEM_PLAYERS", "6"))

# Worker pool
DEFAULT_WORKERS = int(os.getenv("HOLDEM_WORKERS", "8"))
DEFAULT_TRIALS_PER_WORKER = int(os.getenv("HOLDEM_TRIALS", "20000"))

# Drop weak hands pre-flop and on the flop before the showdown
USE_HEURISTICS = _env_flag("HOLDEM_HEURISTICS", True)

# Fixed seed for reproducible runs; unset means fresh randomness
SEED = _env_optional_int("HOLDEM_SEED")

# Seconds the aggregator waits on the result channel before polling again
CHANNEL_POLL_INTERVAL = float(os.getenv("HOLDEM_CHANNEL_POLL", "0.5"))

# Logging
LOG_LEVEL = os.getenv("HOLDEM_LOG_LEVEL", "WARNING").upper()
