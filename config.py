import importlib
import logging
import os
from pathlib import Path

_ENV_LOADED = False


def _load_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    try:
        dotenv = importlib.import_module("dotenv")
    except ImportError as exc:
        raise SystemExit("python-dotenv is required (pip install -e .)") from exc
    env_path = Path(__file__).resolve().parent / ".env"
    dotenv.load_dotenv(dotenv_path=env_path)
    _ENV_LOADED = True


def get_env(
    name: str, default: str | None = None, required: bool = False
) -> str | None:
    _load_env()
    value = os.environ.get(name, default)
    if required and (value is None or value == ""):
        raise SystemExit(f"{name} env var is required")
    return value


def get_log_level() -> int:
    """Logging level from LOG_LEVEL (name or number), defaulting to INFO."""
    value = (get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise SystemExit(f"LOG_LEVEL has unknown level name: {value}")
    return level
