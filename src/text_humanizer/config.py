"""Centraliza la configuración del proyecto sin valores hardcodeados."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
dotenv_path = _PROJECT_ROOT / ".env"
if dotenv_path.exists():
    load_dotenv(dotenv_path)

DEFAULT_GENERATION_MODEL = "google/gemini-pro-1.5"
DEFAULT_MAX_OUTPUT_TOKENS = 4000
DEFAULT_RATE_LIMIT_MAX = 10
DEFAULT_RATE_LIMIT_WINDOW = 60.0


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def get_openrouter_api_key() -> str | None:
    return os.getenv("OPENROUTER_API_KEY")


def get_generation_model() -> str:
    return os.getenv("GENERATION_MODEL_NAME") or DEFAULT_GENERATION_MODEL


def get_openrouter_chat_endpoint() -> str:
    return os.getenv(
        "OPENROUTER_CHAT_ENDPOINT",
        "https://openrouter.ai/api/v1/chat/completions",
    )


def get_max_output_tokens() -> int:
    return _int_env("MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS)


def get_rate_limit_max() -> int:
    return _int_env("RATE_LIMIT_MAX", DEFAULT_RATE_LIMIT_MAX)


def get_rate_limit_window() -> float:
    return _float_env("RATE_LIMIT_WINDOW", DEFAULT_RATE_LIMIT_WINDOW)


def get_data_dir() -> Path:
    """
    Directorio para el almacenamiento local (historial del CLI).
    """

    value = os.getenv("HUMANIZER_DATA_DIR", "")
    if value:
        return Path(value)
    return _PROJECT_ROOT / "data"


def get_history_path() -> Path:
    return get_data_dir() / os.getenv("HISTORY_FILENAME", "storage.json")
