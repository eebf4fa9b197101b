import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_APP_TITLE = "TalentScout - Hiring Assistant"


@dataclass(frozen=True)
class Settings:
    app_title: str = DEFAULT_APP_TITLE
    typing_delay: float = 1.0
    question_delay: float = 1.5
    question_seed: Optional[int] = None
    log_level: str = "INFO"
    log_color: bool = True


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    return Settings(
        app_title=os.getenv("TALENTSCOUT_APP_TITLE") or DEFAULT_APP_TITLE,
        typing_delay=_env_float("TALENTSCOUT_TYPING_DELAY", 1.0),
        question_delay=_env_float("TALENTSCOUT_QUESTION_DELAY", 1.5),
        question_seed=_env_int("TALENTSCOUT_QUESTION_SEED"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_color=os.getenv("LOG_NO_COLOR") != "1",
    )
