import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    database_url: str
    totals_min_amount: int
    recent_records: int
    log_level: str


def load_settings() -> Settings:
    """Read settings from the environment and ``backend/.env``."""
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./kyuyo.db"),
        # 合計金額とみなす最小額（円）
        totals_min_amount=_int_env("KYUYO_TOTALS_MIN_AMOUNT", 10000),
        recent_records=_int_env("KYUYO_RECENT_RECORDS", 5),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
