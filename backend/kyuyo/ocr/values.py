"""Conversion of raw payslip tokens into numbers.

All converters are total: malformed input yields zero instead of raising,
so a single unreadable value never aborts the whole document.
"""
import re

TIME_PAT = re.compile(r"^(\d+):(\d+)$", re.ASCII)
_LEADING_INT = re.compile(r"^\s*[+-]?\d+", re.ASCII)
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def time_to_minutes(token: str) -> int:
    """``"15:30"`` -> ``930``. Anything that is not ``digits:digits`` -> ``0``."""
    m = TIME_PAT.match(token or "")
    if not m:
        return 0
    return int(m.group(1)) * 60 + int(m.group(2))


def minutes_to_time(minutes: int) -> str:
    """``930`` -> ``"15:30"``."""
    hours, rest = divmod(int(minutes), 60)
    return f"{hours}:{rest:02d}"


def currency_to_int(token: str) -> int:
    """``"300,000"`` -> ``300000``.

    Like ``parseInt`` only the leading integer part counts, so ``"1,200円"``
    still gives ``1200`` while ``"円"`` gives ``0``.
    """
    m = _LEADING_INT.match((token or "").replace(",", ""))
    return int(m.group(0)) if m else 0


def decimal_to_float(token: str) -> float:
    m = _LEADING_FLOAT.match(token or "")
    return float(m.group(0)) if m else 0.0


_CONVERTERS = {
    "time": time_to_minutes,
    "currency": currency_to_int,
    "decimal": decimal_to_float,
}


def coerce_value(token: str, value_type: str):
    try:
        converter = _CONVERTERS[value_type]
    except KeyError:
        raise ValueError(f"Unknown value type: {value_type}")
    return converter(token)
