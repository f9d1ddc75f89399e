import io
import logging
import re
from datetime import date
from typing import Mapping, NamedTuple, Optional

import pdfplumber
from fastapi.concurrency import run_in_threadpool

from ..config import settings
from ..domain.payslip import PayslipData, create_default_payslip
from .labels import NET_SALARY_LABEL, PDF_LABEL_MAPPINGS, LabelMapping, label_tokens, sorted_labels
from .values import coerce_value, currency_to_int

logger = logging.getLogger(__name__)

# "固定外残業時間(60\n時間超)" -> "固定外残業時間(60時間超)"
_SPLIT_OPEN_PAT = re.compile(r"\(60\s*\n\s*時間超\)")
# "残業手当(60時間超\n)" -> "残業手当(60時間超)"
_SPLIT_CLOSE_PAT = re.compile(r"\(60時間超\s*\n\s*\)")

YEAR_PAT = re.compile(r"^(\d{4})", re.ASCII)
MONTH_PAT = re.compile(r"年(\d{1,2})月", re.ASCII)
AMOUNT_PAT = re.compile(r"^[\d,]+$", re.ASCII)


class Totals(NamedTuple):
    total_earnings: int
    total_deductions: int


def extract_text_from_pdf(content: bytes) -> str:
    """Return the text of every page, one page per line block.

    Raises whatever pdfplumber raises for documents it cannot read.
    """
    with pdfplumber.open(io.BytesIO(content)) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


def normalize_text(text: str) -> str:
    """Re-join labels that the PDF text layer breaks across lines."""
    text = _SPLIT_OPEN_PAT.sub("(60時間超)", text)
    return _SPLIT_CLOSE_PAT.sub("(60時間超)", text)


def tokenize(text: str) -> list[str]:
    return text.split()


def extract_year_month(tokens: list[str], today: Optional[date] = None) -> tuple[int, int]:
    """Find the pay period, e.g. ``"2025(令和07)年11月25日支給分"`` -> ``(2025, 11)``.

    Falls back to ``today`` (the current date by default) when no token
    carries both a year and a month.
    """
    for token in tokens:
        if "年" not in token or "月" not in token:
            continue
        year_match = YEAR_PAT.match(token)
        month_match = MONTH_PAT.search(token)
        if year_match and month_match:
            return int(year_match.group(1)), int(month_match.group(1))

    today = today or date.today()
    logger.debug("Pay period not found, using %s-%s", today.year, today.month)
    return today.year, today.month


def apply_label_mappings(
    tokens: list[str],
    record: PayslipData,
    mappings: Mapping[str, LabelMapping] = PDF_LABEL_MAPPINGS,
) -> PayslipData:
    """Fill ``record`` from the token that follows each known label.

    Labels are tried longest first at every position and the first match
    wins that position. A label at the very end of the stream (no value
    token) leaves its field untouched.
    """
    candidates = [(label, label_tokens(label)) for label in sorted_labels(mappings)]

    for i, token in enumerate(tokens):
        for label, parts in candidates:
            matches = tokens[i:i + len(parts)] == parts
            if not matches and token == label:
                matches = True
            if not matches:
                continue

            value_index = i + len(parts)
            if value_index < len(tokens):
                mapping = mappings[label]
                value = coerce_value(tokens[value_index], mapping.type)
                setattr(record, mapping.field, value)
                logger.debug("MATCHED %s -> %s = %r", label, mapping.field, value)
            break

    return record


def extract_totals(tokens: list[str], min_amount: Optional[int] = None) -> Totals:
    """Locate the unlabeled earnings and deductions totals.

    The payslip prints both totals as two adjacent amounts before the net
    pay label, deductions first. The first adjacent pair of comma grouped
    amounts that are both at least ``min_amount`` is taken.
    """
    if min_amount is None:
        min_amount = settings.totals_min_amount

    try:
        net_index = tokens.index(NET_SALARY_LABEL)
    except ValueError:
        net_index = -1
    end_index = net_index if net_index > 0 else len(tokens)

    def is_large_amount(token: str) -> bool:
        return bool(AMOUNT_PAT.match(token)) and currency_to_int(token) >= min_amount

    for first, second in zip(tokens[:end_index - 1], tokens[1:end_index]):
        if is_large_amount(first) and is_large_amount(second):
            return Totals(total_earnings=currency_to_int(second), total_deductions=currency_to_int(first))

    return Totals(total_earnings=0, total_deductions=0)


def parse_payslip_text(text: str, today: Optional[date] = None) -> PayslipData:
    """Turn extracted payslip text into a fully populated ``PayslipData``.

    Never raises on odd content: anything that cannot be found stays ``0``
    and a missing period falls back to ``today``.
    """
    record = create_default_payslip(today)

    normalized = normalize_text(text)
    tokens = tokenize(normalized)

    record.year, record.month = extract_year_month(tokens, today)
    record = apply_label_mappings(tokens, record)

    totals = extract_totals(tokens)
    record.total_earnings = totals.total_earnings
    record.total_deductions = totals.total_deductions

    logger.debug("Parsed payslip %s-%s from %d tokens", record.year, record.month, len(tokens))
    return record


async def parse_pdf_payslip(content: bytes) -> PayslipData:
    """Extract text from PDF bytes and parse it.

    Extraction errors propagate; the upload workflow turns them into a
    default record.
    """
    text = await run_in_threadpool(extract_text_from_pdf, content)
    return parse_payslip_text(text)
