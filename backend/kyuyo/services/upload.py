import logging
from typing import Optional

from sqlalchemy.orm import Session

from .. import models
from ..domain.payslip import (
    CURRENCY_FIELDS,
    DECIMAL_FIELDS,
    TIME_FIELDS,
    PayslipData,
    create_default_payslip,
)
from ..ocr.strategy import PDF_CONTENT_TYPE, get_parser
from ..ocr.values import currency_to_int, minutes_to_time, time_to_minutes
from ..schemas.payslip import PayslipCreate, PayslipFormData, UploadPreview
from ..utils.format import format_number_with_commas

logger = logging.getLogger(__name__)

ALLOWED_FILE_TYPES = (
    PDF_CONTENT_TYPE,
    "image/png",
    "image/jpeg",
    "image/jpg",
)

MESSAGES = {
    "no_file": "ファイルが選択されていません",
    "invalid_type": "PDF または画像ファイル（PNG, JPG）を選択してください",
    "invalid_input": "入力内容に誤りがあります",
    "saved": "給与明細を保存しました",
}


class UploadError(ValueError):
    pass


def is_allowed_file_type(content_type: Optional[str]) -> bool:
    return content_type in ALLOWED_FILE_TYPES


def to_form_data(data: PayslipData) -> PayslipFormData:
    """Render a parsed payslip for the confirmation form."""
    values = {"year": data.year, "month": data.month}
    for name in TIME_FIELDS:
        values[name] = minutes_to_time(getattr(data, name))
    for name in DECIMAL_FIELDS:
        values[name] = getattr(data, name)
    for name in CURRENCY_FIELDS:
        values[name] = format_number_with_commas(getattr(data, name))
    return PayslipFormData(**values)


def from_form_data(form: PayslipFormData) -> dict:
    """Turn confirmed form values back into plain numbers (not yet validated)."""
    values = {"year": form.year, "month": form.month}
    for name in TIME_FIELDS:
        values[name] = time_to_minutes(getattr(form, name))
    for name in DECIMAL_FIELDS:
        values[name] = getattr(form, name)
    for name in CURRENCY_FIELDS:
        values[name] = currency_to_int(getattr(form, name))
    return values


async def handle_file_upload(
    filename: Optional[str],
    content_type: Optional[str],
    content: bytes,
) -> UploadPreview:
    """Parse an uploaded payslip into a confirmation preview.

    A PDF that cannot be read still yields an all-zero preview so the user
    can type the values in by hand.
    """
    if not content:
        raise UploadError(MESSAGES["no_file"])
    if not is_allowed_file_type(content_type):
        raise UploadError(MESSAGES["invalid_type"])

    parser = get_parser(content_type)
    try:
        data = await parser.parse(content)
    except Exception:
        logger.exception("PDF解析エラー: %s", filename)
        data = create_default_payslip()

    return UploadPreview(file_name=filename or "", data=to_form_data(data))


def save_payslip(db: Session, form: PayslipFormData) -> models.Salary:
    """Validate confirmed values and store them.

    Raises ``pydantic.ValidationError`` when a value is out of range.
    """
    payload = PayslipCreate(**from_form_data(form))
    salary = models.Salary(**payload.model_dump())
    db.add(salary)
    db.commit()
    db.refresh(salary)
    logger.info("Saved payslip %s for %s-%02d", salary.id, salary.year, salary.month)
    return salary
