import logging
from datetime import date
from typing import Literal
from urllib.parse import quote

from fastapi import APIRouter, UploadFile, File, Depends, HTTPException, Response
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .. import models
from ..database import get_db
from ..schemas.payslip import PayslipFormData, PayslipListData, SalaryRecord, SaveResult, UploadPreview
from ..services.export import filter_records_for_export, generate_csv_content, generate_csv_filename
from ..services.upload import MESSAGES, UploadError, handle_file_upload, save_payslip

logger = logging.getLogger(__name__)

router = APIRouter()


def fetch_available_years(db: Session) -> list[int]:
    rows = (
        db.query(models.Salary.year)
        .group_by(models.Salary.year)
        .order_by(models.Salary.year.desc())
        .all()
    )
    return [r[0] for r in rows]


def parse_selected_year(year: str | None, available_years: list[int]) -> int | str:
    if year == "all":
        return "all"
    if year:
        try:
            return int(year)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid year")
    return available_years[0] if available_years else date.today().year


def fetch_salary_records(db: Session, selected_year: int | str) -> list[models.Salary]:
    query = db.query(models.Salary)
    if selected_year == "all":
        query = query.order_by(models.Salary.year.desc(), models.Salary.month.desc())
    else:
        query = query.filter(models.Salary.year == selected_year).order_by(models.Salary.month.asc())
    return query.all()


@router.post("/upload", response_model=UploadPreview)
async def upload(file: UploadFile = File(...)):
    content = await file.read()
    logger.info("Upload %s (%s, %d bytes)", file.filename, file.content_type, len(content))

    try:
        return await handle_file_upload(file.filename, file.content_type, content)
    except UploadError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/save", response_model=SaveResult)
def save(payload: PayslipFormData, db: Session = Depends(get_db)):
    try:
        salary = save_payslip(db, payload)
    except ValidationError as e:
        logger.warning("Invalid payslip input: %s", e.errors())
        raise HTTPException(status_code=422, detail=MESSAGES["invalid_input"])
    return SaveResult(success=True, message=MESSAGES["saved"], id=salary.id)


@router.get("/", response_model=PayslipListData)
def list_all(year: str | None = None, db: Session = Depends(get_db)):
    available_years = fetch_available_years(db)
    selected_year = parse_selected_year(year, available_years)
    records = fetch_salary_records(db, selected_year)
    return PayslipListData(
        records=[SalaryRecord.model_validate(r) for r in records],
        selected_year=selected_year,
        available_years=available_years,
    )


@router.get("/export")
def export_csv(
    range: Literal["all", "year", "month"] = "all",
    year: int | None = None,
    month: int | None = None,
    db: Session = Depends(get_db),
):
    if range in ("year", "month") and year is None:
        raise HTTPException(status_code=400, detail="year is required")
    if range == "month" and month is None:
        raise HTTPException(status_code=400, detail="month is required")

    records = fetch_salary_records(db, "all")
    # 古い順に出力する
    records = filter_records_for_export(list(reversed(records)), range, year, month)
    content = generate_csv_content(records)
    filename = generate_csv_filename(range, year, month)

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


@router.get("/{payslip_id}", response_model=SalaryRecord)
def get_one(payslip_id: int, db: Session = Depends(get_db)):
    p = db.get(models.Salary, payslip_id)
    if not p:
        raise HTTPException(status_code=404, detail="Not found")
    return SalaryRecord.model_validate(p)


@router.delete("/{payslip_id}")
def delete_payslip(payslip_id: int, db: Session = Depends(get_db)):
    p = db.get(models.Salary, payslip_id)
    if not p:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(p)
    db.commit()
    logger.info("Deleted payslip %s", payslip_id)
    return {"status": "deleted"}
