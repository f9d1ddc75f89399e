from pydantic import BaseModel, Field
from typing import List, Literal, Union

from ..domain.payslip import PayslipData

# 32-bit signed INTEGER column limit
MAX_DB_INT = 2_147_483_647


class PayslipFormData(BaseModel):
    """Confirmation form values: ``H:MM`` times and comma grouped yen."""

    year: int
    month: int

    extra_overtime_minutes: str = "0:00"
    over60_overtime_minutes: str = "0:00"
    night_overtime_minutes: str = "0:00"
    paid_leave_days: float = 0
    paid_leave_remaining_days: float = 0

    base_salary: str = "0"
    fixed_overtime_allowance: str = "0"
    overtime_allowance: str = "0"
    over60_overtime_allowance: str = "0"
    night_allowance: str = "0"
    special_allowance: str = "0"
    expense_reimbursement: str = "0"
    commute_allowance: str = "0"
    stock_incentive: str = "0"
    total_earnings: str = "0"

    health_insurance: str = "0"
    pension_insurance: str = "0"
    employment_insurance: str = "0"
    resident_tax: str = "0"
    income_tax: str = "0"
    stock_contribution: str = "0"
    total_deductions: str = "0"

    net_salary: str = "0"


class UploadPreview(BaseModel):
    step: Literal["confirm"] = "confirm"
    file_name: str
    data: PayslipFormData


class PayslipCreate(PayslipData):
    year: int = Field(ge=2000, le=2100)
    month: int = Field(ge=1, le=12)

    extra_overtime_minutes: int = Field(default=0, ge=0, le=MAX_DB_INT)
    over60_overtime_minutes: int = Field(default=0, ge=0, le=MAX_DB_INT)
    night_overtime_minutes: int = Field(default=0, ge=0, le=MAX_DB_INT)
    paid_leave_days: float = Field(default=0, ge=0)
    paid_leave_remaining_days: float = Field(default=0, ge=0)

    base_salary: int = Field(default=0, ge=0, le=MAX_DB_INT)
    fixed_overtime_allowance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    overtime_allowance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    over60_overtime_allowance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    night_allowance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    special_allowance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    expense_reimbursement: int = Field(default=0, ge=0, le=MAX_DB_INT)
    commute_allowance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    stock_incentive: int = Field(default=0, ge=0, le=MAX_DB_INT)
    total_earnings: int = Field(default=0, ge=0, le=MAX_DB_INT)

    health_insurance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    pension_insurance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    employment_insurance: int = Field(default=0, ge=0, le=MAX_DB_INT)
    resident_tax: int = Field(default=0, ge=0, le=MAX_DB_INT)
    income_tax: int = Field(default=0, ge=0, le=MAX_DB_INT)
    stock_contribution: int = Field(default=0, ge=0, le=MAX_DB_INT)
    total_deductions: int = Field(default=0, ge=0, le=MAX_DB_INT)

    net_salary: int = Field(default=0, ge=0, le=MAX_DB_INT)


class SalaryRecord(PayslipData):
    id: int

    model_config = {
        "from_attributes": True,
    }


class SaveResult(BaseModel):
    success: bool
    message: str
    id: int


class PayslipListData(BaseModel):
    records: List[SalaryRecord] = []
    selected_year: Union[int, Literal["all"]]
    available_years: List[int] = []
