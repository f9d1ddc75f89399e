from datetime import date
from typing import Optional

from pydantic import BaseModel

# 勤怠
ATTENDANCE_FIELDS = (
    "extra_overtime_minutes",
    "over60_overtime_minutes",
    "night_overtime_minutes",
    "paid_leave_days",
    "paid_leave_remaining_days",
)

# 支給
EARNINGS_FIELDS = (
    "base_salary",
    "fixed_overtime_allowance",
    "overtime_allowance",
    "over60_overtime_allowance",
    "night_allowance",
    "special_allowance",
    "expense_reimbursement",
    "commute_allowance",
    "stock_incentive",
    "total_earnings",
)

# 控除
DEDUCTION_FIELDS = (
    "health_insurance",
    "pension_insurance",
    "employment_insurance",
    "resident_tax",
    "income_tax",
    "stock_contribution",
    "total_deductions",
)

TIME_FIELDS = ATTENDANCE_FIELDS[:3]
DECIMAL_FIELDS = ATTENDANCE_FIELDS[3:]
CURRENCY_FIELDS = EARNINGS_FIELDS + DEDUCTION_FIELDS + ("net_salary",)

PAYSLIP_FIELDS = ("year", "month") + ATTENDANCE_FIELDS + CURRENCY_FIELDS


class PayslipData(BaseModel):
    """One month's payslip as extracted from a document.

    Every field is always present; ``0`` stands in for "not found".
    Minutes are integers, paid leave is counted in (possibly fractional) days
    and money is in whole yen.
    """

    year: int
    month: int

    extra_overtime_minutes: int = 0
    over60_overtime_minutes: int = 0
    night_overtime_minutes: int = 0
    paid_leave_days: float = 0
    paid_leave_remaining_days: float = 0

    base_salary: int = 0
    fixed_overtime_allowance: int = 0
    overtime_allowance: int = 0
    over60_overtime_allowance: int = 0
    night_allowance: int = 0
    special_allowance: int = 0
    expense_reimbursement: int = 0
    commute_allowance: int = 0
    stock_incentive: int = 0
    total_earnings: int = 0

    health_insurance: int = 0
    pension_insurance: int = 0
    employment_insurance: int = 0
    resident_tax: int = 0
    income_tax: int = 0
    stock_contribution: int = 0
    total_deductions: int = 0

    net_salary: int = 0


def create_default_payslip(today: Optional[date] = None) -> PayslipData:
    """Return an all-zero payslip for ``today``'s year and month.

    Used as the starting point of a parse and as the fallback when the
    document text could not be read at all.
    """
    today = today or date.today()
    return PayslipData(year=today.year, month=today.month)
