from pydantic import BaseModel
from typing import List

from .payslip import SalaryRecord


class Summary(BaseModel):
    total_net_salary: int
    average_net_salary: int
    total_earnings: int
    total_deductions: int
    year_over_year_change: float


class DashboardData(BaseModel):
    summary: Summary
    monthly_salaries: List[SalaryRecord] = []
    recent_records: List[SalaryRecord] = []
