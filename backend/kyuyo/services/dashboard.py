from sqlalchemy.orm import Session

from .. import models
from ..config import settings
from ..schemas.dashboard import DashboardData, Summary
from ..schemas.payslip import SalaryRecord


def year_over_year_change(records: list[SalaryRecord]) -> float:
    """Percent change of the latest year's net total versus the year before."""
    if not records:
        return 0.0
    totals: dict[int, int] = {}
    for r in records:
        totals[r.year] = totals.get(r.year, 0) + r.net_salary

    latest = max(totals)
    previous = totals.get(latest - 1)
    if not previous:
        return 0.0
    return round((totals[latest] - previous) / previous * 100, 1)


def calculate_summary(records: list[SalaryRecord]) -> Summary:
    total_net_salary = sum(r.net_salary for r in records)
    average_net_salary = total_net_salary // len(records) if records else 0

    return Summary(
        total_net_salary=total_net_salary,
        average_net_salary=average_net_salary,
        total_earnings=sum(r.total_earnings for r in records),
        total_deductions=sum(r.total_deductions for r in records),
        year_over_year_change=year_over_year_change(records),
    )


def get_recent_records(records: list[SalaryRecord], count: int) -> list[SalaryRecord]:
    """Newest ``count`` records; ``records`` must be in chronological order."""
    return list(reversed(records))[:count]


def get_dashboard_data(db: Session) -> DashboardData:
    rows = (
        db.query(models.Salary)
        .order_by(models.Salary.year.asc(), models.Salary.month.asc())
        .all()
    )
    monthly_salaries = [SalaryRecord.model_validate(r) for r in rows]

    return DashboardData(
        summary=calculate_summary(monthly_salaries),
        monthly_salaries=monthly_salaries,
        recent_records=get_recent_records(monthly_salaries, settings.recent_records),
    )
