from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class Salary(Base):
    __tablename__ = 'salaries'

    id = Column(Integer, primary_key=True, index=True)
    year = Column(Integer, nullable=False, index=True)
    month = Column(Integer, nullable=False)

    # 勤怠
    extra_overtime_minutes = Column(Integer, nullable=False, default=0)
    over60_overtime_minutes = Column(Integer, nullable=False, default=0)
    night_overtime_minutes = Column(Integer, nullable=False, default=0)
    paid_leave_days = Column(Float, nullable=False, default=0)
    paid_leave_remaining_days = Column(Float, nullable=False, default=0)

    # 支給
    base_salary = Column(Integer, nullable=False, default=0)
    fixed_overtime_allowance = Column(Integer, nullable=False, default=0)
    overtime_allowance = Column(Integer, nullable=False, default=0)
    over60_overtime_allowance = Column(Integer, nullable=False, default=0)
    night_allowance = Column(Integer, nullable=False, default=0)
    special_allowance = Column(Integer, nullable=False, default=0)
    expense_reimbursement = Column(Integer, nullable=False, default=0)
    commute_allowance = Column(Integer, nullable=False, default=0)
    stock_incentive = Column(Integer, nullable=False, default=0)
    total_earnings = Column(Integer, nullable=False, default=0)

    # 控除
    health_insurance = Column(Integer, nullable=False, default=0)
    pension_insurance = Column(Integer, nullable=False, default=0)
    employment_insurance = Column(Integer, nullable=False, default=0)
    resident_tax = Column(Integer, nullable=False, default=0)
    income_tax = Column(Integer, nullable=False, default=0)
    stock_contribution = Column(Integer, nullable=False, default=0)
    total_deductions = Column(Integer, nullable=False, default=0)

    net_salary = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)


class Navigation(Base):
    __tablename__ = 'navigations'

    id = Column(Integer, primary_key=True, index=True)
    path = Column(String, nullable=False, unique=True)
    label = Column(String, nullable=False)
    icon_name = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
