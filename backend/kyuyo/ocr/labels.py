"""Payslip label table.

Maps the exact label text printed on the payslip PDF to the
``PayslipData`` field it fills and how the following token is read.
Labels are matched verbatim against whitespace separated tokens, so any
change to a string here breaks documents printed with the old wording.
Only add entries; when the payslip wording changes keep the old label
next to the new one.
"""
from types import MappingProxyType
from typing import Literal, Mapping, NamedTuple

ValueType = Literal["time", "currency", "decimal"]


class LabelMapping(NamedTuple):
    field: str
    type: ValueType


NET_SALARY_LABEL = "差引支給額:"

PDF_LABEL_MAPPINGS: Mapping[str, LabelMapping] = MappingProxyType({
    # 勤怠
    "固定外残業時間": LabelMapping("extra_overtime_minutes", "time"),
    "固定外残業時間(60時間超)": LabelMapping("over60_overtime_minutes", "time"),
    "深夜割増時間": LabelMapping("night_overtime_minutes", "time"),
    "有休日数": LabelMapping("paid_leave_days", "decimal"),
    "有休残日数": LabelMapping("paid_leave_remaining_days", "decimal"),

    # 支給
    "基本給(月給)": LabelMapping("base_salary", "currency"),
    "固定時間外手当": LabelMapping("fixed_overtime_allowance", "currency"),
    "残業手当": LabelMapping("overtime_allowance", "currency"),
    "残業手当(60時間超)": LabelMapping("over60_overtime_allowance", "currency"),
    "深夜割増額": LabelMapping("night_allowance", "currency"),
    "特別手当": LabelMapping("special_allowance", "currency"),
    "立替経費": LabelMapping("expense_reimbursement", "currency"),
    "非課税通勤費": LabelMapping("commute_allowance", "currency"),
    "持株会奨励金": LabelMapping("stock_incentive", "currency"),

    # 控除
    "健康保険料": LabelMapping("health_insurance", "currency"),
    "厚生年金保険": LabelMapping("pension_insurance", "currency"),
    "雇用保険料": LabelMapping("employment_insurance", "currency"),
    "住民税": LabelMapping("resident_tax", "currency"),
    "所得税": LabelMapping("income_tax", "currency"),
    "持株会拠出金": LabelMapping("stock_contribution", "currency"),

    # 差引支給額
    NET_SALARY_LABEL: LabelMapping("net_salary", "currency"),
})


def label_tokens(label: str) -> list[str]:
    return label.split()


def sorted_labels(mappings: Mapping[str, LabelMapping] = PDF_LABEL_MAPPINGS) -> list[str]:
    """Labels ordered longest first: more tokens, then more characters."""
    return sorted(mappings, key=lambda label: (len(label_tokens(label)), len(label)), reverse=True)
