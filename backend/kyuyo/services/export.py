from typing import Iterable, Literal, Optional

ExportRangeType = Literal["all", "year", "month"]

CSV_HEADERS = [
    "年月",
    "基本給",
    "固定時間外手当",
    "残業手当",
    "支給合計",
    "健康保険料",
    "厚生年金保険",
    "雇用保険料",
    "住民税",
    "所得税",
    "控除合計",
    "差引支給額",
]

CSV_FIELDS = [
    "base_salary",
    "fixed_overtime_allowance",
    "overtime_allowance",
    "total_earnings",
    "health_insurance",
    "pension_insurance",
    "employment_insurance",
    "resident_tax",
    "income_tax",
    "total_deductions",
    "net_salary",
]


def record_to_csv_row(record) -> str:
    values = [f"{record.year}年{record.month}月"]
    values += [str(getattr(record, name)) for name in CSV_FIELDS]
    return ",".join(values)


def generate_csv_content(records: Iterable) -> str:
    rows = [record_to_csv_row(r) for r in records]
    return "\n".join([",".join(CSV_HEADERS)] + rows)


def generate_csv_filename(
    range_type: ExportRangeType,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> str:
    """給与明細.csv / 給与明細_2025.csv / 給与明細_2025_06.csv"""
    if range_type == "all":
        return "給与明細.csv"
    if range_type == "year":
        return f"給与明細_{year}.csv"
    if range_type == "month":
        return f"給与明細_{year}_{month:02d}.csv"
    raise ValueError(f"Invalid range: {range_type}")


def filter_records_for_export(
    records: list,
    range_type: ExportRangeType,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> list:
    if range_type == "all":
        return list(records)
    if range_type == "year":
        return [r for r in records if r.year == year]
    if range_type == "month":
        return [r for r in records if r.year == year and r.month == month]
    raise ValueError(f"Invalid range: {range_type}")
