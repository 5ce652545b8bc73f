from __future__ import annotations

import csv
import io
import re

from ..common.datetime_utils import month_name_id
from ..core.constants import CSV_DELIMITER
from .service import DailyReport, MonthlyReport

DAILY_COLUMNS = ["No", "NIS", "Nama Siswa", "Status", "Keterangan"]
TALLY_COLUMNS = ["H", "S", "I", "A"]


def _safe(value: str) -> str:
    return re.sub(r"[^0-9A-Za-z_-]+", "_", value.strip()).strip("_") or "Kelas"


def daily_filename(report: DailyReport) -> str:
    return f"Absensi_Harian_{_safe(report.header.class_name)}_{report.date}.csv"


def monthly_filename(report: MonthlyReport) -> str:
    return f"Absensi_Bulanan_{_safe(report.header.class_name)}_{month_name_id(report.month)}_{report.year}.csv"


def _to_bytes(rows: list[list]) -> bytes:
    out = io.StringIO()
    writer = csv.writer(out, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerows(rows)
    # BOM so spreadsheet apps pick UTF-8 for names with accents.
    return out.getvalue().encode("utf-8-sig")


def daily_csv(report: DailyReport) -> bytes:
    rows: list[list] = [DAILY_COLUMNS]
    for r in report.rows:
        rows.append([r.no, r.nis, r.name, r.status, r.note])
    return _to_bytes(rows)


def monthly_csv(report: MonthlyReport) -> bytes:
    rows: list[list] = [["No", "NIS", "Nama Siswa"] + [str(d) for d in range(1, report.days + 1)] + TALLY_COLUMNS]
    for idx, r in enumerate(report.rows, start=1):
        rows.append([idx, r.nis, r.name] + list(r.marks) + r.tally.as_list())
    return _to_bytes(rows)
