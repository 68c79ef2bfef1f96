from __future__ import annotations

import csv
import io
from dataclasses import dataclass

import pandas as pd

from ..attendance.aggregation import percentage_of, records_in_range, status_totals
from ..attendance.service import STATUS_LABELS, Snapshot, class_label, format_percentage
from ..common.validators import require_date_key
from ..core.exceptions import ValidationError
from ..students.model import find_student

ROW_FIELDS = ["date", "student_id", "name", "class", "status"]
SUMMARY_FIELDS = ["student_id", "name", "class", "present", "absent", "leave", "total", "percentage"]


@dataclass(frozen=True)
class ReportData:
    start: str
    end: str
    rows: list[dict]
    summary: list[dict]


class ReportService:
    """Date-range attendance report over an already loaded snapshot."""

    def build_attendance_report(self, snapshot: Snapshot, *, start: str, end: str) -> ReportData:
        start = require_date_key(start, "Start date")
        end = require_date_key(end, "End date")
        if start > end:
            raise ValidationError("Start date must not be after end date")

        in_range = records_in_range(snapshot.records, start, end)

        out_rows: list[dict] = []
        for r in in_range:
            student = find_student(snapshot.students, r.student_id)
            out_rows.append(
                {
                    "date": r.date,
                    "student_id": r.student_id,
                    "name": student.name if student else f"Student #{r.student_id}",
                    "class": class_label(student) if student else "-",
                    "status": STATUS_LABELS[r.status],
                }
            )

        summary = []
        for s in snapshot.students:
            totals = status_totals(in_range, s.id)
            summary.append(
                {
                    "student_id": s.id,
                    "name": s.name,
                    "class": class_label(s),
                    "present": totals.present,
                    "absent": totals.absent,
                    "leave": totals.leave,
                    "total": totals.total,
                    "percentage": format_percentage(percentage_of(totals.present, totals.total)),
                }
            )

        summary.sort(key=lambda x: x["name"].lower())
        return ReportData(start=start, end=end, rows=out_rows, summary=summary)

    def to_csv(self, data: ReportData) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for row in data.summary:
            writer.writerow(row)
        # BOM so spreadsheet apps pick up UTF-8 names.
        return out.getvalue().encode("utf-8-sig")

    def to_xlsx(self, data: ReportData) -> bytes:
        out = io.BytesIO()
        summary = pd.DataFrame(data.summary, columns=SUMMARY_FIELDS)
        rows = pd.DataFrame(data.rows, columns=ROW_FIELDS)
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            summary.to_excel(writer, sheet_name="Summary", index=False)
            rows.to_excel(writer, sheet_name="Records", index=False)
        return out.getvalue()
