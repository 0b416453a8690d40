"""Tabular exports of the school's records (CSV for spreadsheets, XLSX for Excel)."""
from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

REPORT_KINDS = ("attendance", "payments", "results", "students")
FORMATS = {
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_.-]+")


@dataclass(frozen=True)
class ReportFile:
    content: bytes
    mimetype: str
    filename: str


class ReportService:
    def __init__(self, *, students, attendance, payments, exams, results):
        self._students = students
        self._attendance = attendance
        self._payments = payments
        self._exams = exams
        self._results = results

    def export(self, kind: str, fmt: str, *, filename: Optional[str] = None) -> ReportFile:
        if kind not in REPORT_KINDS:
            raise ValidationError(f"Unknown report: {kind}")
        if fmt not in FORMATS:
            raise ValidationError(f"Unsupported export format: {fmt}")

        df = self.build_frame(kind)
        out = io.BytesIO()
        if fmt == "csv":
            # BOM so Excel opens non-ASCII names correctly
            out.write(df.to_csv(index=False).encode("utf-8-sig"))
        else:
            with pd.ExcelWriter(out, engine="openpyxl") as writer:
                df.to_excel(writer, index=False, sheet_name=kind.capitalize())
        out.seek(0)

        stem = _SAFE_NAME.sub("-", filename).strip("-.") if filename else ""
        logger.info("Exported %s report as %s (%d rows)", kind, fmt, len(df))
        return ReportFile(
            content=out.getvalue(),
            mimetype=FORMATS[fmt],
            filename=f"{stem or kind + '-report'}.{fmt}",
        )

    def build_frame(self, kind: str) -> pd.DataFrame:
        builder = getattr(self, f"_{kind}_frame", None)
        if kind not in REPORT_KINDS or builder is None:
            raise ValidationError(f"Unknown report: {kind}")
        return builder()

    def _names(self) -> dict:
        return {s.id: (s.student_code, s.full_name, s.class_name) for s in self._students.list_all()}

    def _students_frame(self) -> pd.DataFrame:
        rows = [
            (
                s.student_code,
                s.full_name,
                s.gender.value,
                s.section.value,
                s.class_name,
                s.date_of_birth,
                s.phone,
                s.email,
            )
            for s in self._students.list_all()
        ]
        return pd.DataFrame(
            rows,
            columns=["Student ID", "Name", "Gender", "Section", "Class", "Date of birth", "Phone", "Email"],
        )

    def _attendance_frame(self) -> pd.DataFrame:
        names = self._names()
        rows = []
        for a in self._attendance.list_all():
            code, name, class_name = names.get(a.student_id, (None, None, None))
            rows.append((a.date, code, name, class_name, a.status.value, a.note))
        df = pd.DataFrame(rows, columns=["Date", "Student ID", "Name", "Class", "Status", "Note"])
        df["Date"] = pd.to_datetime(df["Date"]).dt.strftime("%Y-%m-%d %H:%M")
        return df

    def _payments_frame(self) -> pd.DataFrame:
        names = self._names()
        rows = []
        for p in self._payments.list_all():
            code, name, _ = names.get(p.student_id, (None, None, None))
            rows.append((p.date, code, name, p.amount, p.status.value, p.description))
        df = pd.DataFrame(rows, columns=["Date", "Student ID", "Name", "Amount", "Status", "Description"])
        df["Date"] = pd.to_datetime(df["Date"]).dt.strftime("%Y-%m-%d")
        return df

    def _results_frame(self) -> pd.DataFrame:
        names = self._names()
        exams = {e.id: e.name for e in self._exams.list_all()}
        rows = []
        for r in self._results.list_all():
            code, name, class_name = names.get(r.student_id, (None, None, None))
            rows.append((exams.get(r.exam_id), code, name, class_name, r.subject, r.score, r.total, r.grade))
        return pd.DataFrame(
            rows,
            columns=["Exam", "Student ID", "Name", "Class", "Subject", "Score", "Total", "Grade"],
        )
