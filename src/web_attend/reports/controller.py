from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request, session, url_for

from ..attendance.controller import local_marks
from ..container import Container
from ..core.exceptions import RemoteDataError, ValidationError

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _export(render, *, mimetype: str, extension: str):
        try:
            snapshot = container.attendance_service.load_snapshot(local_marks(session))
            data = container.report_service.build_attendance_report(
                snapshot,
                start=request.args.get("start", ""),
                end=request.args.get("end", ""),
            )
        except (ValidationError, RemoteDataError) as e:
            flash(str(e), "warning")
            return redirect(url_for("nav", tab="reports"))

        filename = f"attendance_{data.start.replace('-', '')}_{data.end.replace('-', '')}.{extension}"
        return app.response_class(
            render(data),
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/reports/export.csv", endpoint="report_csv")
    def report_csv():
        return _export(container.report_service.to_csv, mimetype="text/csv", extension="csv")

    @app.route("/reports/export.xlsx", endpoint="report_xlsx")
    def report_xlsx():
        return _export(container.report_service.to_xlsx, mimetype=XLSX_MIMETYPE, extension="xlsx")
