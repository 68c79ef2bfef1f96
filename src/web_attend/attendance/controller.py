from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, abort, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import AttendanceStatus, Tab
from ..core.exceptions import RemoteDataError, ValidationError
from ..navigation.view_state import SESSION_KEY as VIEW_KEY, ViewState

logger = logging.getLogger(__name__)

LOCAL_MARKS_KEY = "local_marks"


def local_marks(store) -> list:
    marks = store.get(LOCAL_MARKS_KEY)
    return marks if isinstance(marks, list) else []


def _int_arg(name: str) -> Optional[int]:
    value = request.args.get(name, "")
    try:
        return int(value)
    except ValueError:
        return None


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _state() -> ViewState:
        return ViewState.from_session(session.get(VIEW_KEY))

    def _save(state: ViewState) -> None:
        session[VIEW_KEY] = state.to_session()

    @app.route("/", endpoint="index")
    def index():
        state = _state()

        mark = request.args.get("mark")
        if mark:
            try:
                session[LOCAL_MARKS_KEY] = service.mark_locally(
                    local_marks(session),
                    student_id=mark,
                    status=request.args.get("status", AttendanceStatus.PRESENT.value),
                )
                flash("Attendance marked locally (not yet saved to the server).", "info")
            except ValidationError as e:
                flash(str(e), "warning")
            return redirect(url_for("index"))

        try:
            snapshot = service.load_snapshot(local_marks(session))
        except RemoteDataError as e:
            return render_template("index.html", state=state, error=str(e))

        context = {"state": state, "error": None}

        if state.has_selection:
            month = _int_arg("month")
            if month is not None and not 0 <= month <= 11:
                month = None
            year = _int_arg("year") if month is not None else None
            detail = service.student_detail_ui(snapshot, state.selected_student_id, year=year, month=month)
            if detail is not None:
                context["detail"] = detail
                return render_template("index.html", **context)

            # Selected student vanished from the roster.
            state = state.back()
            _save(state)
            context["state"] = state

        if state.tab == Tab.DASHBOARD:
            context["dashboard"] = service.dashboard_ui(snapshot)
        elif state.tab == Tab.STUDENTS:
            query = request.args.get("q", "")
            context["query"] = query
            context["rows"] = service.student_rows_ui(snapshot, query=query)
        else:
            start = request.args.get("start", "")
            end = request.args.get("end", "")
            context["start"] = start
            context["end"] = end
            if start or end:
                try:
                    context["report"] = container.report_service.build_attendance_report(snapshot, start=start, end=end)
                except ValidationError as e:
                    flash(str(e), "warning")

        return render_template("index.html", **context)

    @app.route("/nav/<tab>", endpoint="nav")
    def nav(tab: str):
        try:
            target = Tab(tab)
        except ValueError:
            abort(404)
        _save(_state().navigate(target))

        query = request.args.get("q")
        if query and target == Tab.STUDENTS:
            return redirect(url_for("index", q=query))
        return redirect(url_for("index"))

    @app.route("/select/<student_id>", endpoint="select_student")
    def select_student(student_id: str):
        _save(_state().select(student_id))
        return redirect(url_for("index"))

    @app.route("/back", endpoint="back")
    def back():
        _save(_state().back())
        return redirect(url_for("index"))
