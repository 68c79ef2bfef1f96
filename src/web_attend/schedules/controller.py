from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import MAX_CLASSES_PER_DAY, MESSAGE_CLEAR_MS, SUBJECTS, SUBMISSION_ERROR_MESSAGE
from ..core.exceptions import RemoteDataError, ValidationError
from ..users.controller import login_required
from .service import parse_class_count

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/submitclass", methods=["GET", "POST"], endpoint="submit_class")
    @login_required(container)
    def submit_class():
        source = request.form if request.method == "POST" else request.args
        count = parse_class_count(source.get("count"))
        classes = [source.get(f"class-{i}", "") for i in range(count or 0)]
        date_s = source.get("date", "")

        if request.method == "POST":
            try:
                container.schedule_service.submit(classes=classes, date=date_s)
                flash("Schedule submitted successfully!", "success")
                return redirect(url_for("submit_class", count=count))
            except ValidationError as e:
                flash(str(e), "warning")
            except RemoteDataError:
                flash(SUBMISSION_ERROR_MESSAGE, "danger")
            except Exception:
                logger.exception("Schedule submission error")
                flash(SUBMISSION_ERROR_MESSAGE, "danger")

        return render_template(
            "submitclass.html",
            count=count,
            counts=range(1, MAX_CLASSES_PER_DAY + 1),
            classes=classes,
            date=date_s,
            subjects=SUBJECTS,
            clear_after_ms=MESSAGE_CLEAR_MS,
        )
