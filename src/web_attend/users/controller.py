from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import FORGOT_PASSWORD_MESSAGE, LOGIN_UNEXPECTED_MESSAGE
from ..core.exceptions import AuthenticationError
from .model import SESSION_KEY

logger = logging.getLogger(__name__)


def login_required(container: Container):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if container.auth_service.current(session.get(SESSION_KEY)) is None:
                session.pop(SESSION_KEY, None)
                return redirect(url_for("login"))
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "GET" and request.args.get("forgot"):
            flash(FORGOT_PASSWORD_MESSAGE, "info")
            return redirect(url_for("login"))

        email = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                operator = container.auth_service.authenticate(email, password)
                session[SESSION_KEY] = operator.to_session()
                return redirect(url_for("submit_class"))
            except AuthenticationError as e:
                session.pop(SESSION_KEY, None)
                flash(str(e), "danger")
            except Exception:
                logger.exception("Login submission error")
                session.pop(SESSION_KEY, None)
                flash(LOGIN_UNEXPECTED_MESSAGE, "danger")

        return render_template("login.html", email=email)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.pop(SESSION_KEY, None)
        flash("Signed out.", "info")
        return redirect(url_for("login"))
