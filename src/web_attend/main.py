from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from .config import get_settings_module
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .reports.controller import register as register_reports
from .schedules.controller import register as register_schedules
from .users.controller import register as register_users

logger = logging.getLogger("web_attend")


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s api=%s", settings_module, getattr(settings, "API_BASE_URL", None))

    if container is None:
        container = build_container(
            base_url=getattr(settings, "API_BASE_URL"),
            timeout=getattr(settings, "API_TIMEOUT", None),
            session_minutes=int(getattr(settings, "SESSION_LIFETIME_MINUTES", 480)),
            recent_limit=int(getattr(settings, "RECENT_ACTIVITY_LIMIT", 5)),
        )
    app.extensions["web_attend"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_schedules(app, container)
    register_reports(app, container)

    @app.errorhandler(404)
    def not_found(_error):
        return render_template("404.html"), 404

    return app


if __name__ == "__main__":
    create_app().run()
