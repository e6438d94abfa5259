from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container
from .documents.controller import register as register_documents
from .exams.controller import register as register_exams
from .leaves.controller import register as register_leaves
from .notices.controller import register as register_notices
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers
from .timetables.controller import register as register_timetables
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_LANGUAGE"] = getattr(settings, "DEFAULT_LANGUAGE", "en")
    app.permanent_session_lifetime = timedelta(days=7)

    max_bytes = int(getattr(settings, "MAX_DOCUMENT_BYTES", 10 * 1024 * 1024))
    # Leave headroom over the document limit for the multipart envelope.
    app.config["MAX_CONTENT_LENGTH"] = max_bytes + 1024 * 1024

    logging.basicConfig(
        level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        container = build_container(
            seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", False)),
            max_document_bytes=max_bytes,
        )
    app.extensions["school_container"] = container

    logger.info(
        "school-dashboard settings=%s students=%d teachers=%d",
        settings_module,
        len(container.store.students),
        len(container.store.teachers),
    )

    register_users(app, container)
    register_students(app, container)
    register_teachers(app, container)
    register_documents(app, container)
    register_notices(app, container)
    register_exams(app, container)
    register_attendance(app, container)
    register_timetables(app, container)
    register_leaves(app, container)
    register_reports(app, container)

    return app
