from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SCHOOL_CITY
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .reports.controller import register as register_reports
from .students.controller import register as register_students


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    city = getattr(settings, "SCHOOL_CITY", DEFAULT_SCHOOL_CITY)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if app.config["DEBUG"]:
            print(f"[absensi-tk] settings={settings_module} db={DBConfig.from_settings(db_config).label()}")

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
            executed = apply_schema(db_config, schema_path=schema_path)
            if app.config["DEBUG"]:
                print(f"[absensi-tk] schema ready ({executed} statements, tables={len(list_tables(db_config))})")

        container = build_container(db_config=db_config, city=city)

    app.extensions["absensi_tk"] = container

    register_dashboard(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
