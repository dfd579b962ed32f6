from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .notes.controller import register as register_notes
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings
from .shifts.controller import register as register_shifts
from .status.controller import register as register_status
from .storage.memory import InMemoryStore

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Thiết lập logging ra console cho ứng dụng."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Tránh gắn handler trùng khi create_app() được gọi nhiều lần (tests)
    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)


def create_app(*, store: InMemoryStore | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    storage_backend = getattr(settings, "STORAGE_BACKEND", "memory")
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    container = build_container(storage_backend=storage_backend, db_config=db_config, store=store)

    if storage_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(container.conn, schema_path=schema_path)
        logger.info("schema ready on %s (tables=%d)", container.conn.config.describe(), len(list_tables(container.conn)))

    register_attendance(app, container)
    register_status(app, container)
    register_shifts(app, container)
    register_reports(app, container)
    register_settings(app, container)
    register_notes(app, container)

    app.extensions["workly_container"] = container
    return app
