from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assignments.controller import register as register_assignments
from .container import build_container
from .core.constants import DEFAULT_PORT
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees

REPO_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)

_SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "PORT",
    "STORAGE_BACKEND",
    "DATA_DIR",
    "SETTINGS_FILE",
    "DB_CONFIG",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    """Settings of the APP_ENV module as a plain dict, with ``overrides`` applied."""
    load_dotenv(override=False)
    module = importlib.import_module(get_settings_module())
    settings = {name: getattr(module, name) for name in _SETTING_NAMES if hasattr(module, name)}
    settings.setdefault("PORT", DEFAULT_PORT)
    settings.update(overrides or {})
    return settings


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _prepare_database(settings: dict) -> None:
    db_config = settings["DB_CONFIG"]
    if settings.get("AUTO_INIT_DB"):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if settings.get("AUTO_SEED_DB"):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        logger.info("demo seed ready")


def build_from_settings(settings: dict):
    backend = StorageBackend(settings.get("STORAGE_BACKEND", StorageBackend.JSON.value))
    if backend == StorageBackend.MYSQL:
        _prepare_database(settings)

    return build_container(
        storage=backend,
        data_dir=settings.get("DATA_DIR", "data"),
        settings_file=settings.get("SETTINGS_FILE", "config.json"),
        db_config=settings.get("DB_CONFIG"),
    )


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    settings = load_settings(overrides)
    configure_logging(logging.DEBUG if settings.get("DEBUG") else logging.INFO)

    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["PORT"] = int(settings["PORT"])

    container = build_from_settings(settings)
    app.extensions["container"] = container

    logger.info(
        "settings=%s backend=%s data=%s",
        get_settings_module(),
        container.backend.value,
        settings.get("DATA_DIR") if container.backend == StorageBackend.JSON else settings["DB_CONFIG"].get("database"),
    )

    register_employees(app, container)
    register_assignments(app, container)

    return app


def run() -> None:
    app = create_app()
    port = app.config["PORT"]
    logger.info("Server running on http://localhost:%d", port)
    app.run(port=port, debug=app.config["DEBUG"])
