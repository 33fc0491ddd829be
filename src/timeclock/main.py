from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .archive.controller import register as register_archive
from .archive.scheduler import ArchiveScheduler
from .common.http import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .hours.controller import register as register_hours
from .shifts.controller import register as register_shifts
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    public_dir = Path(getattr(settings, "PUBLIC_DIR", "") or REPO_ROOT / "public")
    app = Flask(__name__, static_folder=str(public_dir), static_url_path="")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(
            db_config=db_config,
            snapshot_monthly=bool(getattr(settings, "ARCHIVE_SNAPSHOT_MONTHLY", True)),
        )

    scheduler = ArchiveScheduler(
        container.archival_service,
        poll_seconds=float(getattr(settings, "ARCHIVE_POLL_SECONDS", 60)),
    )
    if bool(getattr(settings, "ARCHIVE_ON_STARTUP", False)):
        scheduler.catch_up()
    if bool(getattr(settings, "ARCHIVE_SCHEDULER", False)):
        scheduler.start()

    app.extensions["timeclock.container"] = container
    app.extensions["timeclock.archive_scheduler"] = scheduler

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return app.send_static_file("index.html")

    register_error_handlers(app)
    register_users(app, container)
    register_shifts(app, container)
    register_hours(app, container)
    register_archive(app, container)

    return app


def run() -> None:
    app = create_app()
    # The reloader would start a second archive scheduler thread.
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    run()
