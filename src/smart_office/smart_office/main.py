from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container, build_store
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .storage.seed import ensure_seeded
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """REST backend persisting to a flat JSON file.

    `overrides` replaces individual settings (tests point DATA_PATH at a temp dir).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    options = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    options.update(overrides or {})
    app.config.update(options)

    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("settings=%s data=%s", settings_module, app.config["DATA_PATH"])

    store = build_store(data_path=app.config["DATA_PATH"])
    if app.config.get("AUTO_SEED_DATA", True):
        ensure_seeded(store)

    container = build_container(
        store=store,
        admin_username=app.config.get("ADMIN_USERNAME", "admin"),
        admin_password=app.config.get("ADMIN_PASSWORD", "admin123"),
    )
    app.extensions["smart_office"] = container

    register_employees(app, container)
    register_tasks(app, container)
    register_leaves(app, container)

    return app


def main() -> None:
    app = create_app()
    app.run(host=app.config.get("HOST", "127.0.0.1"), port=int(app.config.get("PORT", 3000)), debug=bool(app.config.get("DEBUG", False)))


if __name__ == "__main__":
    main()
