from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import TITLE_TEMPLATE
from .report.controller import register as register_reports


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log_level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(log_level)

    output_dir = getattr(settings, "REPORT_OUTPUT_DIR", None)
    app.logger.debug("settings=%s report_output_dir=%s", settings_module, output_dir or "<memory>")

    container = build_container(
        output_dir=output_dir,
        title_template=getattr(settings, "REPORT_TITLE_TEMPLATE", TITLE_TEMPLATE),
    )
    register_reports(app, container)

    return app
