"""Application factory that builds the FastAPI app with all wiring."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from ...config import AlertFixerConfig, load_config
from ...migration.alerts import migrate_source_to_alert_controller
from ...version import __version__
from ..routes.health import build_health_router
from ..routes.migrate import build_migrate_router

log = logging.getLogger(__name__)


def create_app(config: Optional[AlertFixerConfig] = None) -> FastAPI:
    config = config or load_config()
    app = FastAPI(title="AlertFixer", version=__version__)
    app.state.config = config
    app.include_router(build_health_router())
    app.include_router(build_migrate_router(migrate_source_to_alert_controller, config))
    log.debug("AlertFixer API ready (on_unterminated=%s)", config.editor.on_unterminated)
    return app


__all__ = ["create_app"]
