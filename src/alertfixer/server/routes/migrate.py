"""Migration API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ...config import AlertFixerConfig
from ...errors import AlertFixerError
from ..schemas import AlertMigrationRequest, AlertMigrationResponse, AlertMigrationSummary

log = logging.getLogger(__name__)


def build_migrate_router(migrate_source_to_alert_controller, config: AlertFixerConfig) -> APIRouter:
    router = APIRouter()

    @router.post("/api/migrate/alerts", response_model=AlertMigrationResponse)
    def api_migrate_alerts(payload: AlertMigrationRequest) -> AlertMigrationResponse:
        policy = payload.on_unterminated or config.editor.on_unterminated
        try:
            migrated, result, summary = migrate_source_to_alert_controller(payload.source, on_unterminated=policy)
        except AlertFixerError as exc:
            log.info("Alert migration rejected: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return AlertMigrationResponse(source=migrated, changes_summary=AlertMigrationSummary(**summary))

    return router


__all__ = ["build_migrate_router"]
