from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel


class AlertMigrationRequest(BaseModel):
    source: str
    on_unterminated: Optional[Literal["skip", "collapse", "error"]] = None


class AlertMigrationSummary(BaseModel):
    alerts_rewritten: int = 0
    inline_rewritten: int = 0
    blocks_rewritten: int = 0
    unterminated_lines: list[int] = []
    warnings: list[str] = []
    changed: bool = False


class AlertMigrationResponse(BaseModel):
    source: str
    changes_summary: AlertMigrationSummary


__all__ = [
    "AlertMigrationRequest",
    "AlertMigrationSummary",
    "AlertMigrationResponse",
]
