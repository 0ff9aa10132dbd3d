from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..config import DEFAULT_EXTENSIONS, EditorConfig
from .editor import BufferEditor
from .patterns import classify

log = logging.getLogger(__name__)

# Editor line breaks only; str.splitlines also breaks on \x0c, \x85, U+2028 and friends.
_LINE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


@dataclass
class AlertMigrationResult:
    path: Path
    rewrites: int = 0
    inline_rewrites: int = 0
    block_rewrites: int = 0
    unterminated: List[int] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    details: List[str] = field(default_factory=list)
    changed: bool = False


def split_lines(source: str) -> List[str]:
    """Split on \\n, \\r\\n and \\r only, keeping each terminator on its line."""
    return _LINE.findall(source)


def rewrite_source(source: str, *, config: Optional[EditorConfig] = None) -> Tuple[str, AlertMigrationResult]:
    lines = split_lines(source)
    report = BufferEditor(config).run(lines)
    result = AlertMigrationResult(
        path=Path(),
        rewrites=report.rewrites,
        inline_rewrites=report.inline_rewrites,
        block_rewrites=report.block_rewrites,
        unterminated=[index + 1 for index in report.unterminated],
        warnings=list(report.warnings),
        details=list(report.details),
        changed=report.changed,
    )
    return "".join(lines), result


def migrate_source_to_alert_controller(
    source: str, *, on_unterminated: str = "skip"
) -> tuple[str, AlertMigrationResult, dict[str, Any]]:
    """
    Rewrite UIAlertView calls in a single source string.

    Returns the migrated source, the raw AlertMigrationResult, and a summary dict for API responses.
    """
    migrated, result = rewrite_source(source, config=EditorConfig(on_unterminated=on_unterminated))
    summary = {
        "alerts_rewritten": result.rewrites,
        "inline_rewritten": result.inline_rewrites,
        "blocks_rewritten": result.block_rewrites,
        "unterminated_lines": list(result.unterminated),
        "warnings": list(result.warnings),
        "changed": result.changed,
    }
    return migrated, result, summary


def find_legacy_alerts(source: str) -> List[int]:
    """1-based line numbers of every legacy alert call in `source`."""
    return [idx for idx, line in enumerate(split_lines(source), start=1) if classify(line).is_alert_invocation]


def migrate_file(
    path: Path,
    *,
    write: bool = False,
    backup: bool = True,
    config: Optional[EditorConfig] = None,
) -> AlertMigrationResult:
    # newline="" keeps CRLF endings intact through the round trip
    with path.open("r", encoding="utf-8", newline="") as fh:
        original = fh.read()
    migrated, result = rewrite_source(original, config=config)
    result.path = path
    if write and result.changed:
        if backup:
            backup_path = path.with_suffix(path.suffix + ".bak")
            with backup_path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(original)
            log.info("Wrote backup %s", backup_path)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(migrated)
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        log.info("Migrated %d alert(s) in %s", result.rewrites, path)
    return result


def iter_source_files(root: Path, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> Iterable[Path]:
    if root.is_file():
        if root.suffix in extensions:
            yield root
        return
    for ext in extensions:
        yield from sorted(root.rglob(f"*{ext}"))


def migrate_path(
    root: Path,
    *,
    write: bool = False,
    backup: bool = True,
    config: Optional[EditorConfig] = None,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> List[AlertMigrationResult]:
    results: List[AlertMigrationResult] = []
    for file in iter_source_files(root, extensions):
        results.append(migrate_file(file, write=write, backup=backup, config=config))
    return results


__all__ = [
    "AlertMigrationResult",
    "find_legacy_alerts",
    "iter_source_files",
    "migrate_file",
    "migrate_path",
    "migrate_source_to_alert_controller",
    "rewrite_source",
    "split_lines",
]
