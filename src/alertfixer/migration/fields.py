"""
Argument extraction for a classified alert line.

Each field is the verbatim text between the end of one selector marker and the
start of the next. A missing marker degrades that field to an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

# (marker, field that starts after it); the final marker only closes the last field.
FIELD_MARKERS: List[Tuple[str, str | None]] = [
    ("showWithTitle:", "title"),
    (" message:", "message"),
    (" cancelButtonTitle:", "cancel_label"),
    (" otherButtonTitles:", "other_labels"),
    (" tapBlock:", None),
]


@dataclass(frozen=True)
class ExtractedFields:
    title: str = ""
    message: str = ""
    cancel_label: str = ""
    other_labels: str = ""


def _span_between(line: str, open_marker: str, close_marker: str) -> str:
    start = line.find(open_marker)
    if start < 0:
        return ""
    start += len(open_marker)
    end = line.find(close_marker)
    if end < start:
        return ""
    return line[start:end]


def extract_fields(line: str) -> ExtractedFields:
    values: Dict[str, str] = {}
    for (marker, name), (next_marker, _) in zip(FIELD_MARKERS, FIELD_MARKERS[1:]):
        if name is None:
            continue
        values[name] = _span_between(line, marker, next_marker)
    return ExtractedFields(**values)


__all__ = ["ExtractedFields", "FIELD_MARKERS", "extract_fields"]
