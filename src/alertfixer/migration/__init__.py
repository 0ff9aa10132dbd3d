"""Legacy UIAlertView to UIAlertController migration."""

from __future__ import annotations

from .blocks import BlockSpan, capture_block, find_block_end
from .editor import BufferEditor, EditReport, perform
from .fields import ExtractedFields, extract_fields
from .patterns import MatchResult, classify
from .rewriter import build_replacement

__all__ = [
    "BlockSpan",
    "BufferEditor",
    "EditReport",
    "ExtractedFields",
    "MatchResult",
    "build_replacement",
    "capture_block",
    "classify",
    "extract_fields",
    "find_block_end",
    "perform",
]
