"""
Indentation-driven block scanning for tap block bodies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .patterns import block_close_pattern


@dataclass(frozen=True)
class BlockSpan:
    start_line: int
    end_line: int
    captured_body: str


def find_block_end(lines: Sequence[str], start_line: int, indent_width: int) -> Optional[int]:
    """
    Return the index of the first line after `start_line` that closes the block
    at `indent_width`, or None when the buffer ends first.

    The closing line must carry exactly `indent_width` whitespace characters
    followed by `}];`. A nested call formatted the same way at that indent will
    be taken as the close.
    """

    close = block_close_pattern(indent_width)
    for index in range(start_line + 1, len(lines)):
        line = lines[index]
        if not line:
            continue
        if close.match(line):
            return index
    return None


def capture_block(lines: Sequence[str], start_line: int, end_line: int) -> BlockSpan:
    if end_line <= start_line:
        raise ValueError(f"block end {end_line} must follow start {start_line}")
    body = "".join(lines[start_line + 1 : end_line])
    return BlockSpan(start_line=start_line, end_line=end_line, captured_body=body)


__all__ = ["BlockSpan", "capture_block", "find_block_end"]
