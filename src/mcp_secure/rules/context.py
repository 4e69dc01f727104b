# SPDX-License-Identifier: MIT
"""File context — one source file split into numbered lines for the rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLine:
    """A single line of a source file."""

    lineno: int  # 1-based
    offset: int  # Character offset of the line start within the content
    text: str  # Line text without the trailing newline


@dataclass
class FileContext:
    """Context passed to each rule — file identifier, raw content, and lines."""

    file: str
    content: str
    lines: list[SourceLine]


def split_lines(content: str) -> list[SourceLine]:
    """Split content on ``\\n`` and record each line's number and offset.

    Only ``\\n`` separates lines, so a CRLF file keeps its ``\\r`` on each
    line. Empty content yields a single empty line.
    """
    lines: list[SourceLine] = []
    offset = 0
    for idx, text in enumerate(content.split("\n")):
        lines.append(SourceLine(lineno=idx + 1, offset=offset, text=text))
        offset += len(text) + 1
    return lines


def build_context(file: str, content: str) -> FileContext:
    """Build the context the rules run against for one file."""
    return FileContext(file=file, content=content, lines=split_lines(content))
