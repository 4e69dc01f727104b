# SPDX-License-Identifier: MIT
"""Contextual state trackers — small line-by-line state machines for one file.

Each tracker is fed the lines of a single file in order through ``step``,
which returns True when an issue belongs on the line just fed. Trackers are
never shared across files. Nesting is not modelled: one context at a time.
"""

from __future__ import annotations

import re
from enum import Enum

from mcp_secure.rules.context import SourceLine

# Tool declaration list or request-handler registration
_HANDLER_OPEN_RE = re.compile(r"tools\s*:\s*\[|server\.setRequestHandler")
_VALIDATION_RE = re.compile(r"validate|check|assert|throw|raise|if\s*\(")
_HANDLER_CLOSE_RE = re.compile(r"\}\s*\]")

_ASYNC_OPEN_RE = re.compile(r"async\s+function|async\s+\(")
_TRY_RE = re.compile(r"try\s*\{")
_BLOCK_CLOSE_RE = re.compile(r"\}\s*$")
_AWAIT_RE = re.compile(r"await")


class HandlerState(Enum):
    IDLE = "idle"
    IN_HANDLER = "in-handler"


class AsyncState(Enum):
    IDLE = "idle"
    IN_ASYNC = "in-async"


class HandlerValidationTracker:
    """Track whether a tool-handler block validates anything before it closes."""

    def __init__(self) -> None:
        self.state = HandlerState.IDLE
        self.seen_validation = False

    def step(self, text: str) -> bool:
        """Feed one line; return True if the handler closes here unvalidated."""
        if _HANDLER_OPEN_RE.search(text):
            # A new opening line resets the flag even mid-handler
            self.state = HandlerState.IN_HANDLER
            self.seen_validation = False

        if self.state is not HandlerState.IN_HANDLER:
            return False

        if _VALIDATION_RE.search(text):
            self.seen_validation = True

        if _HANDLER_CLOSE_RE.search(text):
            self.state = HandlerState.IDLE
            return not self.seen_validation
        return False


class AsyncErrorTracker:
    """Track whether an async function closes without a try block.

    The ``await`` check looks at the whole file before the closing line, not
    just the current function, so an ``await`` in an earlier function also
    counts. That is the accepted heuristic.
    """

    def __init__(self, content: str) -> None:
        self.content = content
        self.state = AsyncState.IDLE
        self.seen_try = False

    def step(self, line: SourceLine) -> bool:
        """Feed one line; return True if the async function closes here unguarded."""
        text = line.text
        if _ASYNC_OPEN_RE.search(text):
            self.state = AsyncState.IN_ASYNC
            self.seen_try = False

        if self.state is not AsyncState.IN_ASYNC:
            return False

        if _TRY_RE.search(text):
            self.seen_try = True

        if not _BLOCK_CLOSE_RE.search(text):
            return False
        if self.seen_try:
            self.state = AsyncState.IDLE
            return False
        if _AWAIT_RE.search(self.content, 0, line.offset):
            self.state = AsyncState.IDLE
            return True
        # No suspension point yet; a later brace may still close the function
        return False
