# SPDX-License-Identifier: MIT
"""Source file discovery — walk a directory for JS/TS sources to scan."""

from __future__ import annotations

import fnmatch
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

log = logging.getLogger(__name__)

SOURCE_EXTENSIONS: tuple[str, ...] = (".ts", ".js", ".mjs", ".cjs")

# Dependency and build output directories. Dot-directories are skipped as well.
SKIP_DIRS = frozenset({"node_modules", "dist", "build", ".git"})

# Test files are not part of the shipped server
SKIP_FILE_PATTERNS: tuple[str, ...] = ("*.test.*", "*.spec.*")


def is_skipped_file(name: str) -> bool:
    """Check if a file name looks like a test or spec file."""
    return any(fnmatch.fnmatch(name, pattern) for pattern in SKIP_FILE_PATTERNS)


def iter_source_paths(root: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> list[Path]:
    """Return source files under ``root``, sorted by relative POSIX path.

    Hidden files and directories (leading dot) below ``root`` are never
    visited; ``root`` itself may be hidden.
    """
    wanted = tuple(ext.lower() for ext in extensions)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS and not d.startswith(".")]
        for name in filenames:
            if name.startswith(".") or not name.lower().endswith(wanted):
                continue
            if is_skipped_file(name):
                continue
            found.append(Path(dirpath) / name)
    return sorted(found, key=lambda p: p.relative_to(root).as_posix())


def read_sources(
    root: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS
) -> Iterator[tuple[str, str]]:
    """Yield (relative path, content) for each readable source file under ``root``.

    Files that cannot be read or decoded are logged and skipped.
    """
    for path in iter_source_paths(root, extensions):
        relative = path.relative_to(root).as_posix()
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read %s: %s", relative, exc)
            continue
        yield relative, content
