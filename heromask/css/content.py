"""Content scanning for icon class candidates.

Templates and scripts are scanned as plain text. Any run of class-name
characters whose final ``:``-separated part starts with ``hero-`` is a
candidate, e.g. ``hero-x-mark`` or ``phx-submit-loading:hero-arrow-path``.
"""

from __future__ import annotations

import glob
import os
import re
from collections.abc import Iterable
from pathlib import Path

from ..config import ICON_PREFIX

_TOKEN_RE = re.compile(r"[A-Za-z0-9_:\-]+")


def expand_globs(root: Path, patterns: Iterable[str]) -> list[Path]:
    """Expand content globs relative to ``root``.

    Patterns may use ``**`` and ``..``. Directories are skipped.

    Returns:
        Sorted, de-duplicated list of file paths
    """
    found: set[Path] = set()
    for pattern in patterns:
        full = os.path.join(glob.escape(os.fspath(root)), pattern)
        for match in glob.glob(full, recursive=True):
            path = Path(os.path.normpath(match))
            if path.is_file():
                found.add(path)
    return sorted(found)


def split_candidate(candidate: str) -> tuple[str | None, str]:
    """Split ``variant:class`` into ``(variant, class)``."""
    variant, sep, name = candidate.rpartition(":")
    return (variant if sep else None), name


def extract_candidates(text: str, prefix: str = ICON_PREFIX) -> set[str]:
    marker = f"{prefix}-"
    candidates: set[str] = set()
    for token in _TOKEN_RE.findall(text):
        _, name = split_candidate(token)
        if name.startswith(marker) and len(name) > len(marker):
            candidates.add(token)
    return candidates


def scan_content(root: Path, patterns: Iterable[str]) -> tuple[list[str], int]:
    """Collect icon class candidates from all content files.

    Returns:
        (sorted candidates, number of files scanned)
    """
    files = expand_globs(root, patterns)
    candidates: set[str] = set()
    for path in files:
        text = path.read_text(encoding="utf-8", errors="replace")
        candidates |= extract_candidates(text)
    return sorted(candidates), len(files)
