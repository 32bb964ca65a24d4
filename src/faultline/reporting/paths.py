"""Display-path cleanup for finding locations."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from faultline.constants.reporting import FILE_WITH_CONTEXT_PATTERN

_FILE_WITH_CONTEXT_RE = re.compile(FILE_WITH_CONTEXT_PATTERN, re.DOTALL)

type PathResolver = Callable[[str], str]


def strip_context_suffix(file_path: str) -> str:
    """Drop a trailing ``(in context of ...)`` note from an analyser file path."""
    match = _FILE_WITH_CONTEXT_RE.fullmatch(file_path)
    if match is None:
        return file_path
    return match.group("file")


def resolve_from_cwd(file_path: str) -> str:
    """Rewrite an existing path relative to the working directory when it lives under it."""
    resolved = Path(file_path).resolve()
    try:
        return resolved.relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return str(resolved)


def _exists(path: str) -> bool:
    try:
        return Path(path).exists()
    except OSError:
        return False


def relative_path(file_path: str, resolver: PathResolver = resolve_from_cwd) -> str:
    """Return the path a user can click on: cleaned, and cwd-relative if it exists."""
    clean_path = strip_context_suffix(file_path)
    if not clean_path or not _exists(clean_path):
        return clean_path
    return resolver(clean_path)
