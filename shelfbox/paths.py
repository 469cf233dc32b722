"""Lexical path resolution that never touches the filesystem."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_path(cwd: os.PathLike[str] | str, path: os.PathLike[str] | str) -> Path:
    """Make ``path`` absolute against ``cwd`` without following symlinks."""
    path = Path(path)
    base = path if path.is_absolute() else Path(cwd) / path
    return normalize_path(base)


def normalize_path(path: os.PathLike[str] | str) -> Path:
    """Collapse ``.`` and ``..`` components lexically.

    ``..`` at the root (or at the start of a relative path) is dropped.
    """
    path = Path(path)
    anchor = path.anchor
    parts = path.parts[1:] if anchor else path.parts
    out: list[str] = []
    for part in parts:
        if part == "..":
            if out:
                out.pop()
        elif part != ".":
            out.append(part)
    if anchor:
        return Path(anchor, *out)
    return Path(*out) if out else Path()