"""Store-wide maintenance: summary, verification and stale-entry cleanup."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from shelfbox import index as index_mod
from shelfbox import manifest as manifest_mod
from shelfbox.jsonfile import StoreError

_KIB = 1024
_MIB = 1024 * _KIB
_GIB = 1024 * _MIB


@dataclass(frozen=True)
class StoreSummary:
    """Headline figures for a store."""

    store: Path
    repo_count: int
    total_items: int
    disk_bytes: int


@dataclass(frozen=True)
class StaleEntry:
    """An index entry whose repository root no longer exists."""

    repo_id: str
    root: Path
    store_dir: str


def _repo_store(store_root: Path, store_dir: str) -> Path:
    return store_root / "repos" / store_dir


def dir_size(path: os.PathLike[str] | str) -> int:
    """Total size in bytes of the files below ``path``; unreadable parts count 0."""
    try:
        entries = list(os.scandir(path))
    except OSError:
        return 0
    total = 0
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                total += dir_size(entry.path)
            else:
                total += entry.stat(follow_symlinks=False).st_size
        except OSError:
            continue
    return total


def human_bytes(size: int) -> str:
    """Format a byte count using B, KiB, MiB or GiB."""
    if size >= _GIB:
        return f"{size / _GIB:.1f} GiB"
    if size >= _MIB:
        return f"{size / _MIB:.1f} MiB"
    if size >= _KIB:
        return f"{size / _KIB:.1f} KiB"
    return f"{size} B"


def store_info(store_root: os.PathLike[str] | str) -> StoreSummary:
    """Count repositories and shelved items and measure disk usage."""
    store_root = Path(store_root)
    idx = index_mod.load(store_root)
    repo_count = 0
    total_items = 0
    for _, entry in idx.iter():
        repo_count += 1
        try:
            total_items += len(manifest_mod.load(_repo_store(store_root, entry.store_dir)).items)
        except StoreError:
            continue
    return StoreSummary(
        store=store_root,
        repo_count=repo_count,
        total_items=total_items,
        disk_bytes=dir_size(store_root),
    )


def verify(store_root: os.PathLike[str] | str) -> list[str]:
    """Check every known repo's links and store files; return issue messages."""
    store_root = Path(store_root)
    idx = index_mod.load(store_root)
    issues: list[str] = []
    for _, entry in idx.iter():
        repo_store = _repo_store(store_root, entry.store_dir)
        try:
            mf = manifest_mod.load(repo_store)
        except StoreError as err:
            issues.append(f"WARN  {entry.root} — cannot read manifest: {err}")
            continue
        for item in mf.items:
            link_path = entry.root / item.path
            if not link_path.exists():
                issues.append(f"MISS  symlink not found: {link_path}")
            store_file = repo_store / item.store_path
            if not store_file.exists():
                issues.append(f"MISS  store file not found: {store_file}")
    return issues


def find_stale(store_root: os.PathLike[str] | str) -> list[StaleEntry]:
    """Return index entries whose repository root is gone from disk."""
    idx = index_mod.load(store_root)
    return [
        StaleEntry(repo_id=rid, root=entry.root, store_dir=entry.store_dir)
        for rid, entry in idx.iter()
        if not entry.root.exists()
    ]


def remove_stale(
    store_root: os.PathLike[str] | str, stale: list[StaleEntry]
) -> list[StaleEntry]:
    """Delete store data and index entries for ``stale``; return what was removed.

    The index is only saved once every store directory has been removed.
    """
    store_root = Path(store_root)
    idx = index_mod.load(store_root)
    removed: list[StaleEntry] = []
    for entry in stale:
        repo_store = _repo_store(store_root, entry.store_dir)
        if repo_store.exists():
            try:
                shutil.rmtree(repo_store)
            except OSError as err:
                raise StoreError(repo_store, f"failed to remove: {err}") from err
        idx.remove(entry.repo_id)
        removed.append(entry)
    index_mod.save(store_root, idx)
    return removed