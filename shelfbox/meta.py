"""Store identity file (``meta.json``) and identifier helpers."""

from __future__ import annotations

import os
import secrets
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

from shelfbox.jsonfile import atomic_write_json

_CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


@dataclass
class StoreMeta:
    """Contents of ``<store>/meta.json``."""

    store_id: str
    created_at: str


def new_ulid() -> str:
    """Return a fresh ULID: 48-bit millisecond time plus 80 random bits."""
    value = (int(time.time() * 1000) << 80) | secrets.randbits(80)
    return "".join(_CROCKFORD[(value >> (5 * shift)) & 31] for shift in reversed(range(26)))


def now_iso8601() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def meta_path(store_root: os.PathLike[str] | str) -> Path:
    return Path(store_root) / "meta.json"


def ensure_store_meta(store_root: os.PathLike[str] | str) -> None:
    """Create ``meta.json`` with a new store id unless it already exists."""
    path = meta_path(store_root)
    if path.exists():
        return
    meta = StoreMeta(store_id=new_ulid(), created_at=now_iso8601())
    atomic_write_json(path, asdict(meta))