"""Per-repository manifest of shelved items (``manifest.json``)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from shelfbox.jsonfile import StoreError, atomic_write_json, read_json

CURRENT_VERSION = 1


class ItemKind(str, Enum):
    """Kind of filesystem object that was shelved."""

    FILE = "file"
    DIRECTORY = "directory"


class LinkType(str, Enum):
    """Mechanism connecting the repo path to the store item."""

    SYMLINK = "symlink"


@dataclass
class LinkInfo:
    link_type: LinkType = LinkType.SYMLINK

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.link_type.value}

    @classmethod
    def from_dict(cls, data: Any) -> LinkInfo:
        _require_object(data, "link")
        return cls(link_type=LinkType(_field(data, "type")))


@dataclass
class GitInfo:
    """Git state recorded when the item was shelved."""

    was_tracked: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"was_tracked": self.was_tracked}

    @classmethod
    def from_dict(cls, data: Any) -> GitInfo:
        _require_object(data, "git")
        was_tracked = _field(data, "was_tracked")
        if not isinstance(was_tracked, bool):
            raise ValueError("'was_tracked' must be a boolean")
        return cls(was_tracked=was_tracked)


@dataclass
class Item:
    """One shelved item.

    ``path`` is relative to the repo root; ``store_path`` is relative to
    the repo's store directory.
    """

    path: str
    store_path: str
    kind: ItemKind
    link: LinkInfo
    git: GitInfo
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "store_path": self.store_path,
            "kind": self.kind.value,
            "link": self.link.to_dict(),
            "git": self.git.to_dict(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        _require_object(data, "item")
        return cls(
            path=_string(data, "path"),
            store_path=_string(data, "store_path"),
            kind=ItemKind(_field(data, "kind")),
            link=LinkInfo.from_dict(_field(data, "link")),
            git=GitInfo.from_dict(_field(data, "git")),
            created_at=_string(data, "created_at"),
            updated_at=_string(data, "updated_at"),
        )


@dataclass
class RepoMeta:
    """Stable, environment-independent repository metadata."""

    id: str
    name: str
    remote: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.remote is not None:
            data["remote"] = self.remote
        return data

    @classmethod
    def from_dict(cls, data: Any) -> RepoMeta:
        _require_object(data, "repo")
        remote = data.get("remote")
        if remote is not None and not isinstance(remote, str):
            raise ValueError("'remote' must be a string")
        return cls(id=_string(data, "id"), name=_string(data, "name"), remote=remote)


@dataclass
class Manifest:
    """All shelved items of one repository."""

    repo: RepoMeta
    items: list[Item] = field(default_factory=list)
    version: int = CURRENT_VERSION

    def get(self, path: str) -> Item | None:
        """Return the item with repo-relative ``path``, if any."""
        return next((item for item in self.items if item.path == path), None)

    def contains(self, path: str) -> bool:
        return self.get(path) is not None

    def add(self, item: Item) -> None:
        """Append ``item``; its path must not already be recorded."""
        if self.contains(item.path):
            raise ValueError(f"item '{item.path}' already in manifest")
        self.items.append(item)

    def remove(self, path: str) -> bool:
        """Remove the item at ``path``; return whether one was removed."""
        before = len(self.items)
        self.items = [item for item in self.items if item.path != path]
        return len(self.items) < before

    def rename(
        self, old_path: str, new_path: str, new_store_path: str, updated_at: str
    ) -> bool:
        """Rename an item in place, keeping kind, link, git and created_at."""
        item = self.get(old_path)
        if item is None:
            return False
        item.path = new_path
        item.store_path = new_store_path
        item.updated_at = updated_at
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "repo": self.repo.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Manifest:
        _require_object(data, "manifest")
        version = _field(data, "version")
        if not isinstance(version, int) or isinstance(version, bool) or version < 0:
            raise ValueError("'version' must be a non-negative integer")
        items = _field(data, "items")
        if not isinstance(items, list):
            raise ValueError("'items' must be a list")
        return cls(
            repo=RepoMeta.from_dict(_field(data, "repo")),
            items=[Item.from_dict(item) for item in items],
            version=version,
        )


def _require_object(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object")


def _field(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _string(data: dict[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def manifest_path(repo_store: os.PathLike[str] | str) -> Path:
    """Path of the manifest inside a repo's store directory."""
    return Path(repo_store) / "manifest.json"


def load(repo_store: os.PathLike[str] | str) -> Manifest:
    """Load the manifest; a missing or invalid file raises StoreError."""
    path = manifest_path(repo_store)
    data = read_json(path)
    try:
        return Manifest.from_dict(data)
    except ValueError as err:
        raise StoreError(path, str(err)) from err


def save(repo_store: os.PathLike[str] | str, manifest: Manifest) -> None:
    """Atomically write the manifest to disk."""
    atomic_write_json(manifest_path(repo_store), manifest.to_dict())