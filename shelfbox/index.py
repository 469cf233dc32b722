"""The global index of repositories known to a store (``index.json``)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from shelfbox.jsonfile import StoreError, atomic_write_json, read_json

CURRENT_VERSION = 1


@dataclass
class RepoEntry:
    """One known repository and its machine-specific paths."""

    root: Path
    git_dir: Path
    git_common_dir: Path
    store_dir: str
    last_seen_at: str

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.git_dir = Path(self.git_dir)
        self.git_common_dir = Path(self.git_common_dir)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": str(self.root),
            "git_dir": str(self.git_dir),
            "git_common_dir": str(self.git_common_dir),
            "store_dir": self.store_dir,
            "last_seen_at": self.last_seen_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> RepoEntry:
        if not isinstance(data, dict):
            raise ValueError("repo entry must be an object")
        try:
            return cls(
                root=Path(_string(data, "root")),
                git_dir=Path(_string(data, "git_dir")),
                git_common_dir=Path(_string(data, "git_common_dir")),
                store_dir=_string(data, "store_dir"),
                last_seen_at=_string(data, "last_seen_at"),
            )
        except KeyError as err:
            raise ValueError(f"missing field {err.args[0]!r}") from err


def _string(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class Index:
    """In-memory form of ``index.json``, keyed by ULID repo id."""

    version: int = CURRENT_VERSION
    repos: dict[str, RepoEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.repos)

    def __contains__(self, repo_id: object) -> bool:
        return repo_id in self.repos

    def get(self, repo_id: str) -> RepoEntry | None:
        """Return the entry for ``repo_id``, if present."""
        return self.repos.get(repo_id)

    def upsert(self, repo_id: str, entry: RepoEntry) -> None:
        """Insert or replace the entry for ``repo_id``."""
        self.repos[repo_id] = entry

    def iter(self) -> Iterator[tuple[str, RepoEntry]]:
        """Iterate over all ``(id, entry)`` pairs."""
        return iter(self.repos.items())

    def find_by_root(self, root: os.PathLike[str] | str) -> str | None:
        """Return the id of the repo whose root is ``root``."""
        root = Path(root)
        return next((rid for rid, e in self.repos.items() if e.root == root), None)

    def remove(self, repo_id: str) -> bool:
        """Remove the entry for ``repo_id``; return whether one existed."""
        return self.repos.pop(repo_id, None) is not None

    def find_by_git_common_dir(self, common_dir: os.PathLike[str] | str) -> str | None:
        """Return the id of the repo sharing the git common dir ``common_dir``.

        Linked worktrees have a different root but the same common dir.
        """
        common_dir = Path(common_dir)
        return next(
            (rid for rid, e in self.repos.items() if e.git_common_dir == common_dir),
            None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "repos": {rid: e.to_dict() for rid, e in self.repos.items()},
        }

    @classmethod
    def from_dict(cls, data: Any) -> Index:
        if not isinstance(data, dict):
            raise ValueError("index must be an object")
        if "version" not in data or "repos" not in data:
            raise ValueError("index must have 'version' and 'repos'")
        version = data["version"]
        repos = data["repos"]
        if not isinstance(version, int) or isinstance(version, bool) or version < 0:
            raise ValueError("'version' must be a non-negative integer")
        if not isinstance(repos, dict):
            raise ValueError("'repos' must be an object")
        return cls(
            version=version,
            repos={rid: RepoEntry.from_dict(e) for rid, e in repos.items()},
        )


def index_path(store_root: os.PathLike[str] | str) -> Path:
    """Path of the global index file inside ``store_root``."""
    return Path(store_root) / "index.json"


def load(store_root: os.PathLike[str] | str) -> Index:
    """Load the index; a missing file yields an empty index."""
    path = index_path(store_root)
    try:
        data = read_json(path)
    except StoreError as err:
        if err.not_found:
            return Index()
        raise
    try:
        return Index.from_dict(data)
    except ValueError as err:
        raise StoreError(path, str(err)) from err


def save(store_root: os.PathLike[str] | str, index: Index) -> None:
    """Atomically write the index to disk."""
    atomic_write_json(index_path(store_root), index.to_dict())