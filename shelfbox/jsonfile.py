"""Reading and atomically writing the JSON documents kept in the store."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


class StoreError(Exception):
    """A store file could not be read, parsed or written."""

    def __init__(self, path: os.PathLike[str] | str, message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")

    @property
    def not_found(self) -> bool:
        """True when the error was caused by the file not existing."""
        return isinstance(self.__cause__, FileNotFoundError)


def read_json(path: os.PathLike[str] | str) -> Any:
    """Read and parse the JSON document at ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise StoreError(path, err.strerror or str(err)) from err
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise StoreError(path, f"invalid JSON: {err}") from err


def atomic_write_json(path: os.PathLike[str] | str, data: Any) -> None:
    """Write ``data`` as pretty JSON to ``path`` via a temp file and rename.

    The parent directory is created with owner-only permissions so that
    other users on the machine cannot read shelved content.
    """
    path = Path(path)
    parent = path.parent
    try:
        parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    except OSError as err:
        raise StoreError(parent, err.strerror or str(err)) from err

    try:
        text = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise StoreError(path, f"cannot serialise: {err}") from err

    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
    except OSError as err:
        raise StoreError(tmp_path, err.strerror or str(err)) from err
    try:
        os.replace(tmp_path, path)
    except OSError as err:
        raise StoreError(path, err.strerror or str(err)) from err