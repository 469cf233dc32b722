"""Static metadata describing the configuration keys."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyMeta:
    """Documentation for one configuration key."""

    key: str
    type_name: str
    default_display: str
    description: str
    precedence: tuple[str, ...]


KEY_STORE = KeyMeta(
    key="store",
    type_name="path",
    default_display="~/.local/share/shelfbox",
    description="Root directory for the global shelfbox store.",
    precedence=("--store", "SHELFBOX_STORE", "config.toml", "XDG default"),
)

KEY_DEFAULT_FORMAT = KeyMeta(
    key="default_format",
    type_name="enum",
    default_display="table",
    description=(
        "Default output format for list/status commands. "
        "Valid values: table, plain, json."
    ),
    precedence=("config.toml", "built-in default"),
)

ALL_KEYS: tuple[KeyMeta, ...] = (KEY_STORE, KEY_DEFAULT_FORMAT)


def find_key(key: str) -> KeyMeta | None:
    """Return the metadata for ``key``, or None if it is not a known key."""
    return next((meta for meta in ALL_KEYS if meta.key == key), None)


def explain(key: str) -> str:
    """Describe ``key`` in full; raise ValueError for an unknown key."""
    meta = find_key(key)
    if meta is None:
        raise ValueError(f"unknown config key: {key}")
    lines = [
        f"KEY: {meta.key}",
        f"TYPE: {meta.type_name}",
        "DEFAULT:",
        f"  {meta.default_display}",
        "",
        "DESCRIPTION:",
        f"  {meta.description}",
        "",
        "PRECEDENCE:",
        *(f"  {step}" for step in meta.precedence),
    ]
    return "\n".join(lines)


def ljust(text: str, width: int) -> str:
    """Pad ``text`` with spaces on the right to at least ``width`` characters."""
    return f"{text:<{width}}"