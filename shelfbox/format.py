"""Output format selection for list and status style commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How a command renders its results."""

    TABLE = "table"
    PLAIN = "plain"
    JSON = "json"

    @classmethod
    def resolve(
        cls, explicit: OutputFormat | None, default_format: str | None
    ) -> OutputFormat:
        """Pick the explicit format, else the configured one, else TABLE.

        An unrecognised configured value falls back to TABLE.
        """
        if explicit is not None:
            return explicit
        if default_format is not None:
            parsed = cls.from_config_str(default_format)
            if parsed is not None:
                return parsed
        return cls.TABLE

    @classmethod
    def from_config_str(cls, value: str) -> OutputFormat | None:
        """Parse a ``default_format`` config value; None if unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return None