"""Identity of the backend a script or query runs against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["DialectIdentifier"]


@dataclass(frozen=True)
class DialectIdentifier:
    """Name and version reported by the connected backend.

    Either field may be None when the driver does not report it; a None
    field never satisfies a dialect pattern on that axis.
    """

    name: Optional[str] = None
    version: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "DialectIdentifier":
        """Build an identifier from ``"<name> <version>"``.

        The version is everything after the first run of whitespace and
        may itself contain spaces.

        Example:
            >>> DialectIdentifier.parse("PostgreSQL 15.4 (Debian)")
            DialectIdentifier(name='PostgreSQL', version='15.4 (Debian)')
        """
        parts = value.strip().split(None, 1)
        if not parts:
            raise ValueError("Dialect identifier must not be empty")
        version = parts[1] if len(parts) > 1 else None
        return cls(name=parts[0], version=version)

    def __str__(self) -> str:
        return " ".join(part for part in (self.name, self.version) if part is not None)
