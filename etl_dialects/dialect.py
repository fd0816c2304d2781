"""A single dialect-specific content alternative.

Example XML:
    <script>
      <dialect name="mysql" version="8\\..*">
        INSERT IGNORE INTO t VALUES (1);
      </dialect>
    </script>

``name`` and ``version`` are regular expressions that must match the
whole backend name/version. A missing attribute places no restriction
on that axis. Dots in version patterns are regex wildcards: ``5.7``
also matches ``517``; write ``5\\.7`` for a literal dot.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from etl_dialects.content import ContentBlock
from etl_dialects.errors import ConfigurationError
from etl_dialects.identity import DialectIdentifier
from etl_dialects.settings import DialectSettings, get_settings
from etl_dialects.xml_tree import Location, XMLElement

logger = logging.getLogger(__name__)

__all__ = ["DIALECT_TAG", "Dialect"]

DIALECT_TAG = "dialect"


def _compile_pattern(
    element: XMLElement,
    attribute: str,
    settings: DialectSettings,
) -> Optional[re.Pattern[str]]:
    value = element.get_attribute(attribute)
    if value is None:
        return None
    try:
        return re.compile(value, settings.pattern_flags)
    except re.error as exc:
        raise ConfigurationError(
            f"Invalid {attribute} pattern in <{element.tag}>: {exc}",
            location=element.location,
            attribute=attribute,
            value=value,
            cause=exc,
        ) from exc


def _matches(pattern: Optional[re.Pattern[str]], value: Optional[str]) -> bool:
    if pattern is None:
        return True
    return value is not None and pattern.fullmatch(value) is not None


class Dialect:
    """Content applicable to backends whose identity matches the patterns."""

    def __init__(
        self,
        name_pattern: Optional[re.Pattern[str]] = None,
        version_pattern: Optional[re.Pattern[str]] = None,
        content: Optional[ContentBlock] = None,
        location: Optional[Location] = None,
    ) -> None:
        self.name_pattern = name_pattern
        self.version_pattern = version_pattern
        self.content = content if content is not None else ContentBlock()
        self.location = location

    @classmethod
    def configure(
        cls,
        element: XMLElement,
        settings: Optional[DialectSettings] = None,
    ) -> "Dialect":
        """Build a dialect from a ``<dialect>`` element.

        Raises:
            ConfigurationError: If ``name`` or ``version`` is not a valid
                regular expression.
        """
        settings = settings or get_settings()
        dialect = cls(
            name_pattern=_compile_pattern(element, "name", settings),
            version_pattern=_compile_pattern(element, "version", settings),
            content=ContentBlock.from_element(element, settings),
            location=element.location,
        )
        logger.debug("Configured %r", dialect)
        return dialect

    @classmethod
    def configure_default(cls, parent: XMLElement) -> "Dialect":
        """Build the unrestricted dialect that collects untagged content."""
        return cls(location=parent.location)

    @property
    def is_unrestricted(self) -> bool:
        return self.name_pattern is None and self.version_pattern is None

    def matches(self, identity: Optional[DialectIdentifier]) -> bool:
        """Check whether this dialect applies to ``identity``.

        An unidentified backend (None) is only served by dialects that
        declare neither a name nor a version pattern.
        """
        if identity is None:
            return self.is_unrestricted
        return _matches(self.name_pattern, identity.name) and _matches(
            self.version_pattern, identity.version
        )

    def describe(self) -> str:
        name = self.name_pattern.pattern if self.name_pattern is not None else None
        version = self.version_pattern.pattern if self.version_pattern is not None else None
        return (
            f"Dialect(name={name!r}, version={version!r}, "
            f"fragments={len(self.content)}, location={self.location})"
        )

    __repr__ = describe
