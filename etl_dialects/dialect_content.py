"""Dialect-based content of script, query and onerror elements.

A content element may hold several ``<dialect>`` blocks plus untagged
text or includes:

    <query>
      <dialect name="oracle">SELECT * FROM dual</dialect>
      <dialect name="h2|hsqldb">VALUES (1)</dialect>
      -- shared trailer
    </query>

Untagged nodes are collected into one synthetic default dialect that is
placed after every explicit block, wherever its nodes appeared. At run
time every dialect matching the connected backend contributes its
fragments, in that stored order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from etl_dialects.content import ContentBlock
from etl_dialects.dialect import DIALECT_TAG, Dialect
from etl_dialects.errors import ConfigurationError, UnsupportedDialectError
from etl_dialects.identity import DialectIdentifier
from etl_dialects.resources import Resource, as_resource
from etl_dialects.settings import DialectSettings, get_settings
from etl_dialects.xml_tree import Node, XMLDocument, XMLElement

logger = logging.getLogger(__name__)

__all__ = [
    "ChildNode",
    "DialectBasedContent",
    "ExplicitDialect",
    "Ignored",
    "ResourceChild",
    "classify_child",
]


@dataclass(frozen=True)
class ExplicitDialect:
    element: XMLElement


@dataclass(frozen=True)
class ResourceChild:
    resource: Resource


@dataclass(frozen=True)
class Ignored:
    node: Node


ChildNode = Union[ExplicitDialect, ResourceChild, Ignored]


def classify_child(
    parent: XMLElement,
    node: Node,
    settings: Optional[DialectSettings] = None,
) -> ChildNode:
    """Sort a child of a content element into dialect, resource or noise."""
    if isinstance(node, XMLElement) and node.is_named(DIALECT_TAG):
        return ExplicitDialect(node)
    resource = as_resource(parent, node, settings)
    if resource is None:
        return Ignored(node)
    return ResourceChild(resource)


class DialectBasedContent:
    """Content that varies with the backend dialect.

    Configured once from an XML element, then read-only: ``get_content``
    may be called from any number of threads.

    Example:
        >>> content = DialectBasedContent.from_xml(
        ...     '<script><dialect name="mysql">A</dialect>C</script>'
        ... )
        >>> content.get_content(DialectIdentifier("mysql", "8.0")).read_text()
        'AC'
    """

    def __init__(
        self,
        element: Optional[XMLElement] = None,
        settings: Optional[DialectSettings] = None,
    ) -> None:
        self._dialects: Optional[Tuple[Dialect, ...]] = None
        self._element: Optional[XMLElement] = None
        if element is not None:
            self.configure(element, settings)

    @classmethod
    def from_xml(
        cls,
        text: str,
        settings: Optional[DialectSettings] = None,
        **document_options,
    ) -> "DialectBasedContent":
        """Parse ``text`` and configure from its root element."""
        document = XMLDocument.from_string(text, **document_options)
        return cls(document.root, settings)

    def configure(
        self,
        element: XMLElement,
        settings: Optional[DialectSettings] = None,
    ) -> None:
        """Split the children of ``element`` into dialects.

        Raises:
            ConfigurationError: If already configured, or a dialect
                pattern or include is invalid. The instance stays
                unconfigured in that case.
        """
        if self._dialects is not None:
            raise ConfigurationError(
                "Dialect-based content is already configured",
                location=element.location,
            )
        settings = settings or get_settings()

        dialects: List[Dialect] = []
        default_dialect: Optional[Dialect] = None

        for node in element.child_nodes():
            child = classify_child(element, node, settings)
            if isinstance(child, ExplicitDialect):
                dialects.append(Dialect.configure(child.element, settings))
            elif isinstance(child, ResourceChild):
                if default_dialect is None:
                    default_dialect = Dialect.configure_default(element)
                    logger.debug("Collecting untagged content of %r", element)
                default_dialect.content.append(child.resource)

        if default_dialect is not None:
            dialects.append(default_dialect)

        self._element = element
        self._dialects = tuple(dialects)
        logger.debug("Configured %d dialect(s) for %r", len(dialects), element)

    @property
    def is_configured(self) -> bool:
        return self._dialects is not None

    @property
    def dialects(self) -> Tuple[Dialect, ...]:
        """Dialects in evaluation order, for introspection and tests."""
        return self._require_dialects()

    def _require_dialects(self) -> Tuple[Dialect, ...]:
        if self._dialects is None:
            raise ConfigurationError("Dialect-based content has not been configured")
        return self._dialects

    def get_content(self, identity: Optional[DialectIdentifier]) -> Optional[ContentBlock]:
        """Return merged content for ``identity``.

        Args:
            identity: The connected backend, or None if it is unidentified

        Returns:
            A new block with the fragments of every matching dialect in
            order, or None if the element does not support the backend.
        """
        result: Optional[ContentBlock] = None
        for dialect in self._require_dialects():
            if dialect.matches(identity):
                if result is None:
                    result = ContentBlock()
                result.merge_from(dialect.content)
        if result is None:
            logger.debug("No dialect of %r matches %s", self._element, identity)
        return result

    def is_supported(self, identity: Optional[DialectIdentifier]) -> bool:
        return any(dialect.matches(identity) for dialect in self._require_dialects())

    def require_content(self, identity: Optional[DialectIdentifier]) -> ContentBlock:
        """Like :meth:`get_content`, but a missing match is an error.

        Raises:
            UnsupportedDialectError: If no dialect matches ``identity``.
        """
        content = self.get_content(identity)
        if content is None:
            raise UnsupportedDialectError(
                "No content applies to the connected backend",
                identity=identity,
                location=self._element.location if self._element is not None else None,
            )
        return content

    def __repr__(self) -> str:
        if self._dialects is None:
            return "DialectBasedContent(<unconfigured>)"
        inner = ", ".join(dialect.describe() for dialect in self._dialects)
        return f"DialectBasedContent([{inner}])"
