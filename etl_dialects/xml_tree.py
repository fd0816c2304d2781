"""XML element tree with source locations.

ElementTree drops line numbers, so documents are parsed with expat
directly and each element records the line its start tag sits on.
Child nodes are exposed in document order as elements, text runs and
comments, the way a DOM walk would see them.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union, cast
from xml.parsers import expat

from etl_dialects.errors import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = [
    "CommentNode",
    "Location",
    "Node",
    "TextNode",
    "XMLDocument",
    "XMLElement",
]


@dataclass(frozen=True)
class Location:
    """Where a configuration node was declared."""

    source: str
    line: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.source
        return f"{self.source}:{self.line}"


class _LocatedElement(ET.Element):
    sourceline: Optional[int] = None


def _parse(data: Union[str, bytes], source: str) -> ET.Element:
    builder = ET.TreeBuilder(element_factory=_LocatedElement, insert_comments=True)
    parser = expat.ParserCreate()
    parser.buffer_text = True

    def start(tag: str, attrs: dict) -> None:
        element = cast(_LocatedElement, builder.start(tag, attrs))
        element.sourceline = parser.CurrentLineNumber

    parser.StartElementHandler = start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    parser.CommentHandler = builder.comment

    try:
        parser.Parse(data, True)
    except expat.ExpatError as exc:
        raise ConfigurationError(
            f"Malformed XML: {expat.ErrorString(exc.code)}",
            location=Location(source, exc.lineno),
            cause=exc,
        ) from exc
    return builder.close()


def _iter_text(element: ET.Element) -> Iterator[str]:
    # Comment bodies are not content, but the text after them is.
    if isinstance(element.tag, str) and element.text:
        yield element.text
    for child in element:
        if isinstance(child.tag, str):
            yield from _iter_text(child)
        if child.tail:
            yield child.tail


class XMLDocument:
    """A parsed XML configuration document."""

    def __init__(
        self,
        root: ET.Element,
        *,
        source: str = "<string>",
        base_dir: Optional[Path] = None,
    ) -> None:
        self.source = source
        self.base_dir = base_dir
        self.root = XMLElement(root, self)

    @classmethod
    def from_string(
        cls,
        text: Union[str, bytes],
        *,
        source: str = "<string>",
        base_dir: Optional[Union[str, Path]] = None,
    ) -> "XMLDocument":
        """Parse a document held in memory."""
        root = _parse(text, source)
        return cls(root, source=source, base_dir=Path(base_dir) if base_dir else None)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "XMLDocument":
        """Parse a document from disk.

        Relative include hrefs in the document resolve against the
        directory holding the file.
        """
        path = Path(path)
        logger.debug("Loading XML configuration from %s", path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot read configuration file: {path}",
                cause=exc,
            ) from exc
        return cls(_parse(data, str(path)), source=str(path), base_dir=path.parent)

    def __repr__(self) -> str:
        return f"XMLDocument(source={self.source!r}, root=<{self.root.tag}>)"


class XMLElement:
    """An element of an :class:`XMLDocument`."""

    def __init__(
        self,
        element: ET.Element,
        document: XMLDocument,
        parent: Optional["XMLElement"] = None,
    ) -> None:
        self._element = element
        self.document = document
        self.parent = parent

    @property
    def tag(self) -> str:
        return self._element.tag

    @property
    def location(self) -> Location:
        return Location(self.document.source, getattr(self._element, "sourceline", None))

    def is_named(self, tag: str) -> bool:
        return self._element.tag == tag

    def get_attribute(self, name: str) -> Optional[str]:
        """Return an attribute value, or None if it is missing or empty."""
        value = self._element.get(name)
        return value if value else None

    def child_nodes(self) -> Iterator["Node"]:
        """Yield direct children in document order, text runs included."""
        if self._element.text:
            yield TextNode(self._element.text, self)
        for child in self._element:
            if child.tag is ET.Comment:
                yield CommentNode(child.text or "", self)
            else:
                yield XMLElement(child, self.document, self)
            if child.tail:
                yield TextNode(child.tail, self)

    def children(self, tag: Optional[str] = None) -> Iterator["XMLElement"]:
        """Yield child elements, optionally only those named ``tag``."""
        for node in self.child_nodes():
            if isinstance(node, XMLElement) and (tag is None or node.is_named(tag)):
                yield node

    def text_content(self) -> str:
        """Concatenated text of this element and its descendants."""
        return "".join(_iter_text(self._element))

    def __repr__(self) -> str:
        return f"<{self.tag}> at {self.location}"


@dataclass(frozen=True)
class TextNode:
    """A run of character data between elements."""

    text: str
    parent: XMLElement

    @property
    def location(self) -> Location:
        return self.parent.location

    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class CommentNode:
    text: str
    parent: XMLElement


Node = Union[XMLElement, TextNode, CommentNode]
