"""Ordered blocks of executable content."""

from __future__ import annotations

import io
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from etl_dialects.resources import Resource, as_resource
from etl_dialects.settings import DialectSettings
from etl_dialects.xml_tree import XMLElement

__all__ = ["ContentBlock"]


class ContentBlock:
    """An ordered, appendable sequence of content fragments.

    Opening the block yields the fragments' text concatenated in order,
    which is the stream handed to the executing driver.
    """

    def __init__(self, fragments: Optional[Iterable[Resource]] = None) -> None:
        self._fragments: List[Resource] = list(fragments or ())

    @classmethod
    def from_element(
        cls,
        element: XMLElement,
        settings: Optional[DialectSettings] = None,
    ) -> "ContentBlock":
        """Collect the text and include children of ``element``."""
        block = cls()
        for node in element.child_nodes():
            resource = as_resource(element, node, settings)
            if resource is not None:
                block.append(resource)
        return block

    @property
    def fragments(self) -> Tuple[Resource, ...]:
        return tuple(self._fragments)

    @property
    def is_empty(self) -> bool:
        return not self._fragments

    def append(self, fragment: Resource) -> None:
        self._fragments.append(fragment)

    def merge_from(self, other: "ContentBlock") -> None:
        """Append all fragments of ``other`` after the existing ones."""
        self._fragments.extend(other._fragments)

    def copy(self) -> "ContentBlock":
        return ContentBlock(self._fragments)

    def open(self) -> TextIO:
        """Open the concatenated text of all fragments."""
        return io.StringIO(self.read_text())

    def read_text(self) -> str:
        return "".join(fragment.read_text() for fragment in self._fragments)

    def describe(self) -> str:
        return "[" + ", ".join(repr(fragment) for fragment in self._fragments) + "]"

    def __iter__(self) -> Iterator[Resource]:
        return iter(tuple(self._fragments))

    def __len__(self) -> int:
        return len(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentBlock):
            return NotImplemented
        return self._fragments == other._fragments

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ContentBlock({self.describe()})"
