"""Text and include resources that make up executable content.

A script body is a sequence of resources: literal text taken from the
XML, and ``<include href="..."/>`` references to external files that
are only read when the content is opened.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from etl_dialects.env import expand_env_vars
from etl_dialects.errors import ConfigurationError, ResourceError
from etl_dialects.settings import DialectSettings, get_settings
from etl_dialects.xml_tree import Location, Node, TextNode, XMLElement

logger = logging.getLogger(__name__)

__all__ = [
    "INCLUDE_TAG",
    "IncludeResource",
    "Resource",
    "StringResource",
    "as_resource",
]

INCLUDE_TAG = "include"


class Resource(ABC):
    """A fragment of executable content."""

    location: Optional[Location]

    @abstractmethod
    def open(self) -> TextIO:
        """Open the fragment for reading."""

    def read_text(self) -> str:
        with self.open() as reader:
            return reader.read()


@dataclass(frozen=True)
class StringResource(Resource):
    """Literal text from the configuration."""

    text: str
    location: Optional[Location] = field(default=None, compare=False)

    def open(self) -> TextIO:
        return io.StringIO(self.text)

    def __repr__(self) -> str:
        preview = self.text if len(self.text) <= 40 else self.text[:37] + "..."
        return f"StringResource({preview!r})"


@dataclass(frozen=True)
class IncludeResource(Resource):
    """A file referenced by ``<include href="..."/>``.

    The file is read lazily. When it does not exist and the include
    element carried fallback text, the fallback is used instead.
    """

    href: str
    path: Path
    encoding: str = "utf-8"
    fallback: Optional[str] = None
    location: Optional[Location] = field(default=None, compare=False)

    def open(self) -> TextIO:
        try:
            return open(self.path, "r", encoding=self.encoding)
        except FileNotFoundError as exc:
            if self.fallback is not None:
                logger.info("Include %s not found, using fallback content", self.path)
                return io.StringIO(self.fallback)
            raise ResourceError(
                f"Included file not found: {self.href}",
                path=str(self.path),
                location=self.location,
                cause=exc,
            ) from exc
        except OSError as exc:
            raise ResourceError(
                f"Cannot open included file: {self.href}",
                path=str(self.path),
                location=self.location,
                cause=exc,
            ) from exc

    def read_text(self) -> str:
        try:
            return super().read_text()
        except (UnicodeDecodeError, LookupError) as exc:
            raise ResourceError(
                f"Cannot decode included file {self.href} as {self.encoding}",
                path=str(self.path),
                location=self.location,
                cause=exc,
            ) from exc

    def __repr__(self) -> str:
        return f"IncludeResource({self.href!r})"


def as_resource(
    parent: XMLElement,
    node: Node,
    settings: Optional[DialectSettings] = None,
) -> Optional[Resource]:
    """Classify a child node as a content resource.

    Args:
        parent: Element whose children are being walked
        node: The child node
        settings: Parse settings (defaults to the process-wide settings)

    Returns:
        A resource for text runs and ``<include>`` elements, None for
        anything else (comments, blank text, unrelated elements).
    """
    settings = settings or get_settings()

    if isinstance(node, TextNode):
        if settings.skip_blank_text and node.is_blank():
            return None
        return StringResource(node.text, location=node.location)

    if isinstance(node, XMLElement) and node.is_named(INCLUDE_TAG):
        return _include_resource(parent, node, settings)

    return None


def _include_resource(
    parent: XMLElement,
    element: XMLElement,
    settings: DialectSettings,
) -> IncludeResource:
    href = element.get_attribute("href")
    if href is None:
        raise ConfigurationError(
            "<include> requires an href attribute",
            location=element.location,
            attribute="href",
        )

    path = Path(expand_env_vars(href))
    if not path.is_absolute():
        if settings.include_base_dir:
            base_dir: Optional[Path] = Path(settings.include_base_dir)
        else:
            base_dir = parent.document.base_dir
        if base_dir is not None:
            path = base_dir / path

    fallback = element.text_content()
    return IncludeResource(
        href=href,
        path=path,
        encoding=element.get_attribute("encoding") or settings.include_encoding,
        fallback=fallback if fallback.strip() else None,
        location=element.location,
    )
