"""Dialect-aware content for declarative ETL configurations.

Script, query and onerror elements may carry alternative bodies for
different database backends. This package parses those alternatives
and resolves the body that applies to the backend in use.
"""

from etl_dialects.content import ContentBlock
from etl_dialects.dialect import Dialect
from etl_dialects.dialect_content import (
    DialectBasedContent,
    ExplicitDialect,
    Ignored,
    ResourceChild,
    classify_child,
)
from etl_dialects.env import expand_env_vars
from etl_dialects.errors import (
    ConfigurationError,
    DialectError,
    ResourceError,
    UnsupportedDialectError,
)
from etl_dialects.identity import DialectIdentifier
from etl_dialects.logging import JSONFormatter, setup_logging
from etl_dialects.resources import IncludeResource, Resource, StringResource, as_resource
from etl_dialects.settings import DialectSettings, get_settings, reset_settings
from etl_dialects.xml_tree import Location, XMLDocument, XMLElement

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Core
    "ContentBlock",
    "Dialect",
    "DialectBasedContent",
    "DialectIdentifier",
    "ExplicitDialect",
    "Ignored",
    "ResourceChild",
    "classify_child",
    # Resources and XML
    "IncludeResource",
    "Location",
    "Resource",
    "StringResource",
    "XMLDocument",
    "XMLElement",
    "as_resource",
    # Errors
    "ConfigurationError",
    "DialectError",
    "ResourceError",
    "UnsupportedDialectError",
    # Configuration and logging
    "DialectSettings",
    "JSONFormatter",
    "expand_env_vars",
    "get_settings",
    "reset_settings",
    "setup_logging",
]
