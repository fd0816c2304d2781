"""Tests for etl_dialects/errors.py - structured exception hierarchy."""

from etl_dialects.errors import (
    ConfigurationError,
    DialectError,
    ResourceError,
    UnsupportedDialectError,
)
from etl_dialects.identity import DialectIdentifier
from etl_dialects.xml_tree import Location


class TestDialectError:
    """Tests for base DialectError class."""

    def test_basic_message(self):
        error = DialectError("Something went wrong")
        assert str(error) == "Something went wrong"

    def test_with_location(self):
        error = DialectError("Bad pattern", location=Location("etl.xml", 12))
        assert str(error).startswith("[etl.xml:12] Bad pattern")

    def test_with_details_and_suggestion(self):
        error = DialectError(
            "Broken",
            details={"attribute": "name"},
            suggestion="Escape the parenthesis",
        )
        assert "attribute: name" in str(error)
        assert "Suggestion: Escape the parenthesis" in str(error)

    def test_to_dict(self):
        error = DialectError(
            "Test error",
            location=Location("etl.xml", 3),
            details={"key": "value"},
            suggestion="Fix it",
        )
        assert error.to_dict() == {
            "error_type": "DialectError",
            "message": "Test error",
            "location": "etl.xml:3",
            "details": {"key": "value"},
            "suggestion": "Fix it",
        }


class TestSubclasses:
    """Tests for the specific error types."""

    def test_configuration_error(self):
        cause = ValueError("boom")
        error = ConfigurationError("Invalid", attribute="version", value="[", cause=cause)
        assert isinstance(error, DialectError)
        assert error.details == {
            "attribute": "version",
            "value": "[",
            "cause": "boom",
            "cause_type": "ValueError",
        }

    def test_unsupported_dialect_error(self):
        error = UnsupportedDialectError("No content", identity=DialectIdentifier("db2", "11"))
        assert error.details["dialect"] == "db2 11"
        assert error.suggestion

    def test_resource_error(self):
        error = ResourceError("Missing", path="/tmp/a.sql")
        assert error.details["path"] == "/tmp/a.sql"
        assert "Suggestion:" in str(error)
