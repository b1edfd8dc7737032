"""Tests for docspine.core.errors module."""

import pytest

from docspine.core.errors import (
    ConfigError,
    DatabaseConnectionError,
    DatabaseError,
    DocSpineError,
    DocumentNotFoundError,
    ErrorCategory,
    InvalidConfigError,
    InvalidIdentifierError,
    MissingConfigError,
    ValidationError,
)


class TestErrorCategory:
    def test_values_are_strings(self):
        assert ErrorCategory.DATABASE == "DATABASE"
        assert ErrorCategory("NOT_FOUND") is ErrorCategory.NOT_FOUND


class TestDocSpineError:
    def test_defaults(self):
        err = DocSpineError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.category == ErrorCategory.INTERNAL
        assert err.code == "INTERNAL"
        assert err.context == {}
        assert err.cause is None

    def test_cause_is_chained(self):
        cause = OSError("reset")
        err = DocSpineError("failed", cause=cause)
        assert err.__cause__ is cause

    def test_with_context_is_fluent(self):
        err = DocSpineError("x").with_context(collection="users")
        assert err.context == {"collection": "users"}

    def test_to_dict(self):
        err = DatabaseError("insert failed", cause=ValueError("dup"), context={"op": "insert"})
        d = err.to_dict()
        assert d == {
            "error_type": "DatabaseError",
            "message": "insert failed",
            "category": "DATABASE",
            "code": "INTERNAL",
            "context": {"op": "insert"},
            "cause": "dup",
        }

    def test_to_dict_omits_empty_fields(self):
        d = DocSpineError("plain").to_dict()
        assert "context" not in d
        assert "cause" not in d

    def test_repr(self):
        assert repr(ConfigError("bad")) == "ConfigError('bad', category=CONFIG)"


class TestSubclasses:
    @pytest.mark.parametrize(
        ("error", "category", "code"),
        [
            (MissingConfigError("MONGODB_URI"), ErrorCategory.CONFIG, "CONFIG"),
            (InvalidConfigError("port", "x"), ErrorCategory.CONFIG, "CONFIG"),
            (InvalidIdentifierError("nope"), ErrorCategory.VALIDATION, "INVALID_INPUT"),
            (DocumentNotFoundError("users", "abc"), ErrorCategory.NOT_FOUND, "NOT_FOUND"),
            (DatabaseError("boom"), ErrorCategory.DATABASE, "INTERNAL"),
            (DatabaseConnectionError("down"), ErrorCategory.DATABASE, "UNAVAILABLE"),
        ],
    )
    def test_category_and_code(self, error, category, code):
        assert isinstance(error, DocSpineError)
        assert error.category == category
        assert error.code == code

    def test_missing_config_message(self):
        err = MissingConfigError("MONGODB_URI")
        assert err.key == "MONGODB_URI"
        assert "MONGODB_URI" in err.message

    def test_invalid_config_keeps_value(self):
        err = InvalidConfigError("port", "abc")
        assert err.value == "abc"
        assert "'abc'" in err.message

    def test_invalid_identifier(self):
        err = InvalidIdentifierError("xyz")
        assert isinstance(err, ValidationError)
        assert err.value == "xyz"
        assert "xyz" in err.message

    def test_not_found_context(self):
        err = DocumentNotFoundError("games", 42)
        assert err.context == {"collection": "games", "document_id": "42"}
        assert err.message == "Document '42' not found in 'games'"

    def test_connection_error_is_database_error(self):
        assert issubclass(DatabaseConnectionError, DatabaseError)
