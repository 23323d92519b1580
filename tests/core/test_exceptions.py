"""Tests for the exception hierarchy."""

import pytest

from content_permissions.core.exceptions import (
    ContentPermissionsError,
    InvalidArgumentError,
    ConfigurationError,
    TemplateNotFoundError,
    create_error_response,
)


class TestContentPermissionsError:
    """Test cases for the base exception."""
    
    def test_error_code_defaults_to_class_name(self):
        """Test error code falls back to the exception class name."""
        error = ConfigurationError("broken catalog")
        
        assert error.error_code == "ConfigurationError"
        assert error.message == "broken catalog"
        assert error.details == {}
        assert isinstance(error, ContentPermissionsError)
    
    def test_create_error_response(self):
        """Test structured error response rendering."""
        error = TemplateNotFoundError("missing", error_code="TEMPLATE_MISSING", details={"template": "Foo"})
        response = create_error_response(error)
        
        assert response == {
            "error": {
                "code": "TEMPLATE_MISSING",
                "message": "missing",
                "details": {"template": "Foo"},
                "type": "TemplateNotFoundError",
            }
        }


class TestInvalidArgumentError:
    """Test cases for InvalidArgumentError."""
    
    def test_identifies_parameter(self):
        """Test the offending parameter is named in message and details."""
        error = InvalidArgumentError("template")
        
        assert error.parameter == "template"
        assert error.details == {"parameter": "template"}
        assert "template" in str(error)
    
    def test_is_a_value_error(self):
        """Test callers can catch it as a plain ValueError."""
        with pytest.raises(ValueError):
            raise InvalidArgumentError("content_type", "Argument 'content_type' must be a non-empty string")
