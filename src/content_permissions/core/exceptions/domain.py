"""Domain-specific exceptions for content-permissions."""

from typing import Any, Dict, Optional

from .base import ContentPermissionsError


class InvalidArgumentError(ContentPermissionsError, ValueError):
    """Raised when a caller passes a missing or malformed argument.
    
    This always signals a programming error in the caller, never a
    runtime condition worth retrying.
    """
    
    def __init__(
        self,
        parameter: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or f"Argument '{parameter}' must not be None",
            details={"parameter": parameter, **(details or {})},
        )
        self.parameter = parameter


# Configuration Errors
class ConfigurationError(ContentPermissionsError):
    """Raised when the template registry or settings are inconsistent."""
    pass


# Template Errors
class TemplateNotFoundError(ContentPermissionsError):
    """Raised when a template identifier has no registered template."""
    pass
