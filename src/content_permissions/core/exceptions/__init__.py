"""Exception hierarchy for content-permissions."""

from .base import (
    ContentPermissionsError,
    create_error_response,
)

from .domain import (
    InvalidArgumentError,
    ConfigurationError,
    TemplateNotFoundError,
)

__all__ = [
    "ContentPermissionsError",
    "create_error_response",
    "InvalidArgumentError",
    "ConfigurationError",
    "TemplateNotFoundError",
]
