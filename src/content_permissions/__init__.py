"""Content-Permissions - per content type permissions for a content management system.

Generates permissions for each content type from global permission templates
and caches the generated permissions so each one is built once per process.
"""

from .__version__ import __version__

from .config import ContentPermissionsSettings, get_settings, setup_logging

from .core.exceptions import (
    ContentPermissionsError,
    InvalidArgumentError,
    ConfigurationError,
    TemplateNotFoundError,
    create_error_response,
)

from .features.permissions import (
    Permission,
    PermissionTemplate,
    ContentTypeDefinition,
    ContentPermissionTemplate,
    ContentTypeDefinitionProvider,
    PermissionCatalog,
    CommonPermissions,
    DefaultPermissionCatalog,
    PermissionTemplateRegistry,
    get_template_registry,
    DynamicPermissionCache,
    DynamicPermissionService,
    ContentTypePermissionsProvider,
    expand_implied,
    is_granted,
    ContentPermissionsModule,
)

__all__ = [
    "__version__",
    
    # Configuration
    "ContentPermissionsSettings",
    "get_settings",
    "setup_logging",
    
    # Exceptions
    "ContentPermissionsError",
    "InvalidArgumentError",
    "ConfigurationError",
    "TemplateNotFoundError",
    "create_error_response",
    
    # Permissions
    "Permission",
    "PermissionTemplate",
    "ContentTypeDefinition",
    "ContentPermissionTemplate",
    "ContentTypeDefinitionProvider",
    "PermissionCatalog",
    "CommonPermissions",
    "DefaultPermissionCatalog",
    "PermissionTemplateRegistry",
    "get_template_registry",
    "DynamicPermissionCache",
    "DynamicPermissionService",
    "ContentTypePermissionsProvider",
    "expand_implied",
    "is_granted",
    "ContentPermissionsModule",
]
