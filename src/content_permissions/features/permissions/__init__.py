"""Content permissions feature.

- entities/: Permission and template value records, protocols
- catalog: global content permissions
- registry: template registry keyed by global permission name
- cache: copy-on-write dynamic permission cache
- services/: materialization, per content type provisioning, implied-by checks
- module: composition root
"""

from .entities import (
    Permission,
    PermissionTemplate,
    ContentTypeDefinition,
    ContentPermissionTemplate,
    ContentTypeDefinitionProvider,
    PermissionCatalog,
)
from .catalog import CommonPermissions, DefaultPermissionCatalog
from .registry import (
    PermissionTemplateRegistry,
    TEMPLATE_IMPLICATIONS,
    get_template_registry,
)
from .cache import DynamicPermissionCache
from .services import (
    DynamicPermissionService,
    ContentTypePermissionsProvider,
    expand_implied,
    is_granted,
)
from .module import ContentPermissionsModule

__all__ = [
    # Entities
    "Permission",
    "PermissionTemplate",
    "ContentTypeDefinition",
    "ContentPermissionTemplate",
    
    # Protocols
    "ContentTypeDefinitionProvider",
    "PermissionCatalog",
    
    # Catalog and registry
    "CommonPermissions",
    "DefaultPermissionCatalog",
    "PermissionTemplateRegistry",
    "TEMPLATE_IMPLICATIONS",
    "get_template_registry",
    
    # Cache and services
    "DynamicPermissionCache",
    "DynamicPermissionService",
    "ContentTypePermissionsProvider",
    "expand_implied",
    "is_granted",
    
    # Composition root
    "ContentPermissionsModule",
]
