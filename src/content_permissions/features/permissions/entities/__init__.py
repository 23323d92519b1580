"""Permission entities and protocols."""

from .permission import Permission, PermissionTemplate
from .content_type import ContentTypeDefinition
from .template_ids import ContentPermissionTemplate
from .protocols import ContentTypeDefinitionProvider, PermissionCatalog

__all__ = [
    "Permission",
    "PermissionTemplate",
    "ContentTypeDefinition",
    "ContentPermissionTemplate",
    "ContentTypeDefinitionProvider",
    "PermissionCatalog",
]
