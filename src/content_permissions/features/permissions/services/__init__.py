"""Permission services: materialization, provisioning and implied-by checks."""

from .dynamic_permission_service import DynamicPermissionService
from .content_type_permissions_provider import ContentTypePermissionsProvider
from .authorization import expand_implied, is_granted

__all__ = [
    "DynamicPermissionService",
    "ContentTypePermissionsProvider",
    "expand_implied",
    "is_granted",
]
