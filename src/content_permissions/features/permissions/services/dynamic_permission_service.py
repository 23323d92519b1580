"""Materializes per content type permissions from templates.

Two variants exist. The rich variant takes a full content type definition,
sets a category and never caches. The cached variant takes a bare content
type name and returns the canonical instance from the dynamic permission
cache, building and publishing it on a miss.
"""

import logging
from typing import Optional

from ....core.exceptions import InvalidArgumentError
from ..cache import DynamicPermissionCache
from ..entities import ContentTypeDefinition, Permission, PermissionTemplate
from ..registry import PermissionTemplateRegistry


logger = logging.getLogger(__name__)


class DynamicPermissionService:
    """Service generating dynamic permissions for content types."""
    
    def __init__(
        self,
        registry: PermissionTemplateRegistry,
        cache: DynamicPermissionCache,
        log_cache_hits: bool = False
    ):
        self.registry = registry
        self.cache = cache
        self.log_cache_hits = log_cache_hits
    
    def convert_to_dynamic_permission(self, permission: Optional[Permission]) -> Optional[PermissionTemplate]:
        """Get the template for a global content permission, or None."""
        return self.registry.template_for_permission(permission)
    
    def create_dynamic_permission(
        self,
        template: PermissionTemplate,
        type_definition: ContentTypeDefinition
    ) -> Permission:
        """
        Generate a permission for a content type, with display name and category.
        
        Always builds new instances, for the permission and for its whole
        implied-by chain.
        
        Args:
            template: Permission template to materialize
            type_definition: Content type the permission is generated for
            
        Raises:
            InvalidArgumentError: If template or type_definition is None
        """
        if template is None:
            raise InvalidArgumentError("template")
        if type_definition is None:
            raise InvalidArgumentError("type_definition")
        
        return Permission(
            name=template.substitute_name(type_definition.name),
            description=template.substitute_description(type_definition.display_name),
            category=type_definition.permission_category,
            implied_by=tuple(
                self.create_dynamic_permission(parent, type_definition)
                for parent in template.implied_by
                if parent is not None
            ),
        )
    
    def get_dynamic_permission(self, template: PermissionTemplate, content_type: str) -> Permission:
        """
        Get the cached permission for a content type, building it on a miss.
        
        Args:
            template: Permission template to materialize
            content_type: Content type name substituted into name and description
            
        Raises:
            InvalidArgumentError: If template is None or content_type is empty
        """
        if template is None:
            raise InvalidArgumentError("template")
        if not content_type:
            raise InvalidArgumentError("content_type", "Argument 'content_type' must be a non-empty string")
        
        cached = self.cache.get(template.key, content_type)
        if cached is not None:
            if self.log_cache_hits:
                logger.debug(f"Dynamic permission cache hit: {cached.name}")
            return cached
        
        logger.debug(f"Dynamic permission cache miss: ({template.key}, {content_type})")
        permission = Permission(
            name=template.substitute_name(content_type),
            description=template.substitute_description(content_type),
            implied_by=tuple(
                self.get_dynamic_permission(parent, content_type)
                for parent in template.implied_by
                if parent is not None
            ),
        )
        # Racing builders for the same key may both publish; the last one wins
        self.cache.publish((template.key, content_type), permission)
        logger.info(f"Built dynamic permission {permission.name}")
        return permission
    
    def get_dynamic_permission_for(self, permission: Optional[Permission], content_type: str) -> Optional[Permission]:
        """Get the dynamic permission for a global permission and content type.
        
        Returns None when the global permission has no template.
        """
        template = self.convert_to_dynamic_permission(permission)
        if template is None:
            return None
        return self.get_dynamic_permission(template, content_type)
