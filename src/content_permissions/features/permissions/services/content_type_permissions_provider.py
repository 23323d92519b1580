"""Provides the permissions of every securable content type."""

import logging
from typing import Iterable, List, Optional, Union

from ..entities import ContentTypeDefinition, ContentTypeDefinitionProvider, Permission
from .dynamic_permission_service import DynamicPermissionService


logger = logging.getLogger(__name__)


class ContentTypePermissionsProvider:
    """Lists rich dynamic permissions for the content types of a host application."""
    
    def __init__(
        self,
        service: DynamicPermissionService,
        definitions: Union[ContentTypeDefinitionProvider, Iterable[ContentTypeDefinition]]
    ):
        self.service = service
        self.definitions = definitions
    
    def _type_definitions(self) -> List[ContentTypeDefinition]:
        if isinstance(self.definitions, ContentTypeDefinitionProvider):
            return list(self.definitions.list_type_definitions())
        return list(self.definitions)
    
    def get_type_permissions(self, type_definition: ContentTypeDefinition) -> List[Permission]:
        """Get one permission per template for a single content type."""
        return [
            self.service.create_dynamic_permission(template, type_definition)
            for template in self.service.registry.templates()
        ]
    
    def get_permissions(self, content_types: Optional[Iterable[str]] = None) -> List[Permission]:
        """
        Get the permissions of every securable content type.
        
        Args:
            content_types: Restrict the result to these content type names
        """
        wanted = set(content_types) if content_types is not None else None
        permissions: List[Permission] = []
        for type_definition in self._type_definitions():
            if not type_definition.securable:
                continue
            if wanted is not None and type_definition.name not in wanted:
                continue
            permissions.extend(self.get_type_permissions(type_definition))
        
        logger.debug(f"Generated {len(permissions)} content type permissions")
        return permissions
