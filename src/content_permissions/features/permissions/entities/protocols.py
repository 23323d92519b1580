"""Protocol interfaces for the collaborators of the permission generator.

The host application supplies content type definitions and the global
permission catalog; the library only reads from them.
"""

from abc import abstractmethod
from typing import Iterable, Optional, Protocol, runtime_checkable

from .content_type import ContentTypeDefinition
from .permission import Permission


@runtime_checkable
class ContentTypeDefinitionProvider(Protocol):
    """Protocol for sources of content type definitions."""
    
    @abstractmethod
    def list_type_definitions(self) -> Iterable[ContentTypeDefinition]:
        """List every known content type definition."""
        ...


@runtime_checkable
class PermissionCatalog(Protocol):
    """Protocol for the catalog of global (canonical) permissions."""
    
    @abstractmethod
    def get_permission(self, name: str) -> Optional[Permission]:
        """Get a global permission by name, or None when unknown."""
        ...
    
    @abstractmethod
    def list_permissions(self) -> Iterable[Permission]:
        """List every global permission."""
        ...
