"""Global content permissions.

These canonical permissions are not bound to a content type. Each template
family in the registry derives from exactly one of them.
"""

from typing import Dict, Final, Iterable, Optional, Tuple

from .entities import Permission


class CommonPermissions:
    """Canonical global content permissions."""
    
    PUBLISH_CONTENT: Final[Permission] = Permission(
        "PublishContent", "Publish or unpublish content for others"
    )
    PUBLISH_OWN_CONTENT: Final[Permission] = Permission(
        "PublishOwnContent", "Publish or unpublish own content", implied_by=(PUBLISH_CONTENT,)
    )
    EDIT_CONTENT: Final[Permission] = Permission(
        "EditContent", "Edit content for others", implied_by=(PUBLISH_CONTENT,)
    )
    EDIT_OWN_CONTENT: Final[Permission] = Permission(
        "EditOwnContent", "Edit own content", implied_by=(EDIT_CONTENT, PUBLISH_OWN_CONTENT)
    )
    DELETE_CONTENT: Final[Permission] = Permission(
        "DeleteContent", "Delete content for others"
    )
    DELETE_OWN_CONTENT: Final[Permission] = Permission(
        "DeleteOwnContent", "Delete own content", implied_by=(DELETE_CONTENT,)
    )
    VIEW_CONTENT: Final[Permission] = Permission(
        "ViewContent", "View all content", implied_by=(EDIT_CONTENT,)
    )
    VIEW_OWN_CONTENT: Final[Permission] = Permission(
        "ViewOwnContent", "View own content", implied_by=(VIEW_CONTENT,)
    )
    PREVIEW_CONTENT: Final[Permission] = Permission(
        "PreviewContent", "Preview content", implied_by=(EDIT_CONTENT,)
    )
    PREVIEW_OWN_CONTENT: Final[Permission] = Permission(
        "PreviewOwnContent", "Preview own content", implied_by=(PREVIEW_CONTENT,)
    )
    CLONE_CONTENT: Final[Permission] = Permission(
        "CloneContent", "Clone content for others", implied_by=(EDIT_CONTENT,)
    )
    CLONE_OWN_CONTENT: Final[Permission] = Permission(
        "CloneOwnContent", "Clone own content", implied_by=(CLONE_CONTENT,)
    )
    LIST_CONTENT: Final[Permission] = Permission(
        "ListContent", "List content items"
    )
    EDIT_CONTENT_OWNER: Final[Permission] = Permission(
        "EditContentOwner", "Edit the owner of a content item"
    )
    
    @classmethod
    def all(cls) -> Tuple[Permission, ...]:
        """All global content permissions in declaration order."""
        return (
            cls.PUBLISH_CONTENT,
            cls.PUBLISH_OWN_CONTENT,
            cls.EDIT_CONTENT,
            cls.EDIT_OWN_CONTENT,
            cls.DELETE_CONTENT,
            cls.DELETE_OWN_CONTENT,
            cls.VIEW_CONTENT,
            cls.VIEW_OWN_CONTENT,
            cls.PREVIEW_CONTENT,
            cls.PREVIEW_OWN_CONTENT,
            cls.CLONE_CONTENT,
            cls.CLONE_OWN_CONTENT,
            cls.LIST_CONTENT,
            cls.EDIT_CONTENT_OWNER,
        )


class DefaultPermissionCatalog:
    """In-memory catalog over a fixed set of global permissions."""
    
    def __init__(self, permissions: Optional[Iterable[Permission]] = None):
        source = CommonPermissions.all() if permissions is None else permissions
        self._permissions: Dict[str, Permission] = {p.name: p for p in source}
    
    def get_permission(self, name: str) -> Optional[Permission]:
        return self._permissions.get(name)
    
    def list_permissions(self) -> Iterable[Permission]:
        return tuple(self._permissions.values())
