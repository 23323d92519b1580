"""Identifiers of the content permission templates."""

from enum import Enum


class ContentPermissionTemplate(str, Enum):
    """Template families, one per global content permission."""
    
    PUBLISH = "Publish"
    PUBLISH_OWN = "PublishOwn"
    EDIT = "Edit"
    EDIT_OWN = "EditOwn"
    DELETE = "Delete"
    DELETE_OWN = "DeleteOwn"
    VIEW = "View"
    VIEW_OWN = "ViewOwn"
    PREVIEW = "Preview"
    PREVIEW_OWN = "PreviewOwn"
    CLONE = "Clone"
    CLONE_OWN = "CloneOwn"
    LIST_CONTENT = "ListContent"
    EDIT_CONTENT_OWNER = "EditContentOwner"
    
    @property
    def name_pattern(self) -> str:
        """Name pattern of the template, e.g. ``Edit_{0}``."""
        return f"{self.value}_{{0}}"
