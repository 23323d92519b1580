"""Registry of content permission templates.

Templates are built once from an adjacency table of template identifiers and
the global permission catalog, and are read-only afterwards. Looking up a
name that is not a recognized global content permission returns None; that
is how callers decide whether a permission is dynamic-capable.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from ...core.exceptions import ConfigurationError, TemplateNotFoundError
from .catalog import DefaultPermissionCatalog
from .entities import (
    ContentPermissionTemplate,
    Permission,
    PermissionCatalog,
    PermissionTemplate,
)


logger = logging.getLogger(__name__)

T = ContentPermissionTemplate

# Template -> what it implies: other templates, or global permission names
ImpliedEntry = Union[ContentPermissionTemplate, str]

TEMPLATE_IMPLICATIONS: Mapping[ContentPermissionTemplate, Tuple[ImpliedEntry, ...]] = {
    T.PUBLISH: ("PublishContent",),
    T.PUBLISH_OWN: (T.PUBLISH, "PublishOwnContent"),
    T.EDIT: (T.PUBLISH, "EditContent"),
    T.EDIT_OWN: (T.EDIT, T.PUBLISH_OWN, "EditOwnContent"),
    T.DELETE: ("DeleteContent",),
    T.DELETE_OWN: (T.DELETE, "DeleteOwnContent"),
    T.VIEW: (T.EDIT, "ViewContent"),
    T.VIEW_OWN: (T.VIEW, "ViewOwnContent"),
    T.PREVIEW: (T.EDIT, "PreviewContent"),
    T.PREVIEW_OWN: (T.PREVIEW, "PreviewOwnContent"),
    T.CLONE: (T.EDIT, "CloneContent"),
    T.CLONE_OWN: (T.CLONE, "CloneOwnContent"),
    T.LIST_CONTENT: ("ListContent",),
    T.EDIT_CONTENT_OWNER: ("EditContentOwner",),
}

# Template -> the global permission it is registered under
CANONICAL_PERMISSIONS: Mapping[ContentPermissionTemplate, str] = {
    T.PUBLISH: "PublishContent",
    T.PUBLISH_OWN: "PublishOwnContent",
    T.EDIT: "EditContent",
    T.EDIT_OWN: "EditOwnContent",
    T.DELETE: "DeleteContent",
    T.DELETE_OWN: "DeleteOwnContent",
    T.VIEW: "ViewContent",
    T.VIEW_OWN: "ViewOwnContent",
    T.PREVIEW: "PreviewContent",
    T.PREVIEW_OWN: "PreviewOwnContent",
    T.CLONE: "CloneContent",
    T.CLONE_OWN: "CloneOwnContent",
    T.LIST_CONTENT: "ListContent",
    T.EDIT_CONTENT_OWNER: "EditContentOwner",
}

DESCRIPTION_PATTERNS: Mapping[ContentPermissionTemplate, str] = {
    T.PUBLISH: "Publish or unpublish {0} for others",
    T.PUBLISH_OWN: "Publish or unpublish {0}",
    T.EDIT: "Edit {0} for others",
    T.EDIT_OWN: "Edit {0}",
    T.DELETE: "Delete {0} for others",
    T.DELETE_OWN: "Delete {0}",
    T.VIEW: "View {0} by others",
    T.VIEW_OWN: "View own {0}",
    T.PREVIEW: "Preview {0} by others",
    T.PREVIEW_OWN: "Preview own {0}",
    T.CLONE: "Clone {0} by others",
    T.CLONE_OWN: "Clone own {0}",
    T.LIST_CONTENT: "List {0} content items",
    T.EDIT_CONTENT_OWNER: "Edit the owner of a {0} content item",
}


class PermissionTemplateRegistry:
    """Read-only mapping from global permission names to templates."""
    
    def __init__(self, catalog: Optional[PermissionCatalog] = None):
        self._catalog = catalog or DefaultPermissionCatalog()
        self._by_id: Dict[ContentPermissionTemplate, PermissionTemplate] = {}
        for template_id in ContentPermissionTemplate:
            self._build(template_id)
        
        self._by_name: Dict[str, PermissionTemplate] = {
            CANONICAL_PERMISSIONS[template_id]: template
            for template_id, template in self._by_id.items()
        }
        logger.debug(f"Built permission template registry with {len(self._by_name)} templates")
    
    def _global(self, name: str) -> Permission:
        permission = self._catalog.get_permission(name)
        if permission is None:
            raise ConfigurationError(
                f"Global permission '{name}' is missing from the permission catalog",
                details={"permission": name},
            )
        return permission
    
    def _build(self, template_id: ContentPermissionTemplate) -> PermissionTemplate:
        # The adjacency table is acyclic, so plain recursion terminates
        if template_id in self._by_id:
            return self._by_id[template_id]
        
        implied = []
        for entry in TEMPLATE_IMPLICATIONS[template_id]:
            if isinstance(entry, ContentPermissionTemplate):
                implied.append(self._build(entry))
            else:
                implied.append(PermissionTemplate.fixed(self._global(entry)))
        
        template = PermissionTemplate(
            name_pattern=template_id.name_pattern,
            description_pattern=DESCRIPTION_PATTERNS[template_id],
            implied_by=tuple(implied),
        )
        self._by_id[template_id] = template
        return template
    
    def lookup_template(self, name: Optional[str]) -> Optional[PermissionTemplate]:
        """Get the template registered under a global permission name.
        
        Returns None for unknown names; absence is an expected outcome.
        """
        if name is None:
            return None
        return self._by_name.get(name)
    
    def template_for_permission(self, permission: Optional[Permission]) -> Optional[PermissionTemplate]:
        """Get the template for a global permission, keyed by its name."""
        if permission is None:
            return None
        return self.lookup_template(permission.name)
    
    def get_template(self, template_id: ContentPermissionTemplate) -> PermissionTemplate:
        """Get a template by identifier.
        
        Raises:
            TemplateNotFoundError: If the identifier is not a template family
        """
        try:
            return self._by_id[ContentPermissionTemplate(template_id)]
        except (KeyError, ValueError):
            raise TemplateNotFoundError(
                f"No permission template for '{template_id}'",
                details={"template": str(template_id)},
            ) from None
    
    def is_dynamic(self, permission: Optional[Permission]) -> bool:
        """Check whether a global permission has a per content type template."""
        return self.template_for_permission(permission) is not None
    
    def names(self) -> Tuple[str, ...]:
        """Global permission names that have a template."""
        return tuple(self._by_name)
    
    def templates(self) -> Tuple[PermissionTemplate, ...]:
        """All templates in template family order."""
        return tuple(self._by_id[template_id] for template_id in ContentPermissionTemplate)
    
    def __contains__(self, name: object) -> bool:
        return name in self._by_name
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)
    
    def __len__(self) -> int:
        return len(self._by_name)


@lru_cache()
def get_template_registry() -> PermissionTemplateRegistry:
    """Get the registry built from the default global permission catalog."""
    return PermissionTemplateRegistry()
