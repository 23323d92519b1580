"""Composition root for the content permissions feature.

The host application creates one module at startup and hands its service to
consumers; the dynamic permission cache lives as long as the module.
"""

import logging
from typing import Iterable, List, Optional

from ...config import ContentPermissionsSettings, get_settings
from .cache import DynamicPermissionCache
from .entities import Permission, PermissionCatalog
from .registry import PermissionTemplateRegistry, get_template_registry
from .services import DynamicPermissionService


logger = logging.getLogger(__name__)


class ContentPermissionsModule:
    """Owns the template registry, the dynamic permission cache and the service."""
    
    def __init__(
        self,
        settings: Optional[ContentPermissionsSettings] = None,
        catalog: Optional[PermissionCatalog] = None
    ):
        """Initialize module with configuration.
        
        Args:
            settings: Settings, read from the environment when omitted
            catalog: Global permission catalog; the built-in one when omitted
        """
        self._settings = settings or get_settings()
        self._registry = PermissionTemplateRegistry(catalog) if catalog is not None else get_template_registry()
        self._cache = DynamicPermissionCache(max_entries=self._settings.cache_max_entries)
        self._service = DynamicPermissionService(
            self._registry,
            self._cache,
            log_cache_hits=self._settings.log_cache_hits,
        )
        
        if self._settings.warm_content_types:
            self.warm(self._settings.warm_content_types)
    
    @property
    def settings(self) -> ContentPermissionsSettings:
        return self._settings
    
    @property
    def registry(self) -> PermissionTemplateRegistry:
        return self._registry
    
    @property
    def cache(self) -> DynamicPermissionCache:
        return self._cache
    
    @property
    def service(self) -> DynamicPermissionService:
        return self._service
    
    def warm(self, content_types: Iterable[str]) -> List[Permission]:
        """Materialize every template for the given content types."""
        warmed = [
            self._service.get_dynamic_permission(template, content_type)
            for content_type in content_types
            for template in self._registry.templates()
        ]
        logger.info(f"Warmed dynamic permission cache with {len(warmed)} permissions ({len(self._cache)} entries)")
        return warmed
