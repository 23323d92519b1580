"""Tests for the content permissions composition root."""

from content_permissions.config import ContentPermissionsSettings
from content_permissions.features.permissions import (
    CommonPermissions,
    ContentPermissionsModule,
    DefaultPermissionCatalog,
    get_template_registry,
)


class TestContentPermissionsModule:
    """Test cases for ContentPermissionsModule."""
    
    def test_wires_registry_cache_and_service(self, settings):
        """Test the module owns one registry, cache and service."""
        module = ContentPermissionsModule(settings=settings)
        
        assert module.settings is settings
        assert module.registry is get_template_registry()
        assert module.service.registry is module.registry
        assert module.service.cache is module.cache
        assert len(module.cache) == 0
    
    def test_modules_do_not_share_caches(self, settings):
        """Test each module has its own cache."""
        first = ContentPermissionsModule(settings=settings)
        second = ContentPermissionsModule(settings=settings)
        
        first.warm(["Page"])
        
        assert first.cache is not second.cache
        assert len(second.cache) == 0
    
    def test_warm_materializes_every_template(self, settings):
        """Test warming caches all fourteen permissions per type."""
        module = ContentPermissionsModule(settings=settings)
        
        warmed = module.warm(["Page", "Article"])
        
        assert len(warmed) == 28
        assert module.cache.get("EditOwn_{0}", "Article").name == "EditOwn_Article"
        assert module.cache.get("EditContent", "Page") is not None
    
    def test_warm_from_settings(self):
        """Test content types listed in settings are warmed on startup."""
        settings = ContentPermissionsSettings(_env_file=None, warm_content_types=["BlogPost"])
        
        module = ContentPermissionsModule(settings=settings)
        
        assert module.cache.get("Edit_{0}", "BlogPost") is not None
    
    def test_custom_catalog(self, settings):
        """Test a custom catalog builds a dedicated registry."""
        catalog = DefaultPermissionCatalog(CommonPermissions.all())
        
        module = ContentPermissionsModule(settings=settings, catalog=catalog)
        
        assert module.registry is not get_template_registry()
        assert len(module.registry) == 14
