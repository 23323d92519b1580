"""Tests for implied-by traversal."""

from content_permissions.features.permissions import (
    ContentTypeDefinition,
    Permission,
    expand_implied,
    is_granted,
)


class TestExpandImplied:
    """Test cases for expand_implied."""
    
    def test_walks_chain_depth_first(self, service, registry):
        """Test the chain is walked in implied-by order, each name once."""
        permission = service.get_dynamic_permission(registry.lookup_template("EditOwnContent"), "Page")
        
        names = [p.name for p in expand_implied(permission)]
        
        assert names[0] == "EditOwn_Page"
        assert names[1] == "Edit_Page"
        assert names[2] == "Publish_Page"
        assert len(names) == len(set(names))
        assert set(names) == {
            "EditOwn_Page", "Edit_Page", "Publish_Page", "PublishContent",
            "EditContent", "PublishOwn_Page", "PublishOwnContent", "EditOwnContent",
        }
    
    def test_single_permission(self):
        """Test a permission without parents expands to itself."""
        permission = Permission("ListContent")
        
        assert list(expand_implied(permission)) == [permission]


class TestIsGranted:
    """Test cases for is_granted."""
    
    def test_direct_grant(self, service, registry):
        """Test the required permission itself satisfies the check."""
        permission = service.get_dynamic_permission(registry.lookup_template("EditContent"), "Page")
        
        assert is_granted(permission, ["Edit_Page"])
    
    def test_granted_through_type_permission(self, service, registry):
        """Test a broader per-type permission satisfies a narrower one."""
        view_own = service.get_dynamic_permission(registry.lookup_template("ViewOwnContent"), "Page")
        
        assert is_granted(view_own, ["Edit_Page"])
        assert not is_granted(view_own, ["Edit_Article"])
    
    def test_granted_through_global(self, service, registry):
        """Test a global permission satisfies per-type permissions."""
        delete_own = service.create_dynamic_permission(
            registry.lookup_template("DeleteOwnContent"), ContentTypeDefinition("Page")
        )
        
        assert is_granted(delete_own, {"DeleteContent"})
        assert not is_granted(delete_own, {"EditContent"})
    
    def test_nothing_granted(self, service, registry):
        """Test an empty grant set never satisfies anything."""
        permission = service.get_dynamic_permission(registry.lookup_template("ListContent"), "Page")
        
        assert not is_granted(permission, [])
