"""Pytest configuration and fixtures for content-permissions tests."""

import pytest

from content_permissions.config import ContentPermissionsSettings
from content_permissions.features.permissions import (
    ContentTypeDefinition,
    DynamicPermissionCache,
    DynamicPermissionService,
    PermissionTemplateRegistry,
)


@pytest.fixture
def registry():
    """Template registry built from the default global catalog."""
    return PermissionTemplateRegistry()


@pytest.fixture
def cache():
    """Empty dynamic permission cache."""
    return DynamicPermissionCache()


@pytest.fixture
def service(registry, cache):
    """Dynamic permission service over a fresh cache."""
    return DynamicPermissionService(registry, cache)


@pytest.fixture
def blog_post():
    """Sample content type definition."""
    return ContentTypeDefinition(name="BlogPost", display_name="Blog Post")


@pytest.fixture
def settings():
    """Settings with no warm-up and no size limit."""
    return ContentPermissionsSettings(_env_file=None)
