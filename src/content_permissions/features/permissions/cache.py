"""Dynamic permission cache.

Maps (template key, content type name) to the materialized permission. The
mapping is published copy-on-write: every insert builds a new dict and swaps
it in with a single assignment, so readers never lock and never observe a
partially updated mapping. Entries are never evicted.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .entities import Permission


logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str]


class DynamicPermissionCache:
    """Process-wide cache of dynamic permissions, owned by the composition root."""
    
    def __init__(self, max_entries: Optional[int] = None):
        """
        Initialize an empty cache.
        
        Args:
            max_entries: Soft size limit; crossing it logs a warning once
        """
        self._entries: Mapping[CacheKey, Permission] = MappingProxyType({})
        # Serializes writers only; readers use whatever mapping is published
        self._write_lock = threading.Lock()
        self._max_entries = max_entries
        self._size_warning_logged = False
    
    def get(self, template_key: str, content_type: str) -> Optional[Permission]:
        """Get a cached permission, or None on a miss."""
        return self._entries.get((template_key, content_type))
    
    def publish(self, key: CacheKey, permission: Permission) -> Permission:
        """
        Publish a permission under a key.
        
        An existing entry for the key is replaced (last writer wins).
        
        Returns:
            The published permission
        """
        with self._write_lock:
            updated: Dict[CacheKey, Permission] = dict(self._entries)
            updated[key] = permission
            self._entries = MappingProxyType(updated)
            size = len(updated)
            warn = (
                self._max_entries is not None
                and size > self._max_entries
                and not self._size_warning_logged
            )
            if warn:
                self._size_warning_logged = True
        
        if warn:
            logger.warning(
                f"Dynamic permission cache holds {size} entries, above the configured "
                f"limit of {self._max_entries}; entries are never evicted"
            )
        return permission
    
    def snapshot(self) -> Mapping[CacheKey, Permission]:
        """Get the currently published mapping (read-only)."""
        return self._entries
    
    def __contains__(self, key: object) -> bool:
        return key in self._entries
    
    def __len__(self) -> int:
        return len(self._entries)
