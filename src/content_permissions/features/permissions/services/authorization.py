"""Implied-by traversal used by authorization checks.

A permission is granted when it, or any permission that implies it, has been
granted. Chains are acyclic, but shared ancestors are visited once.
"""

from typing import Iterable, Iterator, Set

from ..entities import Permission


def expand_implied(permission: Permission) -> Iterator[Permission]:
    """Yield a permission and everything that implies it, each name once.
    
    Traversal is depth-first in implied-by order.
    """
    seen: Set[str] = set()
    stack = [permission]
    while stack:
        current = stack.pop()
        if current.name in seen:
            continue
        seen.add(current.name)
        yield current
        stack.extend(reversed(current.implied_by))


def is_granted(required: Permission, granted_names: Iterable[str]) -> bool:
    """Check if the granted permission names satisfy a required permission."""
    granted = set(granted_names)
    if not granted:
        return False
    return any(candidate.name in granted for candidate in expand_implied(required))
