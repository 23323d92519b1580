"""Permission value records for the content permissions feature.

A Permission is identified by its name. Once materialized it is immutable,
and its implied-by chain points at strictly more general permissions.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ....core.exceptions import InvalidArgumentError


def _normalize_implied(implied_by: Optional[Iterable]) -> tuple:
    """Turn any iterable into a tuple, dropping None entries."""
    if implied_by is None:
        return ()
    return tuple(entry for entry in implied_by if entry is not None)


@dataclass(frozen=True)
class Permission:
    """Immutable security permission.
    
    Equality and hashing consider name and description only, so two
    materializations of the same (template, content type) pair compare equal
    even when they are distinct instances.
    """
    
    name: str
    description: str = ""
    category: Optional[str] = field(default=None, compare=False)
    implied_by: Tuple["Permission", ...] = field(default=(), compare=False)
    
    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentError("name", "Permission name must be a non-empty string")
        object.__setattr__(self, "implied_by", _normalize_implied(self.implied_by))
    
    def __str__(self) -> str:
        return self.name
    
    def __repr__(self) -> str:
        category_info = f", category={self.category!r}" if self.category else ""
        return f"Permission({self.name!r}{category_info})"


@dataclass(frozen=True)
class PermissionTemplate:
    """Permission whose name and description contain a type placeholder.
    
    The placeholder is substituted verbatim, without str.format, so braces
    anywhere else in a pattern are left untouched.
    """
    
    PLACEHOLDER = "{0}"
    
    name_pattern: str
    description_pattern: str = ""
    implied_by: Tuple["PermissionTemplate", ...] = ()
    
    def __post_init__(self):
        if not self.name_pattern:
            raise InvalidArgumentError("name_pattern", "Template name pattern must be a non-empty string")
        object.__setattr__(self, "implied_by", _normalize_implied(self.implied_by))
    
    @property
    def key(self) -> str:
        """Cache key component identifying this template."""
        return self.name_pattern
    
    @property
    def is_fixed(self) -> bool:
        """True when neither pattern contains the placeholder."""
        return (
            self.PLACEHOLDER not in self.name_pattern
            and self.PLACEHOLDER not in self.description_pattern
        )
    
    def substitute_name(self, value: str) -> str:
        """Substitute a content type name into the name pattern."""
        return self.name_pattern.replace(self.PLACEHOLDER, value)
    
    def substitute_description(self, value: str) -> str:
        """Substitute a content type label into the description pattern."""
        return self.description_pattern.replace(self.PLACEHOLDER, value)
    
    @classmethod
    def fixed(cls, permission: Permission) -> "PermissionTemplate":
        """Wrap a global permission as a template that ignores the type.
        
        Its implied-by chain is wrapped the same way, so materializing it
        reproduces the global permission and everything it implies.
        """
        return cls(
            name_pattern=permission.name,
            description_pattern=permission.description,
            implied_by=tuple(cls.fixed(parent) for parent in permission.implied_by),
        )
    
    def __str__(self) -> str:
        return self.name_pattern
