"""Content type definition as seen by the permission generator."""

from dataclasses import dataclass
from typing import Optional

from ....core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ContentTypeDefinition:
    """Name and display name of a content type.
    
    The name is the stable identifier substituted into permission names and
    used as cache key; the display name only feeds human-facing text.
    """
    
    name: str
    display_name: Optional[str] = None
    securable: bool = True
    
    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentError("name", "Content type name must be a non-empty string")
        if not self.display_name:
            object.__setattr__(self, "display_name", self.name)
    
    @property
    def permission_category(self) -> str:
        """Category label given to permissions generated for this type."""
        return f"{self.display_name} Content Type - {self.name}"
