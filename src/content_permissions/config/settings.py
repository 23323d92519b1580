"""
Settings for content-permissions.

Environment-driven configuration using Pydantic settings. Every variable is
prefixed with CONTENT_PERMISSIONS_, e.g. CONTENT_PERMISSIONS_WARM_CONTENT_TYPES.
"""
from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ContentPermissionsSettings(BaseSettings):
    """Runtime settings for the dynamic permission cache and its warm-up."""
    
    model_config = SettingsConfigDict(
        env_prefix="CONTENT_PERMISSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Soft limit: crossing it logs a warning, entries are never evicted
    cache_max_entries: Optional[int] = Field(default=None, ge=1)
    
    # Content types materialized when the module starts
    warm_content_types: Annotated[List[str], NoDecode] = Field(default_factory=list)
    
    log_cache_hits: bool = Field(default=False)
    
    @field_validator("warm_content_types", mode="before")
    @classmethod
    def split_content_types(cls, value):
        """Accept a comma separated string as well as a JSON list."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache()
def get_settings() -> ContentPermissionsSettings:
    """Get cached settings instance."""
    return ContentPermissionsSettings()
