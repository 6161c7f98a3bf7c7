"""
Settings for neo-authz.

The permission tables are compiled into the package; deployments can
override them (and the catalog cache parameters) through ``AUTHZ_*``
environment variables or a ``.env`` file.
"""
import json
import logging
from functools import lru_cache
from typing import Annotated, Any, FrozenSet, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .constants import (
    CatalogCacheDefaults,
    HIDDEN_PERMISSIONS,
    HIGH_RISK_PERMISSIONS,
    UnknownRolePolicy,
)

logger = logging.getLogger(__name__)


def _parse_code_list(value: Any) -> Any:
    """Accept a JSON list or a comma separated string for code lists."""
    if not isinstance(value, str):
        return value

    text = value.strip()
    if not text:
        return frozenset()
    if text.startswith("["):
        return json.loads(text)
    return [item.strip() for item in text.split(",") if item.strip()]


class AuthzSettings(BaseSettings):
    """Runtime configuration for the authorization engine."""

    model_config = SettingsConfigDict(
        env_prefix="AUTHZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    hidden_permissions: Annotated[FrozenSet[str], NoDecode] = Field(default=HIDDEN_PERMISSIONS)
    high_risk_permissions: Annotated[FrozenSet[str], NoDecode] = Field(default=HIGH_RISK_PERMISSIONS)
    unknown_role_policy: UnknownRolePolicy = Field(default=UnknownRolePolicy.DENY)

    # Catalog cache
    catalog_cache_ttl: int = Field(default=CatalogCacheDefaults.TTL, ge=0)
    catalog_cache_key: str = Field(default=CatalogCacheDefaults.KEY, min_length=1)
    redis_url: Optional[str] = Field(default=None)

    @field_validator("hidden_permissions", "high_risk_permissions", mode="before")
    @classmethod
    def split_code_list(cls, value: Any) -> Any:
        return _parse_code_list(value)


@lru_cache()
def get_settings() -> AuthzSettings:
    """Get cached settings instance."""
    settings = AuthzSettings()
    logger.debug(
        f"Loaded authz settings: {len(settings.high_risk_permissions)} high-risk codes, "
        f"{len(settings.hidden_permissions)} hidden codes, "
        f"unknown_role_policy={settings.unknown_role_policy.value}"
    )
    return settings
