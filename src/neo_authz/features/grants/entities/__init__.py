"""Grant entities."""

from .grant_set import (
    BasicGrantSet,
    GranularGrantSet,
    GrantSet,
    parse_grant_set,
)
from .principal import Principal

__all__ = [
    "BasicGrantSet",
    "GranularGrantSet",
    "GrantSet",
    "parse_grant_set",
    "Principal",
]
