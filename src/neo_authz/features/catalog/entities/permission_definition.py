"""Permission definition entity for the neo-authz catalog feature.

Represents one grantable capability as delivered by the external catalog
source, with its category, risk tagging and approval flag.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ....config.constants import (
    DEFAULT_SUBCATEGORY,
    PermissionCategory,
    RiskLevel,
)
from ....core.exceptions import InvalidPermissionRecordError
from ....core.value_objects import category_segment, is_valid_permission_code


class PermissionRecord(BaseModel):
    """Raw catalog row as returned by the catalog source."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    id: Optional[int] = None
    code: str = Field(min_length=1)
    name: str = ""
    name_ko: str = ""
    description: Optional[str] = None
    category: str = Field(min_length=1)
    subcategory: Optional[str] = None
    risk_level: RiskLevel = RiskLevel.LOW
    requires_approval: bool = False
    is_active: bool = True
    display_order: int = 0

    @field_validator("name", "name_ko", "risk_level", "requires_approval", "display_order", mode="before")
    @classmethod
    def null_display_field_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Null display metadata falls back to the field default instead of rejecting the row."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


@dataclass(frozen=True)
class PermissionDefinition:
    """Immutable catalog entry for a single permission code."""

    code: str
    category: PermissionCategory
    risk_level: RiskLevel = RiskLevel.LOW
    requires_approval: bool = False
    is_active: bool = True
    subcategory: Optional[str] = None
    id: Optional[int] = None
    name: str = ""
    name_ko: str = ""
    description: Optional[str] = None
    display_order: int = 0

    def __post_init__(self):
        """Validate code format and category consistency."""
        if not is_valid_permission_code(self.code):
            raise InvalidPermissionRecordError(
                f"Permission code must be in format 'category:action', got: {self.code!r}",
                details={"code": self.code},
            )

        if not isinstance(self.category, PermissionCategory):
            parsed = PermissionCategory.parse(self.category)
            if parsed is None:
                raise InvalidPermissionRecordError(
                    f"Unknown permission category: {self.category!r}",
                    details={"code": self.code, "category": self.category},
                )
            object.__setattr__(self, "category", parsed)

        if not isinstance(self.risk_level, RiskLevel):
            object.__setattr__(self, "risk_level", RiskLevel(self.risk_level))

        if category_segment(self.code) != self.category.value:
            raise InvalidPermissionRecordError(
                f"Permission category mismatch: code={self.code}, field={self.category.value}",
                details={"code": self.code, "category": self.category.value},
            )

    @classmethod
    def from_record(cls, record: PermissionRecord) -> "PermissionDefinition":
        """Build a definition from a validated catalog record."""
        return cls(
            code=record.code,
            category=record.category,
            risk_level=record.risk_level,
            requires_approval=record.requires_approval,
            is_active=record.is_active,
            subcategory=record.subcategory or None,
            id=record.id,
            name=record.name,
            name_ko=record.name_ko,
            description=record.description,
            display_order=record.display_order,
        )

    @property
    def effective_subcategory(self) -> str:
        """Subcategory used for grouping; missing values group under 'other'."""
        return self.subcategory or DEFAULT_SUBCATEGORY

    @property
    def is_high_risk_level(self) -> bool:
        """Whether the catalog tags this code as high or critical risk."""
        return self.risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL)

    def requires_security_check(self) -> bool:
        """Check if granting this permission deserves extra scrutiny."""
        return self.is_high_risk_level or self.requires_approval

    def matches_search(self, text: str) -> bool:
        """Case-insensitive match on code, Korean name and description."""
        needle = text.strip().lower()
        if not needle:
            return True
        return (
            needle in self.code.lower()
            or needle in self.name_ko.lower()
            or needle in (self.description or "").lower()
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the catalog record shape."""
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "name_ko": self.name_ko,
            "description": self.description,
            "category": self.category.value,
            "subcategory": self.subcategory,
            "risk_level": self.risk_level.value,
            "requires_approval": self.requires_approval,
            "is_active": self.is_active,
            "display_order": self.display_order,
        }

    def __str__(self) -> str:
        return f"PermissionDefinition({self.code})"
