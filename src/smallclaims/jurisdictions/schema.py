"""
Small Claims Jurisdiction Pack Schemas

Pydantic models for validating jurisdiction pack YAML/JSON files.

These schemas define the structure of the reference data that can be loaded
at runtime. They map to smallclaims.models.JurisdictionConfig.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models import ClaimType


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"

_ZIP_PATTERN = re.compile(r"^\d{5}$")


# =============================================================================
# Pack Schemas
# =============================================================================

class ThresholdsSchema(BaseModel):
    """Monetary limits, in dollars."""
    max_claim_amount: Decimal = Field(..., gt=0, description="Absolute claim ceiling")
    party_claim_ceiling: Decimal = Field(
        ..., gt=0, description="Above this, both parties must be individuals"
    )

    @model_validator(mode="after")
    def validate_ordering(self) -> "ThresholdsSchema":
        if self.party_claim_ceiling > self.max_claim_amount:
            raise ValueError("party_claim_ceiling cannot exceed max_claim_amount")
        return self


class LimitsSchema(BaseModel):
    """Non-monetary filing limits."""
    lookback_years: int = Field(..., ge=0, description="Maximum incident age in years")
    adult_age: int = Field(18, ge=0, description="Minimum age to file without a guardian")
    annual_claim_cap: int = Field(12, ge=1, description="Claims a filer may bring per year")
    defendant_claim_window_months: int = Field(
        12, ge=1, description="Window for one claim against the same defendant"
    )


class JurisdictionPackSchema(BaseModel):
    """Schema for a complete jurisdiction pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    id: str = Field(..., min_length=1, description="Pack identifier")
    name: str = Field(..., min_length=1, description="Jurisdiction display name")
    version: str = Field(..., min_length=1, description="Rule set revision")
    court_name: Optional[str] = None
    effective_date: Optional[date] = None
    thresholds: ThresholdsSchema
    limits: LimitsSchema
    accepted_claim_types: list[str] = Field(
        default_factory=lambda: [t.value for t in ClaimType if t is not ClaimType.OTHER],
        description="Claim types the court hears (display values or names)",
    )
    accepted_postal_codes: list[str] = Field(..., min_length=1)

    @field_validator("accepted_postal_codes", mode="before")
    @classmethod
    def coerce_postal_codes(cls, value: Any) -> Any:
        # YAML reads unquoted 98001 as an int
        if isinstance(value, list):
            return [str(v) if isinstance(v, int) else v for v in value]
        return value

    @field_validator("accepted_postal_codes")
    @classmethod
    def validate_postal_codes(cls, value: list[str]) -> list[str]:
        bad = [code for code in value if not _ZIP_PATTERN.match(code)]
        if bad:
            raise ValueError(f"Invalid postal codes: {bad}")
        return value

    @field_validator("accepted_claim_types")
    @classmethod
    def validate_claim_types(cls, value: list[str]) -> list[str]:
        resolved = []
        for raw in value:
            claim_type = ClaimType.lookup(raw)
            if claim_type is None:
                raise ValueError(f"Unknown claim type: {raw!r}")
            if claim_type is ClaimType.OTHER:
                raise ValueError("Claim type 'Other' cannot be accepted")
            resolved.append(claim_type.value)
        return resolved


def validate_jurisdiction_pack(data: dict[str, Any]) -> JurisdictionPackSchema:
    """
    Validate a jurisdiction pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return JurisdictionPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a pack's schema version is compatible.

    Only the major version has to match.
    """
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
