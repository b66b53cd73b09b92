"""
Small Claims Intake Schema

Pydantic model for validating a filer's raw answers before they become a
ClaimRecord.

Field names are accepted in snake_case and in the camelCase used by the
browser form (filerAge, filingZipCode, ...). Unknown keys such as the
form's demographic questions are ignored. Every field except the incident
date is required: a missing answer is a validation error, never a silent
False.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from ..models import ZIP_CODE_LENGTH, ClaimRecord, ClaimType, PartyType


def _aliases(snake: str, camel: str) -> AliasChoices:
    return AliasChoices(snake, camel)


class ClaimRecordSchema(BaseModel):
    """Schema for one submitted eligibility questionnaire."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    filer_age: int = Field(..., ge=0, validation_alias=_aliases("filer_age", "filerAge"))
    has_guardian: bool = Field(..., validation_alias=_aliases("has_guardian", "hasGuardian"))
    claim_amount: Decimal = Field(
        ...,
        ge=0,
        decimal_places=2,
        validation_alias=_aliases("claim_amount", "claimAmount"),
        description="Amount claimed in dollars",
    )
    claim_type: ClaimType = Field(..., validation_alias=_aliases("claim_type", "claimType"))
    defendant_type: PartyType = Field(
        ..., validation_alias=_aliases("defendant_type", "defendantType")
    )
    plaintiff_type: PartyType = Field(
        ..., validation_alias=_aliases("plaintiff_type", "plaintiffType")
    )
    filing_zip_code: str = Field(
        ...,
        min_length=ZIP_CODE_LENGTH,
        max_length=ZIP_CODE_LENGTH,
        validation_alias=_aliases("filing_zip_code", "filingZipCode"),
    )
    incident_date: Optional[date] = Field(
        None, validation_alias=_aliases("incident_date", "incidentDate")
    )
    settlement_attempted: bool = Field(
        ..., validation_alias=_aliases("settlement_attempted", "settlementAttempted")
    )
    can_pay_filing_fee: bool = Field(
        ..., validation_alias=_aliases("can_pay_filing_fee", "canPayFilingFee")
    )
    self_represented: bool = Field(
        ..., validation_alias=_aliases("self_represented", "selfRepresented")
    )
    has_defendant_contact_info: bool = Field(
        ..., validation_alias=_aliases("has_defendant_contact_info", "hasDefendantContactInfo")
    )
    defendant_not_in_bankruptcy: bool = Field(
        ..., validation_alias=_aliases("defendant_not_in_bankruptcy", "defendantNotInBankruptcy")
    )
    is_first_claim_against_defendant: bool = Field(
        ...,
        validation_alias=_aliases(
            "is_first_claim_against_defendant", "isFirstClaimAgainstDefendant"
        ),
    )
    has_fewer_than_annual_claim_cap: bool = Field(
        ...,
        validation_alias=_aliases(
            "has_fewer_than_annual_claim_cap", "hasFewerThanAnnualClaimCap"
        ),
    )
    understands_mandatory_court_attendance: bool = Field(
        ...,
        validation_alias=_aliases(
            "understands_mandatory_court_attendance", "understandsMandatoryCourtAttendance"
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def convert_cents(cls, data: Any) -> Any:
        """Accept claimAmountCents in place of a dollar amount."""
        if not isinstance(data, dict):
            return data
        if "claim_amount" in data or "claimAmount" in data:
            return data
        for key in ("claim_amount_cents", "claimAmountCents"):
            if key not in data:
                continue
            cents = data[key]
            if isinstance(cents, bool) or not isinstance(cents, int):
                raise ValueError(f"{key} must be an integer number of cents")
            return {**data, "claim_amount": Decimal(cents) / 100}
        return data

    @field_validator("filer_age", mode="before")
    @classmethod
    def reject_boolean_age(cls, value: Any) -> Any:
        # bool is an int subclass; lax mode would read true as age 1
        if isinstance(value, bool):
            raise ValueError("filer_age must be a whole number of years")
        return value

    @field_validator("claim_type", mode="before")
    @classmethod
    def resolve_claim_type(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ClaimType):
            claim_type = ClaimType.lookup(value)
            if claim_type is None:
                raise ValueError(f"Unknown claim type: {value!r}")
            return claim_type
        return value

    @field_validator("defendant_type", "plaintiff_type", mode="before")
    @classmethod
    def normalize_party_type(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, PartyType):
            return value.strip().lower()
        return value

    @field_validator("filing_zip_code", mode="before")
    @classmethod
    def normalize_zip_code(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("incident_date", mode="before")
    @classmethod
    def parse_incident_date(cls, value: Any) -> Any:
        """
        Accept an ISO-8601 date or datetime string.

        Browsers serialize Date objects as "2024-05-01T07:00:00.000Z"; the
        calendar date part is what the filer picked.
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValueError("incident_date must be an ISO-8601 date string")
        text = value.strip()
        try:
            if "T" in text:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            return date.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Invalid ISO-8601 date {value!r}: {e}") from e

    def to_record(self) -> ClaimRecord:
        """Convert to the immutable domain model."""
        return ClaimRecord(**self.model_dump())
