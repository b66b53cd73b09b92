"""
Small Claims Claim Record

The validated, immutable set of answers describing one filer's dispute.

A ClaimRecord is normally produced by smallclaims.intake.decode_claim_record
from a loosely-typed payload. Direct construction runs the same structural
checks in __post_init__, so an invalid record can never reach the evaluator.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from .enums import ClaimType, PartyType


ZIP_CODE_LENGTH = 5

BOOLEAN_ANSWERS = (
    "has_guardian",
    "settlement_attempted",
    "can_pay_filing_fee",
    "self_represented",
    "has_defendant_contact_info",
    "defendant_not_in_bankruptcy",
    "is_first_claim_against_defendant",
    "has_fewer_than_annual_claim_cap",
    "understands_mandatory_court_attendance",
)


@dataclass(frozen=True)
class ClaimRecord:
    """
    One filer's answers, ready for eligibility evaluation.

    Attributes:
        filer_age: Age of the person filing, in whole years
        has_guardian: Guardian appointed (only consulted for minors)
        claim_amount: Amount claimed, in dollars
        claim_type: Nature of the dispute
        defendant_type: Individual or company being sued
        plaintiff_type: Individual or company filing
        filing_zip_code: Five-character postal code of the filing location
        incident_date: When the underlying incident happened (optional)
        settlement_attempted: Parties tried to resolve it before filing
        can_pay_filing_fee: Filer can pay the court's filing fee
        self_represented: Filer will appear without an attorney
        has_defendant_contact_info: Filer has the defendant's name and address
        defendant_not_in_bankruptcy: Defendant is not in bankruptcy
        is_first_claim_against_defendant: No claim against this defendant recently
        has_fewer_than_annual_claim_cap: Filer is under the yearly claim cap
        understands_mandatory_court_attendance: Filer knows attendance is required
    """
    filer_age: int
    has_guardian: bool
    claim_amount: Decimal
    claim_type: ClaimType
    defendant_type: PartyType
    plaintiff_type: PartyType
    filing_zip_code: str
    settlement_attempted: bool
    can_pay_filing_fee: bool
    self_represented: bool
    has_defendant_contact_info: bool
    defendant_not_in_bankruptcy: bool
    is_first_claim_against_defendant: bool
    has_fewer_than_annual_claim_cap: bool
    understands_mandatory_court_attendance: bool
    incident_date: Optional[date] = None

    def __post_init__(self) -> None:
        if isinstance(self.filer_age, bool) or not isinstance(self.filer_age, int):
            raise ValueError("filer_age must be an integer")
        if self.filer_age < 0:
            raise ValueError("filer_age must be non-negative")
        if not isinstance(self.claim_amount, Decimal):
            raise ValueError("claim_amount must be a Decimal")
        if self.claim_amount < 0:
            raise ValueError("claim_amount must be non-negative")
        if not isinstance(self.claim_type, ClaimType):
            raise ValueError(f"Unknown claim type: {self.claim_type!r}")
        if not isinstance(self.defendant_type, PartyType):
            raise ValueError(f"Unknown defendant type: {self.defendant_type!r}")
        if not isinstance(self.plaintiff_type, PartyType):
            raise ValueError(f"Unknown plaintiff type: {self.plaintiff_type!r}")
        if not isinstance(self.filing_zip_code, str) or len(self.filing_zip_code) != ZIP_CODE_LENGTH:
            raise ValueError(
                f"filing_zip_code must be exactly {ZIP_CODE_LENGTH} characters"
            )
        if self.incident_date is not None and not isinstance(self.incident_date, date):
            raise ValueError("incident_date must be a date")
        for name in BOOLEAN_ANSWERS:
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "filer_age": self.filer_age,
            "has_guardian": self.has_guardian,
            "claim_amount": str(self.claim_amount),
            "claim_type": self.claim_type.value,
            "defendant_type": self.defendant_type.value,
            "plaintiff_type": self.plaintiff_type.value,
            "filing_zip_code": self.filing_zip_code,
            "incident_date": self.incident_date.isoformat() if self.incident_date else None,
            "settlement_attempted": self.settlement_attempted,
            "can_pay_filing_fee": self.can_pay_filing_fee,
            "self_represented": self.self_represented,
            "has_defendant_contact_info": self.has_defendant_contact_info,
            "defendant_not_in_bankruptcy": self.defendant_not_in_bankruptcy,
            "is_first_claim_against_defendant": self.is_first_claim_against_defendant,
            "has_fewer_than_annual_claim_cap": self.has_fewer_than_annual_claim_cap,
            "understands_mandatory_court_attendance": self.understands_mandatory_court_attendance,
        }
