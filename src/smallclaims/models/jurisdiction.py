"""
Small Claims Jurisdiction Config

Reference data for one court's small-claims rule set: accepted postal
codes, monetary thresholds, the incident lookback window and the accepted
claim types. Instances are built by the jurisdiction pack loader and are
immutable for the life of the process.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from .enums import ClaimType


def _default_claim_types() -> frozenset[ClaimType]:
    return frozenset(t for t in ClaimType if t is not ClaimType.OTHER)


@dataclass(frozen=True)
class JurisdictionConfig:
    """
    Rule parameters for a single small-claims jurisdiction.

    Attributes:
        id: Pack identifier (e.g., "US-WA-KING-SMALL-CLAIMS")
        name: Display name of the jurisdiction (e.g., "King County")
        version: Revision of the rule set
        accepted_postal_codes: Filing ZIP codes inside the jurisdiction
        max_claim_amount: Absolute ceiling on the amount claimed
        party_claim_ceiling: Above this, both parties must be individuals
        lookback_years: Maximum age of the incident, in whole years
        accepted_claim_types: Claim types the court hears
        adult_age: Minimum age to file without a guardian
        annual_claim_cap: Claims a filer may bring per year
        defendant_claim_window_months: Window for one claim per defendant
    """
    id: str
    name: str
    version: str
    accepted_postal_codes: frozenset[str]
    max_claim_amount: Decimal
    party_claim_ceiling: Decimal
    lookback_years: int
    accepted_claim_types: frozenset[ClaimType] = field(default_factory=_default_claim_types)
    adult_age: int = 18
    annual_claim_cap: int = 12
    defendant_claim_window_months: int = 12
    court_name: Optional[str] = None
    effective_date: Optional[date] = None

    def __post_init__(self) -> None:
        # OTHER is never heard, whatever the pack says
        if ClaimType.OTHER in self.accepted_claim_types:
            raise ValueError("Claim type 'Other' cannot be accepted")
        if self.party_claim_ceiling > self.max_claim_amount:
            raise ValueError("party_claim_ceiling cannot exceed max_claim_amount")
        if self.lookback_years < 0:
            raise ValueError("lookback_years must be non-negative")

    def accepts_postal_code(self, zip_code: str) -> bool:
        return zip_code in self.accepted_postal_codes

    def accepts_claim_type(self, claim_type: ClaimType) -> bool:
        return claim_type in self.accepted_claim_types

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (sets as sorted lists)."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "court_name": self.court_name,
            "effective_date": self.effective_date.isoformat() if self.effective_date else None,
            "accepted_postal_codes": sorted(self.accepted_postal_codes),
            "max_claim_amount": str(self.max_claim_amount),
            "party_claim_ceiling": str(self.party_claim_ceiling),
            "lookback_years": self.lookback_years,
            "accepted_claim_types": sorted(t.value for t in self.accepted_claim_types),
            "adult_age": self.adult_age,
            "annual_claim_cap": self.annual_claim_cap,
            "defendant_claim_window_months": self.defendant_claim_window_months,
        }
