"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Any, Optional


class VerdictResponse(BaseModel):
    """Outcome of an eligibility check. Ineligible is still a 200."""
    eligible: bool
    reasons: list[str]
    failed_rules: list[str]
    jurisdiction_id: str
    jurisdiction_version: str
    evaluated_on: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "eligible": False,
                    "reasons": [
                        "The claimant must reside in King County to file a claim.",
                        "Parties must attempt to resolve the dispute before filing.",
                    ],
                    "failed_rules": ["jurisdiction_residency", "settlement_attempt"],
                    "jurisdiction_id": "US-WA-KING-SMALL-CLAIMS",
                    "jurisdiction_version": "2024.1",
                    "evaluated_on": "2024-06-01",
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Submission could not be read."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class JurisdictionResponse(BaseModel):
    """Summary of the loaded jurisdiction pack."""
    id: str
    name: str
    version: str
    court_name: Optional[str] = None
    effective_date: Optional[str] = None
    pack_hash: str
    max_claim_amount: str
    party_claim_ceiling: str
    lookback_years: int
    adult_age: int
    annual_claim_cap: int
    accepted_claim_types: list[str]
    postal_code_count: int


class PostalCodeResponse(BaseModel):
    """Whether a filing ZIP code lies inside the jurisdiction."""
    zip_code: str
    accepted: bool
    jurisdiction_id: str
