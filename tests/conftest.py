"""
Pytest configuration and fixtures for smallclaims tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from datetime import date, timedelta
from decimal import Decimal

from smallclaims.jurisdictions import load_default_jurisdiction
from smallclaims.models import (
    ClaimRecord,
    ClaimType,
    JurisdictionConfig,
    PartyType,
)


# Fixed evaluation date so lookback tests do not depend on the clock
REFERENCE_TODAY = date(2024, 6, 15)

ACCEPTED_ZIP = "98101"
OUTSIDE_ZIP = "90210"


# =============================================================================
# Factory Helpers
# =============================================================================

def make_jurisdiction(**overrides) -> JurisdictionConfig:
    """Create a JurisdictionConfig with the reference thresholds."""
    defaults = dict(
        id="TEST-SMALL-CLAIMS",
        name="King County",
        version="test",
        accepted_postal_codes=frozenset({"98101", "98004", "98052"}),
        max_claim_amount=Decimal("10000"),
        party_claim_ceiling=Decimal("5000"),
        lookback_years=6,
    )
    defaults.update(overrides)
    return JurisdictionConfig(**defaults)


def make_claim_record(**overrides) -> ClaimRecord:
    """Create a ClaimRecord that passes every rule unless overridden."""
    defaults = dict(
        filer_age=25,
        has_guardian=False,
        claim_amount=Decimal("20.00"),
        claim_type=ClaimType.RENT,
        defendant_type=PartyType.INDIVIDUAL,
        plaintiff_type=PartyType.INDIVIDUAL,
        filing_zip_code=ACCEPTED_ZIP,
        incident_date=REFERENCE_TODAY - timedelta(days=1),
        settlement_attempted=True,
        can_pay_filing_fee=True,
        self_represented=True,
        has_defendant_contact_info=True,
        defendant_not_in_bankruptcy=True,
        is_first_claim_against_defendant=True,
        has_fewer_than_annual_claim_cap=True,
        understands_mandatory_court_attendance=True,
    )
    defaults.update(overrides)
    return ClaimRecord(**defaults)


def make_payload(**overrides) -> dict:
    """Create a raw snake_case submission for an eligible claim."""
    payload = {
        "filer_age": 25,
        "has_guardian": False,
        "claim_amount": "20.00",
        "claim_type": "Rent",
        "defendant_type": "individual",
        "plaintiff_type": "individual",
        "filing_zip_code": ACCEPTED_ZIP,
        "incident_date": (REFERENCE_TODAY - timedelta(days=1)).isoformat(),
        "settlement_attempted": True,
        "can_pay_filing_fee": True,
        "self_represented": True,
        "has_defendant_contact_info": True,
        "defendant_not_in_bankruptcy": True,
        "is_first_claim_against_defendant": True,
        "has_fewer_than_annual_claim_cap": True,
        "understands_mandatory_court_attendance": True,
    }
    payload.update(overrides)
    return payload


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def jurisdiction() -> JurisdictionConfig:
    return make_jurisdiction()


@pytest.fixture
def king_county() -> JurisdictionConfig:
    return load_default_jurisdiction()


@pytest.fixture
def eligible_record() -> ClaimRecord:
    return make_claim_record()
