"""
Small Claims Eligibility Rules

The jurisdiction's rule set as an explicit, ordered table.

Each rule is a standalone check function taking the claim record, the
jurisdiction config and the evaluation date. A check returns the
user-facing message when the rule fails and None when it passes. Message
wording is shown verbatim to filers.

Rule order (stable, part of the output contract):
    1.  age_guardianship
    2.  max_claim_amount
    3.  defendant_party_ceiling
    4.  plaintiff_party_ceiling
    5.  jurisdiction_residency
    6.  claim_type_acceptance
    7.  self_representation
    8.  incident_lookback
    9.  settlement_attempt
    10. defendant_contact_info
    11. defendant_bankruptcy
    12. one_claim_per_defendant
    13. filing_fee
    14. annual_claim_cap
    15. court_attendance
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from ..models import ClaimRecord, JurisdictionConfig, PartyType
from .dates import format_long_date, lookback_cutoff


RuleCheck = Callable[[ClaimRecord, JurisdictionConfig, date], Optional[str]]


@dataclass(frozen=True)
class EligibilityRule:
    """
    One entry of the rule table.

    Attributes:
        id: Stable machine identifier, reported in Verdict.failed_rules
        name: Short human-readable name
        check: Returns the failure message, or None if the rule passes
    """
    id: str
    name: str
    check: RuleCheck

    def apply(
        self, record: ClaimRecord, config: JurisdictionConfig, today: date
    ) -> Optional[str]:
        return self.check(record, config, today)


def format_amount(amount: Decimal) -> str:
    """Whole dollars without decimals ("5000"), otherwise two places."""
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount:.2f}"


# =============================================================================
# Filer and Amount Rules
# =============================================================================

def check_age_guardianship(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    # has_guardian is ignored for adults
    if record.filer_age < config.adult_age and not record.has_guardian:
        return (
            f"The claimant must be at least {config.adult_age} years old "
            f"or have a guardian appointed to file a claim."
        )
    return None


def check_max_claim_amount(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if record.claim_amount > config.max_claim_amount:
        return "The claim amount exceeds the maximum limit for small claims."
    return None


def check_defendant_party_ceiling(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if (
        record.claim_amount > config.party_claim_ceiling
        and record.defendant_type is not PartyType.INDIVIDUAL
    ):
        return (
            f"Claims over ${format_amount(config.party_claim_ceiling)} "
            f"can only be filed against individuals."
        )
    return None


def check_plaintiff_party_ceiling(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if (
        record.claim_amount > config.party_claim_ceiling
        and record.plaintiff_type is not PartyType.INDIVIDUAL
    ):
        return (
            f"Claims over ${format_amount(config.party_claim_ceiling)} "
            f"can only be filed by individuals."
        )
    return None


# =============================================================================
# Court and Claim Rules
# =============================================================================

def check_jurisdiction_residency(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not config.accepts_postal_code(record.filing_zip_code):
        return f"The claimant must reside in {config.name} to file a claim."
    return None


def check_claim_type_acceptance(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not config.accepts_claim_type(record.claim_type):
        return "Not in the list of accepted claim types."
    return None


def check_self_representation(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.self_represented:
        return "The claimant must represent themselves in small claims court."
    return None


def check_incident_lookback(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    """Skipped when no incident date was given."""
    if record.incident_date is None:
        return None
    if record.incident_date < lookback_cutoff(today, config.lookback_years):
        return (
            f"The incident date of {format_long_date(record.incident_date)} "
            f"is more than {config.lookback_years} years old to the date."
        )
    return None


# =============================================================================
# Filing Condition Rules
# =============================================================================

def check_settlement_attempt(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.settlement_attempted:
        return "Parties must attempt to resolve the dispute before filing."
    return None


def check_defendant_contact_info(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.has_defendant_contact_info:
        return (
            "The claimant must have the defendant's legal name "
            "and valid residential address."
        )
    return None


def check_defendant_bankruptcy(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.defendant_not_in_bankruptcy:
        return (
            "The claimant cannot file a claim if the defendant "
            "is currently in bankruptcy."
        )
    return None


def check_one_claim_per_defendant(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.is_first_claim_against_defendant:
        return (
            f"The claimant can only file one claim against the same defendant "
            f"in a {config.defendant_claim_window_months} month period."
        )
    return None


def check_filing_fee(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.can_pay_filing_fee:
        return "The claimant must be able to pay the court filing fees."
    return None


def check_annual_claim_cap(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    # True means the filer is under the cap
    if not record.has_fewer_than_annual_claim_cap:
        return (
            f"The claimant cannot have filed more than "
            f"{config.annual_claim_cap} claims in the past year."
        )
    return None


def check_court_attendance(
    record: ClaimRecord, config: JurisdictionConfig, today: date
) -> Optional[str]:
    if not record.understands_mandatory_court_attendance:
        return (
            "The claimant must understand that they are required "
            "to attend the court hearing."
        )
    return None


# =============================================================================
# Rule Table
# =============================================================================

RULES: tuple[EligibilityRule, ...] = (
    EligibilityRule("age_guardianship", "Age or guardianship", check_age_guardianship),
    EligibilityRule("max_claim_amount", "Maximum claim amount", check_max_claim_amount),
    EligibilityRule(
        "defendant_party_ceiling", "Defendant party ceiling", check_defendant_party_ceiling
    ),
    EligibilityRule(
        "plaintiff_party_ceiling", "Plaintiff party ceiling", check_plaintiff_party_ceiling
    ),
    EligibilityRule(
        "jurisdiction_residency", "Jurisdiction residency", check_jurisdiction_residency
    ),
    EligibilityRule(
        "claim_type_acceptance", "Claim type acceptance", check_claim_type_acceptance
    ),
    EligibilityRule("self_representation", "Self-representation", check_self_representation),
    EligibilityRule("incident_lookback", "Incident lookback window", check_incident_lookback),
    EligibilityRule("settlement_attempt", "Prior settlement attempt", check_settlement_attempt),
    EligibilityRule(
        "defendant_contact_info", "Defendant contact information", check_defendant_contact_info
    ),
    EligibilityRule(
        "defendant_bankruptcy", "Defendant bankruptcy status", check_defendant_bankruptcy
    ),
    EligibilityRule(
        "one_claim_per_defendant", "One claim per defendant", check_one_claim_per_defendant
    ),
    EligibilityRule("filing_fee", "Ability to pay filing fee", check_filing_fee),
    EligibilityRule("annual_claim_cap", "Annual claim cap", check_annual_claim_cap),
    EligibilityRule(
        "court_attendance", "Understanding of mandatory attendance", check_court_attendance
    ),
)

RULES_BY_ID: dict[str, EligibilityRule] = {rule.id: rule for rule in RULES}
