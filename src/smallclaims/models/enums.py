"""
Small Claims Enumerations

Values are the display strings used by the intake form, so a payload can
carry them through unchanged.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ClaimType(str, Enum):
    """Nature of the dispute as selected by the filer."""
    PROPERTY_DAMAGE = "Property Damage"
    PERSONAL_INJURY = "Personal Injury"
    BREACH_OF_CONTRACT = "Breach of Contract"
    LEASE_AGREEMENT = "Lease Agreement"
    WAGES = "Wages"
    LOAN = "Loan"
    RENT = "Rent"
    GOODS_AND_SERVICES = "Goods and Services"
    AUTOMOBILE_ACCIDENT = "Automobile Accident"
    DAMAGE_DEPOSIT = "Damage Deposit"
    OPEN_ACCOUNT = "Open Account"
    SERVICE_RENDERED = "Service Rendered"
    WRITTEN_INSTRUMENT = "Written Instrument"
    OTHER = "Other"

    @classmethod
    def lookup(cls, raw: str) -> Optional[ClaimType]:
        """
        Resolve a claim type from its display value or member name.

        Accepts "Breach of Contract", "BREACH_OF_CONTRACT" and
        "BreachOfContract". Returns None when nothing matches.
        """
        text = raw.strip()
        for member in cls:
            if text == member.value:
                return member
        squashed = text.replace("_", "").replace(" ", "").lower()
        for member in cls:
            if squashed == member.name.replace("_", "").lower():
                return member
        return None


class PartyType(str, Enum):
    """Whether a plaintiff or defendant is a person or an organisation."""
    INDIVIDUAL = "individual"
    COMPANY = "company"
