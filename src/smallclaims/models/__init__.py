"""
Small Claims Models

Domain models for the eligibility engine:

    from smallclaims.models import (
        # Enums
        ClaimType, PartyType,
        # Input
        ClaimRecord,
        # Reference data
        JurisdictionConfig,
        # Output
        Verdict,
    )
"""
from __future__ import annotations

from .enums import ClaimType, PartyType
from .claim import ZIP_CODE_LENGTH, ClaimRecord
from .jurisdiction import JurisdictionConfig
from .verdict import Verdict

__all__ = [
    "ClaimType",
    "PartyType",
    "ZIP_CODE_LENGTH",
    "ClaimRecord",
    "JurisdictionConfig",
    "Verdict",
]
