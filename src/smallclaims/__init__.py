"""
smallclaims - Small Claims Court Eligibility Engine

Decides whether a filer's dispute can be brought in small claims court
under one jurisdiction's rule set and, if not, lists every reason why.

Core Principle: "Ineligible is an answer, not an error."

Key Features:
- Immutable, validated claim records decoded from JSON submissions
- Ordered rule table evaluated without short-circuiting
- Jurisdiction reference data loaded from versioned YAML packs
- Distinct failure for unreadable submissions (MalformedInputError)

Quick Start:
    from smallclaims import check_eligibility, load_default_jurisdiction

    config = load_default_jurisdiction()
    verdict = check_eligibility(payload_json, config)
    if not verdict.eligible:
        print("\\n".join(verdict.reasons))

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models
# =============================================================================
from .models import (
    ClaimRecord,
    ClaimType,
    JurisdictionConfig,
    PartyType,
    Verdict,
)

# =============================================================================
# Intake, Jurisdictions, Engine
# =============================================================================
from .intake import decode_claim_record
from .jurisdictions import JurisdictionPackLoader, load_default_jurisdiction
from .engine import RULES, EligibilityEvaluator, check_eligibility, evaluate
from .canon import compute_jurisdiction_hash

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    JurisdictionLoadError,
    JurisdictionValidationError,
    JurisdictionVersionMismatch,
    MalformedInputError,
    SmallClaimsError,
)

__all__ = [
    "__version__",
    # Models
    "ClaimRecord",
    "ClaimType",
    "JurisdictionConfig",
    "PartyType",
    "Verdict",
    # Operations
    "decode_claim_record",
    "JurisdictionPackLoader",
    "load_default_jurisdiction",
    "RULES",
    "EligibilityEvaluator",
    "check_eligibility",
    "evaluate",
    "compute_jurisdiction_hash",
    # Exceptions
    "SmallClaimsError",
    "MalformedInputError",
    "JurisdictionLoadError",
    "JurisdictionValidationError",
    "JurisdictionVersionMismatch",
]
