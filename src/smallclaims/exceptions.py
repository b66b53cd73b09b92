"""
Small Claims Exception Hierarchy

Domain-specific exceptions for the eligibility engine.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: SC_<CATEGORY>_<SPECIFIC>

Note that an ineligible claim is NOT an error. The evaluator always returns
a Verdict; exceptions are reserved for input that cannot be decoded and for
jurisdiction packs that cannot be loaded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SmallClaimsError(Exception):
    """
    Base exception for all smallclaims errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (SC_*)
        details: Additional context about the error
    """
    message: str
    code: str = "SC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Claim Input Errors
# =============================================================================

@dataclass
class MalformedInputError(SmallClaimsError):
    """Claim payload cannot be decoded into a ClaimRecord."""
    code: str = "SC_MALFORMED_INPUT"


# =============================================================================
# Jurisdiction Pack Errors
# =============================================================================

@dataclass
class JurisdictionLoadError(SmallClaimsError):
    """Failed to read a jurisdiction pack from file."""
    code: str = "SC_JURISDICTION_LOAD_ERROR"


@dataclass
class JurisdictionValidationError(SmallClaimsError):
    """Jurisdiction pack schema validation failed."""
    code: str = "SC_JURISDICTION_VALIDATION_ERROR"


@dataclass
class JurisdictionVersionMismatch(SmallClaimsError):
    """Jurisdiction pack schema version is not supported."""
    code: str = "SC_JURISDICTION_VERSION_MISMATCH"
