"""
Small Claims Verdict

Output of one eligibility evaluation: the eligibility flag plus the ordered
reasons the claim fails. Constructed once per evaluation and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class Verdict:
    """
    Result of evaluating a ClaimRecord against a JurisdictionConfig.

    Attributes:
        eligible: True iff no rule failed
        reasons: User-facing messages, one per failed rule, in rule order
        failed_rules: Rule ids parallel to reasons
        jurisdiction_id: Pack the record was evaluated against
        jurisdiction_version: Revision of that pack
        evaluated_on: The "today" used for date-relative rules
    """
    eligible: bool
    reasons: tuple[str, ...]
    failed_rules: tuple[str, ...]
    jurisdiction_id: str
    jurisdiction_version: str
    evaluated_on: date

    def __post_init__(self) -> None:
        if self.eligible == bool(self.reasons):
            raise ValueError("A verdict is eligible iff it has no reasons")
        if len(self.reasons) != len(self.failed_rules):
            raise ValueError("reasons and failed_rules must be parallel")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape returned to callers."""
        return {
            "eligible": self.eligible,
            "reasons": list(self.reasons),
            "failed_rules": list(self.failed_rules),
            "jurisdiction_id": self.jurisdiction_id,
            "jurisdiction_version": self.jurisdiction_version,
            "evaluated_on": self.evaluated_on.isoformat(),
        }
