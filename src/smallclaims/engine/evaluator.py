"""
Small Claims Eligibility Evaluator

Applies every rule of the rule table to a ClaimRecord and produces a
Verdict.

Key properties:
- No short-circuit: every rule runs, whatever the others returned
- Stable order: reasons follow the rule table order
- Pure: no I/O, no shared mutable state; "today" can be injected
- Ineligibility is a normal Verdict, never an exception
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..intake import decode_claim_record
from ..intake.decoder import Payload
from ..models import ClaimRecord, JurisdictionConfig, Verdict
from .rules import RULES, EligibilityRule

logger = logging.getLogger(__name__)


class EligibilityEvaluator:
    """
    Evaluates claim records against one jurisdiction's rule set.

    Usage:
        evaluator = EligibilityEvaluator(config)
        verdict = evaluator.evaluate(record)
        if not verdict.eligible:
            for reason in verdict.reasons:
                print(reason)
    """

    def __init__(
        self,
        config: JurisdictionConfig,
        rules: tuple[EligibilityRule, ...] = RULES,
    ):
        self.config = config
        self.rules = tuple(rules)

    def evaluate(self, record: ClaimRecord, today: Optional[date] = None) -> Verdict:
        """
        Run every rule against a record.

        Args:
            record: The validated claim record
            today: Evaluation date for the lookback window (default: date.today())

        Returns:
            Verdict with one reason per failed rule, in rule order
        """
        today = today or date.today()

        reasons: list[str] = []
        failed: list[str] = []
        for rule in self.rules:
            message = rule.apply(record, self.config, today)
            if message is not None:
                reasons.append(message)
                failed.append(rule.id)

        verdict = Verdict(
            eligible=not reasons,
            reasons=tuple(reasons),
            failed_rules=tuple(failed),
            jurisdiction_id=self.config.id,
            jurisdiction_version=self.config.version,
            evaluated_on=today,
        )
        logger.debug(
            "Evaluated claim against %s: eligible=%s failed=%s",
            self.config.id,
            verdict.eligible,
            ",".join(failed) or "-",
        )
        return verdict


def evaluate(
    record: ClaimRecord,
    config: JurisdictionConfig,
    today: Optional[date] = None,
) -> Verdict:
    """
    Evaluate one record.

    Convenience function that creates a temporary evaluator.
    """
    return EligibilityEvaluator(config).evaluate(record, today=today)


def check_eligibility(
    payload: Payload,
    config: JurisdictionConfig,
    today: Optional[date] = None,
) -> Verdict:
    """
    Decode a raw submission and evaluate it.

    Raises:
        MalformedInputError: If the payload cannot be decoded. No rule runs.
    """
    record = decode_claim_record(payload)
    return evaluate(record, config, today=today)
