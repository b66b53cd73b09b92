"""
Small Claims Engine

Eligibility evaluation over an explicit rule table.

Usage:
    from smallclaims.engine import EligibilityEvaluator, evaluate, RULES
"""
from __future__ import annotations

from .dates import format_long_date, lookback_cutoff, subtract_years
from .evaluator import EligibilityEvaluator, check_eligibility, evaluate
from .rules import RULES, RULES_BY_ID, EligibilityRule, format_amount

__all__ = [
    "EligibilityEvaluator",
    "check_eligibility",
    "evaluate",
    "RULES",
    "RULES_BY_ID",
    "EligibilityRule",
    "format_amount",
    "format_long_date",
    "lookback_cutoff",
    "subtract_years",
]
