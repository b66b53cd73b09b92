"""
Small Claims Intake

Decoding of raw submissions into validated ClaimRecords.
"""
from __future__ import annotations

from .decoder import decode_claim_record
from .schema import ClaimRecordSchema

__all__ = [
    "decode_claim_record",
    "ClaimRecordSchema",
]
