"""
Small Claims Intake Decoder

Turns an encoded submission (JSON text or an already-decoded mapping) into
a ClaimRecord. Any failure here is a MalformedInputError and is raised
before a single eligibility rule runs.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Union

from pydantic import ValidationError

from ..exceptions import MalformedInputError
from ..models import ClaimRecord
from .schema import ClaimRecordSchema


Payload = Union[str, bytes, bytearray, Mapping[str, Any]]


def _summarize_errors(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten Pydantic errors into JSON-safe field/message pairs."""
    summary = []
    for err in error.errors(include_url=False, include_context=False, include_input=False):
        summary.append({
            "field": ".".join(str(part) for part in err["loc"]) or "<root>",
            "message": err["msg"],
            "type": err["type"],
        })
    return summary


def decode_claim_record(payload: Payload) -> ClaimRecord:
    """
    Decode a submission into a ClaimRecord.

    Args:
        payload: JSON text/bytes, or a mapping of field names to values

    Returns:
        The validated ClaimRecord

    Raises:
        MalformedInputError: If the payload is not JSON, not an object, or
            does not carry every required answer in a usable form
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            data = json.loads(payload, parse_float=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            raise MalformedInputError(
                message="Claim payload is not valid JSON",
                details={"error": str(e)},
            ) from e
    else:
        data = payload

    if not isinstance(data, Mapping):
        raise MalformedInputError(
            message="Claim payload must be a JSON object",
            details={"type": type(data).__name__},
        )

    try:
        schema = ClaimRecordSchema.model_validate(dict(data))
    except ValidationError as e:
        raise MalformedInputError(
            message=f"Claim payload failed validation: {e.error_count()} errors",
            details={"errors": _summarize_errors(e)},
        ) from e

    try:
        return schema.to_record()
    except ValueError as e:
        raise MalformedInputError(message=str(e)) from e
