"""Eligibility check endpoint."""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from api.schemas.responses import ErrorResponse, VerdictResponse
from smallclaims.engine import check_eligibility
from smallclaims.models import JurisdictionConfig

logger = logging.getLogger("smallclaims.api")

router = APIRouter(prefix="/eligibility", tags=["Eligibility"])

# Shared jurisdiction, set at startup
jurisdiction: JurisdictionConfig = None


def set_jurisdiction(config: JurisdictionConfig):
    global jurisdiction
    jurisdiction = config


@router.post(
    "",
    response_model=VerdictResponse,
    responses={400: {"model": ErrorResponse, "description": "Unreadable submission"}},
)
async def check_claim(request: Request):
    """
    Check a filer's answers against the jurisdiction's rules.

    The body is read raw so that every decoding problem (not JSON, not an
    object, missing or invalid answers) comes back as a 400 with code
    SC_MALFORMED_INPUT. An ineligible claim is a 200 with reasons.
    """
    if jurisdiction is None:
        raise HTTPException(status_code=503, detail="Jurisdiction pack not loaded")

    started = time.perf_counter()
    body = await request.body()

    # MalformedInputError propagates to the app-level handler
    verdict = check_eligibility(body, jurisdiction)

    logger.info(
        "Eligibility checked",
        extra={
            "jurisdiction_id": verdict.jurisdiction_id,
            "eligible": verdict.eligible,
            "failed_rules": list(verdict.failed_rules),
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return VerdictResponse(**verdict.to_dict())
