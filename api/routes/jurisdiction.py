"""Jurisdiction reference data endpoints."""

from fastapi import APIRouter, HTTPException

from api.schemas.responses import JurisdictionResponse, PostalCodeResponse
from smallclaims.models import JurisdictionConfig

router = APIRouter(prefix="/jurisdiction", tags=["Jurisdiction"])

# Shared jurisdiction, set at startup
jurisdiction: JurisdictionConfig = None
pack_hash: str = None


def set_jurisdiction(config: JurisdictionConfig, config_hash: str):
    global jurisdiction, pack_hash
    jurisdiction = config
    pack_hash = config_hash


def _require_jurisdiction() -> JurisdictionConfig:
    if jurisdiction is None:
        raise HTTPException(status_code=503, detail="Jurisdiction pack not loaded")
    return jurisdiction


@router.get("", response_model=JurisdictionResponse)
async def get_jurisdiction():
    """Thresholds and accepted claim types of the loaded pack."""
    config = _require_jurisdiction()
    return JurisdictionResponse(
        id=config.id,
        name=config.name,
        version=config.version,
        court_name=config.court_name,
        effective_date=config.effective_date.isoformat() if config.effective_date else None,
        pack_hash=pack_hash,
        max_claim_amount=str(config.max_claim_amount),
        party_claim_ceiling=str(config.party_claim_ceiling),
        lookback_years=config.lookback_years,
        adult_age=config.adult_age,
        annual_claim_cap=config.annual_claim_cap,
        accepted_claim_types=sorted(t.value for t in config.accepted_claim_types),
        postal_code_count=len(config.accepted_postal_codes),
    )


@router.get("/postal-codes/{zip_code}", response_model=PostalCodeResponse)
async def check_postal_code(zip_code: str):
    """Whether a filing ZIP code is inside the jurisdiction."""
    config = _require_jurisdiction()
    zip_code = zip_code.strip()
    return PostalCodeResponse(
        zip_code=zip_code,
        accepted=config.accepts_postal_code(zip_code),
        jurisdiction_id=config.id,
    )
