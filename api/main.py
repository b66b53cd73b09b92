"""
Small Claims Eligibility API

REST wrapper around the eligibility engine.

Endpoints:
    POST /eligibility                       - Check a filer's answers
    GET  /jurisdiction                      - Loaded pack summary
    GET  /jurisdiction/postal-codes/{zip}   - Is a filing ZIP code inside the jurisdiction
    GET  /health                            - Liveness probe

Run with:
    uvicorn api.main:app
"""

import json
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import smallclaims
from smallclaims.exceptions import MalformedInputError
from smallclaims.jurisdictions import DEFAULT_PACK_PATH, JurisdictionPackLoader

from api.routes import eligibility, jurisdiction


# =============================================================================
# Configuration
# =============================================================================

SC_LOG_LEVEL = os.getenv("SC_LOG_LEVEL", "INFO")
SC_JURISDICTION_PACK = os.getenv("SC_JURISDICTION_PACK", str(DEFAULT_PACK_PATH))
SC_DOCS_ENABLED = os.getenv("SC_DOCS_ENABLED", "true").lower() == "true"


# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    EXTRA_FIELDS = ("jurisdiction_id", "eligible", "failed_rules", "error_code", "duration_ms")

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        return json.dumps(log_entry)


logger = logging.getLogger("smallclaims")
logger.setLevel(getattr(logging, SC_LOG_LEVEL.upper(), logging.INFO))
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)


# =============================================================================
# Application
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the jurisdiction pack on startup."""
    loader = JurisdictionPackLoader()
    config = loader.load(Path(SC_JURISDICTION_PACK))
    pack_hash = loader.get_hash(config.id)
    eligibility.set_jurisdiction(config)
    jurisdiction.set_jurisdiction(config, pack_hash)
    logger.info(
        f"Small claims API starting: {config.id} v{config.version} "
        f"({pack_hash[:12]})",
        extra={"jurisdiction_id": config.id},
    )
    yield
    logger.info("Small claims API shutting down")


app = FastAPI(
    title="Small Claims Eligibility API",
    description="Checks whether a dispute qualifies for small claims court.",
    version=smallclaims.__version__,
    lifespan=lifespan,
    docs_url="/docs" if SC_DOCS_ENABLED else None,
    redoc_url="/redoc" if SC_DOCS_ENABLED else None,
)


@app.exception_handler(MalformedInputError)
async def malformed_input_handler(request: Request, exc: MalformedInputError):
    """Unreadable submissions are a 400, never an ineligible verdict."""
    logger.info(
        f"Rejected submission: {exc.message}",
        extra={"error_code": exc.code},
    )
    return JSONResponse(status_code=400, content=exc.to_dict())


app.include_router(eligibility.router)
app.include_router(jurisdiction.router)


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok", "version": smallclaims.__version__}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
