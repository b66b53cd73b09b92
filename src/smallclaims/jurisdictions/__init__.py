"""
Small Claims Jurisdiction Packs

Loading and validation of jurisdiction reference data.
"""
from __future__ import annotations

from .loader import (
    DEFAULT_PACK_PATH,
    JurisdictionPackLoader,
    load_default_jurisdiction,
)
from .schema import (
    SCHEMA_VERSION,
    JurisdictionPackSchema,
    check_schema_version,
    validate_jurisdiction_pack,
)

__all__ = [
    "DEFAULT_PACK_PATH",
    "JurisdictionPackLoader",
    "load_default_jurisdiction",
    "SCHEMA_VERSION",
    "JurisdictionPackSchema",
    "check_schema_version",
    "validate_jurisdiction_pack",
]
