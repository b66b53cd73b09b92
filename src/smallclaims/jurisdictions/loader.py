"""
Small Claims Jurisdiction Pack Loader

Loads and validates jurisdiction packs from YAML or JSON files.

Converts Pydantic schema models to the immutable JurisdictionConfig the
evaluator consumes. A rule revision (new postal codes, new thresholds) is a
new pack file, not a code change.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..canon import compute_jurisdiction_hash
from ..exceptions import (
    JurisdictionLoadError,
    JurisdictionValidationError,
    JurisdictionVersionMismatch,
)
from ..models import ClaimType, JurisdictionConfig
from .schema import (
    SCHEMA_VERSION,
    JurisdictionPackSchema,
    check_schema_version,
    validate_jurisdiction_pack,
)

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_PACK_PATH = DATA_DIR / "wa_king_county.yaml"


def _convert_pack(schema: JurisdictionPackSchema) -> JurisdictionConfig:
    """Convert JurisdictionPackSchema to JurisdictionConfig model."""
    return JurisdictionConfig(
        id=schema.id,
        name=schema.name,
        version=schema.version,
        court_name=schema.court_name,
        effective_date=schema.effective_date,
        accepted_postal_codes=frozenset(schema.accepted_postal_codes),
        max_claim_amount=schema.thresholds.max_claim_amount,
        party_claim_ceiling=schema.thresholds.party_claim_ceiling,
        lookback_years=schema.limits.lookback_years,
        accepted_claim_types=frozenset(ClaimType(v) for v in schema.accepted_claim_types),
        adult_age=schema.limits.adult_age,
        annual_claim_cap=schema.limits.annual_claim_cap,
        defendant_claim_window_months=schema.limits.defendant_claim_window_months,
    )


class JurisdictionPackLoader:
    """
    Loads jurisdiction packs from YAML or JSON files.

    Usage:
        loader = JurisdictionPackLoader()
        config = loader.load("path/to/pack.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._hashes: dict[str, str] = {}

    def load(self, path: Union[str, Path]) -> JurisdictionConfig:
        """
        Load a jurisdiction pack from a file.

        Raises:
            JurisdictionLoadError: If file cannot be read or parsed
            JurisdictionValidationError: If validation fails
            JurisdictionVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise JurisdictionLoadError(
                message=f"Failed to load jurisdiction pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        return self.load_dict(data, source=str(path))

    def load_dict(self, data: Any, source: str = "<dict>") -> JurisdictionConfig:
        """Validate and convert an already-parsed pack."""
        if not isinstance(data, dict):
            raise JurisdictionValidationError(
                message="Jurisdiction pack must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise JurisdictionVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_jurisdiction_pack(data)
        except ValidationError as e:
            raise JurisdictionValidationError(
                message=f"Jurisdiction pack validation failed: {e.error_count()} errors",
                details={
                    "errors": e.errors(
                        include_url=False, include_context=False, include_input=False
                    ),
                    "path": source,
                },
            ) from e

        config = _convert_pack(schema)
        pack_hash = compute_jurisdiction_hash(config)
        self._hashes[config.id] = pack_hash

        logger.info(
            "Loaded jurisdiction pack %s v%s (%d postal codes, hash %s)",
            config.id,
            config.version,
            len(config.accepted_postal_codes),
            pack_hash[:12],
        )
        return config

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_hash(self, jurisdiction_id: str) -> Optional[str]:
        """Get the pack hash of a config loaded by this loader."""
        return self._hashes.get(jurisdiction_id)


@lru_cache(maxsize=1)
def load_default_jurisdiction() -> JurisdictionConfig:
    """Load the bundled King County pack once per process."""
    return JurisdictionPackLoader().load(DEFAULT_PACK_PATH)
