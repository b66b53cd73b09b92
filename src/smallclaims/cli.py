"""
smallclaims CLI - Eligibility Check Runner

Command-line interface for checking claim submissions against a
jurisdiction pack.

Usage:
    smallclaims check --input claim.json
    smallclaims check --input claim.json --pack my_county.yaml --today 2024-06-01
    smallclaims validate-pack --pack my_county.yaml
    smallclaims pack-info

Exit Codes:
    0   ELIGIBLE        - Claim qualifies for small claims court
    2   INELIGIBLE      - One or more rules failed (reasons printed)
    10  INPUT_INVALID   - Claim payload could not be decoded
    11  PACK_ERROR      - Pack validation/loading failed
    20  INTERNAL_ERROR  - Unexpected internal error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from .canon import compute_jurisdiction_hash
from .engine import check_eligibility
from .exceptions import MalformedInputError, SmallClaimsError
from .jurisdictions import DEFAULT_PACK_PATH, JurisdictionPackLoader
from .models import JurisdictionConfig


# ============================================================================
# EXIT CODES
# ============================================================================

class ExitCode:
    """Deterministic exit codes for pipeline integration."""
    ELIGIBLE = 0
    INELIGIBLE = 2
    INPUT_INVALID = 10
    PACK_ERROR = 11
    INTERNAL_ERROR = 20


# ============================================================================
# OUTPUT FORMATTING
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        cls.CYAN = ''
        cls.GREEN = ''
        cls.YELLOW = ''
        cls.RED = ''
        cls.BOLD = ''
        cls.END = ''


def print_header(text: str):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")


def print_success(text: str):
    print(f"{Colors.GREEN}[OK] {text}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}[ERROR] {text}{Colors.END}", file=sys.stderr)


def print_kv(key: str, value: str, indent: int = 0):
    spaces = "  " * indent
    print(f"{spaces}{Colors.BOLD}{key}:{Colors.END} {value}")


# ============================================================================
# COMMANDS
# ============================================================================

def _load_pack(pack: Optional[str]) -> JurisdictionConfig:
    return JurisdictionPackLoader().load(Path(pack) if pack else DEFAULT_PACK_PATH)


def _read_input(source: str) -> bytes:
    # Bytes go to the decoder so a bad encoding is reported as malformed input
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def cmd_check(args) -> int:
    """Check one claim payload."""
    try:
        config = _load_pack(args.pack)
    except SmallClaimsError as e:
        print_error(str(e))
        return ExitCode.PACK_ERROR

    try:
        raw = _read_input(args.input)
    except OSError as e:
        print_error(f"Cannot read input: {e}")
        return ExitCode.INPUT_INVALID

    try:
        verdict = check_eligibility(raw, config, today=args.today)
    except MalformedInputError as e:
        if args.json:
            print(json.dumps(e.to_dict(), indent=2))
        else:
            print_error(str(e))
            for err in e.details.get("errors", []):
                print(f"  {Colors.RED}[X]{Colors.END} {err['field']}: {err['message']}")
        return ExitCode.INPUT_INVALID

    if args.json:
        print(json.dumps(verdict.to_dict(), indent=2))
    else:
        print_header(f"Small Claims Eligibility - {config.name}")
        if verdict.eligible:
            print_success("Eligible to file in small claims court")
        else:
            print(f"{Colors.YELLOW}Not eligible ({len(verdict.reasons)} reason(s)):{Colors.END}")
            for reason in verdict.reasons:
                print(f"  {Colors.RED}[X]{Colors.END} {reason}")

    return ExitCode.ELIGIBLE if verdict.eligible else ExitCode.INELIGIBLE


def cmd_validate_pack(args) -> int:
    """Validate a pack file."""
    pack_path = Path(args.pack)
    if not pack_path.exists():
        print_error(f"Pack file not found: {pack_path}")
        return ExitCode.INPUT_INVALID

    try:
        config = _load_pack(args.pack)
    except SmallClaimsError as e:
        print_error(str(e))
        errors = e.details.get("errors")
        if isinstance(errors, list):
            for err in errors:
                loc = ".".join(str(part) for part in err.get("loc", ()))
                print(f"  {Colors.RED}[X]{Colors.END} {loc}: {err.get('msg')}")
        return ExitCode.PACK_ERROR

    print_success("Pack is valid!")
    print_kv("Pack ID", config.id)
    print_kv("Version", config.version)
    return ExitCode.ELIGIBLE


def cmd_pack_info(args) -> int:
    """Show pack information."""
    try:
        config = _load_pack(args.pack)
    except SmallClaimsError as e:
        print_error(str(e))
        return ExitCode.PACK_ERROR

    print_header("Small Claims - Pack Info")
    print_kv("Pack ID", config.id)
    print_kv("Name", config.name)
    print_kv("Version", config.version)
    if config.court_name:
        print_kv("Court", config.court_name)
    print_kv("Pack Hash", compute_jurisdiction_hash(config))
    print()
    print_kv("Max claim amount", f"${config.max_claim_amount}")
    print_kv("Party claim ceiling", f"${config.party_claim_ceiling}")
    print_kv("Lookback years", str(config.lookback_years))
    print_kv("Postal codes", str(len(config.accepted_postal_codes)))
    print(f"\n{Colors.BOLD}Accepted claim types ({len(config.accepted_claim_types)}):{Colors.END}")
    for value in sorted(t.value for t in config.accepted_claim_types):
        print(f"  {value}")
    return ExitCode.ELIGIBLE


# ============================================================================
# MAIN
# ============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    if not sys.stdout.isatty():
        Colors.disable()

    parser = argparse.ArgumentParser(
        prog="smallclaims",
        description="Small claims court eligibility checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   ELIGIBLE        Claim qualifies
  2   INELIGIBLE      One or more rules failed
  10  INPUT_INVALID   Claim payload could not be decoded
  11  PACK_ERROR      Pack validation failed

Examples:
  smallclaims check --input claim.json
  smallclaims check --input - --json < claim.json
  smallclaims validate-pack --pack my_county.yaml
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check a claim payload")
    check_parser.add_argument("--input", "-i", required=True, help="Claim JSON file ('-' for stdin)")
    check_parser.add_argument("--pack", "-p", help="Jurisdiction pack YAML file (default: bundled)")
    check_parser.add_argument("--today", type=date.fromisoformat,
                              help="Evaluation date YYYY-MM-DD (default: today)")
    check_parser.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    check_parser.set_defaults(func=cmd_check)

    val_pack_parser = subparsers.add_parser("validate-pack", help="Validate a pack file")
    val_pack_parser.add_argument("--pack", "-p", required=True, help="Pack YAML file")
    val_pack_parser.set_defaults(func=cmd_validate_pack)

    info_parser = subparsers.add_parser("pack-info", help="Show pack information")
    info_parser.add_argument("--pack", "-p", help="Pack YAML file (default: bundled)")
    info_parser.set_defaults(func=cmd_pack_info)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
