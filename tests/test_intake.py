"""
Tests for decoding raw submissions into ClaimRecords.

Tests cover:
- snake_case and camelCase field names
- Dollar and cent amounts
- ISO-8601 date and datetime incident dates
- Decoding failures raised as MalformedInputError
"""
import json
from datetime import date
from decimal import Decimal

import pytest

from smallclaims import ClaimType, MalformedInputError, PartyType, decode_claim_record

from tests.conftest import make_payload


def _failed_fields(exc_info) -> set[str]:
    return {err["field"] for err in exc_info.value.details["errors"]}


# =============================================================================
# Successful Decoding
# =============================================================================

class TestDecodeClaimRecord:
    """Tests for well-formed submissions."""

    def test_decode_dict(self):
        record = decode_claim_record(make_payload())
        assert record.filer_age == 25
        assert record.claim_amount == Decimal("20.00")
        assert record.claim_type is ClaimType.RENT
        assert record.defendant_type is PartyType.INDIVIDUAL
        assert record.incident_date == date(2024, 6, 14)

    def test_decode_json_text(self):
        record = decode_claim_record(json.dumps(make_payload()))
        assert record.filing_zip_code == "98101"

    def test_decode_json_bytes(self):
        record = decode_claim_record(json.dumps(make_payload()).encode("utf-8"))
        assert record.self_represented is True

    def test_json_float_amount_keeps_cents(self):
        text = json.dumps(make_payload()).replace('"20.00"', "10000.01")
        record = decode_claim_record(text)
        assert record.claim_amount == Decimal("10000.01")

    def test_camel_case_field_names(self):
        payload = {
            "filerAge": 40,
            "hasGuardian": False,
            "claimAmount": 1500,
            "claimType": "Wages",
            "defendantType": "Company",
            "plaintiffType": "Individual",
            "filingZipCode": "98004",
            "incidentDate": "2023-03-01",
            "settlementAttempted": True,
            "canPayFilingFee": True,
            "selfRepresented": True,
            "hasDefendantContactInfo": True,
            "defendantNotInBankruptcy": True,
            "isFirstClaimAgainstDefendant": True,
            "hasFewerThanAnnualClaimCap": True,
            "understandsMandatoryCourtAttendance": False,
        }
        record = decode_claim_record(payload)
        assert record.filer_age == 40
        assert record.claim_amount == Decimal("1500")
        assert record.claim_type is ClaimType.WAGES
        assert record.defendant_type is PartyType.COMPANY
        assert record.understands_mandatory_court_attendance is False

    def test_amount_in_cents(self):
        payload = make_payload()
        del payload["claim_amount"]
        payload["claimAmountCents"] = 1000001
        record = decode_claim_record(payload)
        assert record.claim_amount == Decimal("10000.01")

    def test_browser_datetime_incident_date(self):
        record = decode_claim_record(make_payload(incident_date="2024-05-01T07:00:00.000Z"))
        assert record.incident_date == date(2024, 5, 1)

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_incident_date(self, value):
        record = decode_claim_record(make_payload(incident_date=value))
        assert record.incident_date is None

    def test_missing_incident_date_key(self):
        payload = make_payload()
        del payload["incident_date"]
        assert decode_claim_record(payload).incident_date is None

    def test_claim_type_by_member_name(self):
        record = decode_claim_record(make_payload(claim_type="AUTOMOBILE_ACCIDENT"))
        assert record.claim_type is ClaimType.AUTOMOBILE_ACCIDENT

    def test_other_claim_type_decodes(self):
        # Other is an eligibility failure, not a decoding failure
        record = decode_claim_record(make_payload(claim_type="Other"))
        assert record.claim_type is ClaimType.OTHER

    def test_numeric_zip_code(self):
        record = decode_claim_record(make_payload(filing_zip_code=98052))
        assert record.filing_zip_code == "98052"

    def test_extra_form_fields_ignored(self):
        record = decode_claim_record(make_payload(
            claimNature="Unpaid rent",
            plaintiffEthnicity="Other",
            defendantIncome="50k-75k",
        ))
        assert record.claim_type is ClaimType.RENT


# =============================================================================
# Decoding Failures
# =============================================================================

class TestMalformedInput:
    """Submissions that cannot become a ClaimRecord."""

    def test_not_json(self):
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record("{not json")
        assert exc_info.value.code == "SC_MALFORMED_INPUT"
        assert "not valid JSON" in exc_info.value.message

    @pytest.mark.parametrize("text", ["[]", "42", '"claim"', "null"])
    def test_json_but_not_object(self, text):
        with pytest.raises(MalformedInputError, match="JSON object"):
            decode_claim_record(text)

    def test_missing_required_boolean_is_not_defaulted(self):
        payload = make_payload()
        del payload["settlement_attempted"]
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record(payload)
        assert "settlement_attempted" in _failed_fields(exc_info)

    def test_missing_guardian_answer(self):
        payload = make_payload()
        del payload["has_guardian"]
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record(payload)
        assert "has_guardian" in _failed_fields(exc_info)

    def test_missing_amount(self):
        payload = make_payload()
        del payload["claim_amount"]
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record(payload)
        assert "claim_amount" in _failed_fields(exc_info)

    def test_unparsable_incident_date(self):
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record(make_payload(incident_date="last spring"))
        assert "incident_date" in _failed_fields(exc_info)

    def test_numeric_incident_date_rejected(self):
        with pytest.raises(MalformedInputError):
            decode_claim_record(make_payload(incident_date=1700000000))

    def test_boolean_age(self):
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record(make_payload(filer_age=True))
        assert "filer_age" in _failed_fields(exc_info)

    def test_deeply_nested_json(self):
        with pytest.raises(MalformedInputError, match="not valid JSON"):
            decode_claim_record("[" * 100000)

    def test_negative_age(self):
        with pytest.raises(MalformedInputError):
            decode_claim_record(make_payload(filer_age=-3))

    def test_fractional_cents_rejected(self):
        with pytest.raises(MalformedInputError):
            decode_claim_record(make_payload(claim_amount="10.005"))

    def test_unknown_claim_type(self):
        with pytest.raises(MalformedInputError):
            decode_claim_record(make_payload(claim_type="Defamation"))

    def test_unknown_party_type(self):
        with pytest.raises(MalformedInputError):
            decode_claim_record(make_payload(defendant_type="government"))

    @pytest.mark.parametrize("zip_code", ["9810", "981011"])
    def test_zip_code_length(self, zip_code):
        with pytest.raises(MalformedInputError):
            decode_claim_record(make_payload(filing_zip_code=zip_code))

    def test_non_integer_cents(self):
        payload = make_payload()
        del payload["claim_amount"]
        payload["claimAmountCents"] = "2000"
        with pytest.raises(MalformedInputError):
            decode_claim_record(payload)

    def test_error_details_are_json_safe(self):
        with pytest.raises(MalformedInputError) as exc_info:
            decode_claim_record({"filer_age": "old"})
        json.dumps(exc_info.value.to_dict())
        assert exc_info.value.details["errors"]
