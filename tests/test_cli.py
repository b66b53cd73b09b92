"""
Tests for the smallclaims command-line runner and its exit codes.
"""
import json

import yaml

from smallclaims.cli import ExitCode, main

from tests.conftest import OUTSIDE_ZIP, make_payload


def _write_claim(tmp_path, **overrides):
    path = tmp_path / "claim.json"
    path.write_text(json.dumps(make_payload(**overrides)), encoding="utf-8")
    return str(path)


class TestCheckCommand:

    def test_eligible(self, tmp_path, capsys):
        code = main(["check", "--input", _write_claim(tmp_path), "--today", "2024-06-15"])
        assert code == ExitCode.ELIGIBLE
        assert "Eligible" in capsys.readouterr().out

    def test_ineligible_prints_reasons(self, tmp_path, capsys):
        path = _write_claim(tmp_path, filing_zip_code=OUTSIDE_ZIP)
        code = main(["check", "--input", path, "--today", "2024-06-15"])
        assert code == ExitCode.INELIGIBLE
        assert "reside in King County" in capsys.readouterr().out

    def test_json_output(self, tmp_path, capsys):
        path = _write_claim(tmp_path, self_represented=False)
        code = main(["check", "--input", path, "--today", "2024-06-15", "--json"])
        assert code == ExitCode.INELIGIBLE
        body = json.loads(capsys.readouterr().out)
        assert body["failed_rules"] == ["self_representation"]
        assert body["evaluated_on"] == "2024-06-15"

    def test_malformed_input(self, tmp_path):
        path = tmp_path / "claim.json"
        path.write_text("{oops", encoding="utf-8")
        assert main(["check", "--input", str(path)]) == ExitCode.INPUT_INVALID

    def test_non_utf8_input(self, tmp_path):
        path = tmp_path / "claim.json"
        path.write_bytes(b"\xff\xfe{bad")
        assert main(["check", "--input", str(path)]) == ExitCode.INPUT_INVALID

    def test_missing_input_file(self, tmp_path):
        assert main(["check", "--input", str(tmp_path / "none.json")]) == ExitCode.INPUT_INVALID

    def test_bad_pack(self, tmp_path):
        pack = tmp_path / "pack.yaml"
        pack.write_text(yaml.safe_dump({"id": "x"}), encoding="utf-8")
        code = main(["check", "--input", _write_claim(tmp_path), "--pack", str(pack)])
        assert code == ExitCode.PACK_ERROR


class TestPackCommands:

    def test_pack_info_default(self, capsys):
        assert main(["pack-info"]) == ExitCode.ELIGIBLE
        out = capsys.readouterr().out
        assert "US-WA-KING-SMALL-CLAIMS" in out
        assert "Rent" in out

    def test_validate_pack_missing_file(self, tmp_path):
        assert main(["validate-pack", "--pack", str(tmp_path / "x.yaml")]) == ExitCode.INPUT_INVALID

    def test_validate_pack_invalid(self, tmp_path):
        pack = tmp_path / "pack.yaml"
        pack.write_text(yaml.safe_dump({"id": "x"}), encoding="utf-8")
        assert main(["validate-pack", "--pack", str(pack)]) == ExitCode.PACK_ERROR

    def test_no_command(self):
        assert main([]) == 1
