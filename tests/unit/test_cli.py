"""Unit tests for the generate CLI — ddex_ern.cli.generate."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from lxml import etree

from ddex_ern.cli import generate as generate_cli


@pytest.fixture(autouse=True)
def _no_logging_reconfiguration(monkeypatch) -> None:
    # Keep structlog bound to the session streams, not this test's capture.
    generate_cli.configure_logging(stream=sys.stderr)
    monkeypatch.setattr(generate_cli, "configure_logging", lambda **_: None)


@pytest.fixture
def payload_file(tmp_path, bundle_payload) -> Path:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(bundle_payload), encoding="utf-8")
    return path


def _run(argv: list[str], tmp_path: Path) -> int:
    with pytest.raises(SystemExit) as exc_info:
        generate_cli.main([*argv, "--config", str(tmp_path / "none.yaml")])
    return exc_info.value.code


class TestGenerateCommand:
    def test_writes_xml_to_stdout(self, payload_file, tmp_path, capsys) -> None:
        assert _run([str(payload_file)], tmp_path) == 0
        out = capsys.readouterr().out
        root = etree.fromstring(out.encode("utf-8"))
        assert root.find("ReleaseList/Release/ReleaseReference").text == "R501"

    def test_writes_xml_to_file(self, payload_file, tmp_path, capsys) -> None:
        output = tmp_path / "ern.xml"
        assert _run([str(payload_file), "-o", str(output)], tmp_path) == 0
        assert capsys.readouterr().out == ""
        root = etree.parse(str(output)).getroot()
        assert len(root.findall("DealList/ReleaseDeal/Deal")) == 5

    def test_reduced_profile(self, payload_file, tmp_path, capsys) -> None:
        assert _run([str(payload_file), "--profile", "reduced"], tmp_path) == 0
        root = etree.fromstring(capsys.readouterr().out.encode("utf-8"))
        assert len(root.findall("DealList/ReleaseDeal/Deal")) == 2

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert _run([str(tmp_path / "absent.json")], tmp_path) == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert _run([str(path)], tmp_path) == 1
        assert "not valid JSON" in capsys.readouterr().err

    def test_not_a_release_payload(self, tmp_path, capsys) -> None:
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"tracks": []}), encoding="utf-8")
        assert _run([str(path)], tmp_path) == 1
        assert "not a release payload" in capsys.readouterr().err

    def test_validation_failure(self, tmp_path, bundle_payload, capsys) -> None:
        bundle_payload["release"]["upc"] = ""
        path = tmp_path / "payload.json"
        path.write_text(json.dumps(bundle_payload), encoding="utf-8")
        assert _run([str(path)], tmp_path) == 1
        assert "[upc]" in capsys.readouterr().err

    def test_skip_validation(self, tmp_path, bundle_payload, capsys) -> None:
        bundle_payload["release"]["upc"] = ""
        path = tmp_path / "payload.json"
        path.write_text(json.dumps(bundle_payload), encoding="utf-8")
        assert _run([str(path), "--skip-validation"], tmp_path) == 0
        assert capsys.readouterr().out.startswith("<?xml")

    def test_malformed_date(self, tmp_path, bundle_payload, capsys) -> None:
        bundle_payload["release"]["date"] = "someday"
        path = tmp_path / "payload.json"
        path.write_text(json.dumps(bundle_payload), encoding="utf-8")
        assert _run([str(path)], tmp_path) == 1
        assert "[release_date]" in capsys.readouterr().err
