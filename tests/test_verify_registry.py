"""Tests for scripts/verify_registry.py."""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "verify_registry.py"


@pytest.fixture
def verify_registry():
    spec = importlib.util.spec_from_file_location("verify_registry", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_build_report(verify_registry):
    report = verify_registry.build_report()
    assert report["problems"] == []
    assert len(report["tokens"]) == 12
    btc = next(entry for entry in report["tokens"] if entry["name"] == "BTC")
    assert btc["role"] == "quote"
    assert "xbt" in btc["aliases"]
    assert report["pairs"][0] == {
        "name": "DAI-BTC",
        "value": "0x00000064000000c8",
        "base": "DAI",
        "quote": "BTC",
    }


def test_main_json_exits_zero(verify_registry, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["verify_registry.py", "--json"])
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert verify_registry.main() == 0
    payload = json.loads(capsys.readouterr().out)
    assert [pair["name"] for pair in payload["pairs"]][:2] == ["DAI-BTC", "DAI-ETH"]


def test_main_reports_problems(verify_registry, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["verify_registry.py"])
    monkeypatch.setattr(verify_registry, "check_registry", lambda: ["broken table"])
    assert verify_registry.main() == 1
    assert "broken table" in capsys.readouterr().out
