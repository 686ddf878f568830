"""
Tests for scripts/print_statement.py.
"""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "print_statement.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("print_statement", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestPrintStatement:
    def test_sample_data(self, script, capsys):
        assert script.main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Statement for BigCo\n")
        assert "Amount owed is $1,730.00\n" in out
        assert out.endswith("You earned 47 credits\n")

    def test_promotional_config(self, script, capsys):
        assert script.main(["--config", "promotional"]) == 0
        assert "  Othello: $380.00 (40 seats)\n" in capsys.readouterr().out

    def test_unknown_type_exits_with_error(self, script, tmp_path, capsys):
        plays = tmp_path / "plays.json"
        invoices = tmp_path / "invoices.json"
        plays.write_text(json.dumps({"henry-v": {"name": "Henry V", "type": "history"}}))
        invoices.write_text(json.dumps({
            "customer": "BigCo",
            "performances": [{"playID": "henry-v", "audience": 53}],
        }))

        code = script.main(["--plays", str(plays), "--invoices", str(invoices)])

        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "UNKNOWN_PLAY_TYPE" in captured.err

    def test_missing_file(self, script, tmp_path, capsys):
        assert script.main(["--plays", str(tmp_path / "none.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_config_accepts_yaml_path(self, script, capsys):
        promo = Path(__file__).resolve().parents[2] / "theater_config" / "sets" / "promotional.yaml"
        assert script.main(["--config", str(promo)]) == 0
        assert "  Othello: $380.00 (40 seats)\n" in capsys.readouterr().out

    def test_invoice_flag(self, script, capsys):
        invoices = SCRIPT.parent / "data" / "invoices.json"
        assert script.main(["--invoice", str(invoices)]) == 0
        assert "Amount owed is $1,730.00\n" in capsys.readouterr().out

    def test_malformed_config_exits_with_error(self, script, tmp_path, capsys):
        (tmp_path / "bad.yaml").write_text("pricing: [unclosed\n")

        code = script.main(["--config", "bad", "--config-dir", str(tmp_path)])

        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "CONFIGURATION_ERROR" in captured.err

    def test_null_performances_exits_with_error(self, script, tmp_path, capsys):
        invoices = tmp_path / "invoices.json"
        invoices.write_text(json.dumps({"customer": "BigCo", "performances": None}))

        assert script.main(["--invoice", str(invoices)]) == 1
        assert "performances" in capsys.readouterr().err
