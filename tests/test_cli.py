"""
Tests for the command-line entry point.
"""
import json
from pathlib import Path

from grpc_scenario_gen.__main__ import EXIT_BAD_INPUT, EXIT_FAILED, EXIT_OK, main

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TEST_SERVICE = FIXTURES_DIR / "sample_services" / "test_service.json"


class TestCli:

    def test_writes_files_to_output_dir(self, tmp_path, capsys):
        assert main([str(TEST_SERVICE), "-o", str(tmp_path)]) == EXIT_OK
        assert (tmp_path / "test_service_test_runner.go").read_text() == (
            FIXTURES_DIR / "golden" / "test_service_runner.go"
        ).read_text()
        assert (tmp_path / "test_service_scenario.json").exists()
        out = capsys.readouterr().out
        assert "test_service_test_runner.go" in out

    def test_no_scenario(self, tmp_path):
        assert main([str(TEST_SERVICE), "-o", str(tmp_path), "--no-scenario"]) == EXIT_OK
        assert [p.name for p in tmp_path.iterdir()] == ["test_service_test_runner.go"]

    def test_stdout(self, capsys):
        assert main([str(TEST_SERVICE), "--stdout"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out == (FIXTURES_DIR / "golden" / "test_service_runner.go").read_text()

    def test_invalid_description(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"package": "pb", "service_name": "", "methods": []}))
        assert main([str(bad), "--stdout"]) == EXIT_FAILED
        err = capsys.readouterr().err
        assert "service_name must not be empty" in err
        assert "methods must contain at least one method" in err

    def test_malformed_json(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text('{"package": "pb"}')
        assert main([str(bad)]) == EXIT_BAD_INPUT
        assert "Malformed" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_bytes(b'{"package": "\xff\xfe"}')
        assert main([str(bad)]) == EXIT_BAD_INPUT
        assert "Cannot read" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == EXIT_BAD_INPUT
        assert "Cannot read" in capsys.readouterr().err
