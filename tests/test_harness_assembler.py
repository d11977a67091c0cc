"""
Tests for writing generated files to disk.
"""
import pytest

from grpc_scenario_gen.harness_assembler import write_harness_files


class TestWriteHarnessFiles:

    def test_writes_all_files(self, tmp_path):
        files = {"a_test_runner.go": "package pb\n", "a_scenario.json": "[]\n"}
        written = write_harness_files(files, tmp_path)
        assert [p.name for p in written] == ["a_test_runner.go", "a_scenario.json"]
        assert (tmp_path / "a_test_runner.go").read_text() == "package pb\n"
        assert (tmp_path / "a_scenario.json").read_text() == "[]\n"

    def test_creates_missing_directories(self, tmp_path):
        out = tmp_path / "nested" / "pb"
        write_harness_files({"sub/x.go": "package pb\n"}, out)
        assert (out / "sub" / "x.go").exists()

    def test_overwrites_existing_file(self, tmp_path):
        (tmp_path / "x.go").write_text("old")
        write_harness_files({"x.go": "new"}, tmp_path)
        assert (tmp_path / "x.go").read_text() == "new"

    def test_rejects_path_traversal(self, tmp_path):
        out = tmp_path / "out"
        with pytest.raises(ValueError, match="outside"):
            write_harness_files({"../escape.go": "package pb\n"}, out)
        assert not (tmp_path / "escape.go").exists()
