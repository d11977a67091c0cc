"""
Tests for the starter scenario file.
"""
import json
import pytest
from pathlib import Path

from grpc_scenario_gen.scenario_template import generate_scenario_template, scenario_file_name
from grpc_scenario_gen.spec_schema import ServiceDescription

SAMPLE_DIR = Path(__file__).parent / "fixtures" / "sample_services"


@pytest.fixture
def description():
    return ServiceDescription.model_validate_json((SAMPLE_DIR / "greeter.json").read_text())


class TestScenarioTemplate:

    def test_one_record_per_method_in_order(self, description):
        records = json.loads(generate_scenario_template(description))
        assert [r["action"] for r in records] == ["SayHello", "SayGoodbye", "ListGreetings"]

    def test_records_have_runner_keys(self, description):
        for record in json.loads(generate_scenario_template(description)):
            assert record["request"] == {}
            assert record["error_expectation"] is False
            assert record["expected_response"] == {}

    def test_deterministic_with_trailing_newline(self, description):
        text = generate_scenario_template(description)
        assert text == generate_scenario_template(description)
        assert text.endswith("]\n")

    def test_file_name(self, description):
        assert scenario_file_name(description) == "greeter_scenario.json"
