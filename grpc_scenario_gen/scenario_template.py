"""
Scenario Template — a starter scenario JSON file for a generated runner.

One record per method, in declaration order, pre-filled with the keys the
runner reads. Users fill in request/expected_response and add more records.
"""

from __future__ import annotations

import json

from grpc_scenario_gen.code_generator import snake_case
from grpc_scenario_gen.spec_schema import ServiceDescription


def scenario_file_name(description: ServiceDescription) -> str:
    """Output filename for the scenario template, e.g. test_service_scenario.json."""
    return f"{snake_case(description.service_name)}_scenario.json"


def generate_scenario_template(description: ServiceDescription) -> str:
    """Render a JSON array with one success-path record per method."""
    records = [
        {
            "action": method.name,
            "request": {},
            "error_expectation": False,
            "expected_response": {},
        }
        for method in description.methods
    ]
    return json.dumps(records, indent=2) + "\n"
