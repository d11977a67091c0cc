"""
Code Generator — renders Jinja2 templates using a validated ServiceDescription.

Produces the text of a Go test runner that drives a gRPC client from a JSON
scenario file. This is a deterministic transformation: same description →
byte-identical output.
"""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from grpc_scenario_gen.spec_review import review_service
from grpc_scenario_gen.spec_schema import MethodDescription, ServiceDescription

# Template directory lives alongside this module
TEMPLATE_DIR = Path(__file__).parent / "templates"

RUNNER_TEMPLATE = "runner_test.go.j2"
DISPATCH_CASE_TEMPLATE = "dispatch_case.go.j2"
METHOD_TEST_TEMPLATE = "method_test.go.j2"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


class GenerationError(RuntimeError):
    """Raised when a description cannot be rendered into a test runner."""


def snake_case(name: str) -> str:
    """Convert a CamelCase service name to snake_case (TestService → test_service, HTTPService → http_service)."""
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "_", name).lower()


def harness_file_name(description: ServiceDescription) -> str:
    """Output filename for the generated runner, e.g. test_service_test_runner.go."""
    return f"{snake_case(description.service_name)}_test_runner.go"


def render_dispatch_case(method: MethodDescription) -> str:
    """Render the `case` branch that routes one action to its test procedure."""
    try:
        return _env.get_template(DISPATCH_CASE_TEMPLATE).render(method=method)
    except TemplateError as e:
        raise GenerationError(f"Failed to render dispatch case for '{method.name}': {e}") from e


def render_method_test(service_name: str, method: MethodDescription) -> str:
    """Render the call-and-assert procedure for one method."""
    try:
        return _env.get_template(METHOD_TEST_TEMPLATE).render(
            service_name=service_name,
            method=method,
        )
    except TemplateError as e:
        raise GenerationError(f"Failed to render test procedure for '{method.name}': {e}") from e


def generate_test_code(description: ServiceDescription) -> str:
    """
    Generate the complete Go test runner for a validated description.

    The dispatch block and the per-method procedures are built by iterating
    over description.methods in declaration order, one fragment per method,
    and then substituted into the runner skeleton.

    Raises:
        GenerationError: if the description breaks a structural rule or a
            template cannot be rendered.
    """
    review = review_service(description)
    if not review.valid:
        raise GenerationError(
            "Refusing to render an invalid service description: " + "; ".join(review.errors)
        )

    dispatch_cases: list[str] = []
    method_tests: list[str] = []
    for method in description.methods:
        dispatch_cases.append(render_dispatch_case(method))
        method_tests.append(render_method_test(description.service_name, method))

    try:
        template = _env.get_template(RUNNER_TEMPLATE)
        return template.render(
            package=description.package,
            service_name=description.service_name,
            dispatch_cases=dispatch_cases,
            method_tests=method_tests,
        )
    except TemplateError as e:
        raise GenerationError(f"Failed to render test runner for '{description.service_name}': {e}") from e
