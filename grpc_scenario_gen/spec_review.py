"""
Service Review — deterministic validation of service descriptions.

Pure Python checks (no I/O) run before any code is generated. The six
structural rules are independent predicates: every violation is collected
and reported, not just the first one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from grpc_scenario_gen.spec_schema import ServiceDescription

_GO_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
# Message types may be package-qualified, e.g. "pb.HelloRequest"
_GO_TYPE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class ServiceValidationError(ValueError):
    """Raised when a service description breaks one or more structural rules."""

    def __init__(self, errors: list[str], warnings: list[str] | None = None):
        self.errors = errors
        self.warnings = warnings or []
        super().__init__("Invalid service description: " + "; ".join(errors))


@dataclass
class ValidationResult:
    """Result of a review: valid with the reviewed description, or invalid with errors."""
    valid: bool
    description: ServiceDescription | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def review_service(description: ServiceDescription) -> ValidationResult:
    """
    Check a ServiceDescription against the structural rules.

    Errors (make the description invalid):
    1. Empty package
    2. Empty service name
    3. Empty method list
    4. Method with an empty name
    5. Method with an empty request type
    6. Method with an empty response type

    Warnings (reported, never fatal):
    - Names that are not valid Go identifiers
    - Unexported method names (gRPC client methods are always exported)
    - Duplicate method names

    Args:
        description: The service description to check.

    Returns:
        ValidationResult with validity status and any errors/warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    # ----- Service-level fields -----
    if not description.package:
        errors.append("package must not be empty")
    elif not _GO_IDENTIFIER.match(description.package):
        warnings.append(f"package '{description.package}' is not a valid Go identifier")

    if not description.service_name:
        errors.append("service_name must not be empty")
    elif not _GO_IDENTIFIER.match(description.service_name):
        warnings.append(f"service_name '{description.service_name}' is not a valid Go identifier")

    if not description.methods:
        errors.append("methods must contain at least one method")

    # ----- Per-method fields -----
    seen: set[str] = set()
    for i, method in enumerate(description.methods):
        if not method.name:
            errors.append(f"methods[{i}].name must not be empty")
        else:
            if not _GO_IDENTIFIER.match(method.name):
                warnings.append(f"methods[{i}].name '{method.name}' is not a valid Go identifier")
            elif not method.name[0].isupper():
                warnings.append(
                    f"methods[{i}].name '{method.name}' is not exported; "
                    f"the generated client call will not compile"
                )
            if method.name in seen:
                warnings.append(
                    f"methods[{i}].name '{method.name}' is declared more than once"
                )
            seen.add(method.name)

        if not method.request_type:
            errors.append(f"methods[{i}].request_type must not be empty")
        elif not _GO_TYPE_NAME.match(method.request_type):
            warnings.append(f"methods[{i}].request_type '{method.request_type}' is not a valid Go type name")

        if not method.response_type:
            errors.append(f"methods[{i}].response_type must not be empty")
        elif not _GO_TYPE_NAME.match(method.response_type):
            warnings.append(f"methods[{i}].response_type '{method.response_type}' is not a valid Go type name")

    # ----- Return result -----
    if errors:
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    return ValidationResult(valid=True, description=description, errors=[], warnings=warnings)


def validate_service(description: ServiceDescription) -> ValidationResult:
    """Review a description and raise ServiceValidationError if it is invalid."""
    result = review_service(description)
    if not result.valid:
        raise ServiceValidationError(result.errors, result.warnings)
    return result
