"""
Orchestrator — Chains the full pipeline:
  ServiceDescription → Review → CodeGenerator → ScenarioTemplate → HarnessAssembler

Each step is atomic. A failing step stops the pipeline and is reported in the
GenerationResult instead of raising, so callers get errors and warnings in one
place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from grpc_scenario_gen.code_generator import GenerationError, generate_test_code, harness_file_name
from grpc_scenario_gen.harness_assembler import write_harness_files
from grpc_scenario_gen.scenario_template import generate_scenario_template, scenario_file_name
from grpc_scenario_gen.spec_review import ServiceValidationError, validate_service
from grpc_scenario_gen.spec_schema import ServiceDescription

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result of the full generation pipeline."""
    success: bool
    code: str | None = None
    files: dict[str, str] = field(default_factory=dict)
    written_paths: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # True when the description was rejected by review, not by rendering
    rejected: bool = False


def run_pipeline(
    description: ServiceDescription,
    output_dir: Path | None = None,
    include_scenario_template: bool = True,
) -> GenerationResult:
    """
    Execute the full generation pipeline for one service description.

    Pipeline steps:
    1. Review: check the structural rules (collect warnings)
    2. CodeGenerator: description → Go test runner text
    3. ScenarioTemplate: description → starter scenario JSON (optional)
    4. HarnessAssembler: write files to output_dir (only if given)

    Args:
        description: The service to generate a runner for.
        output_dir: Where to write the files. Nothing is written when None.
        include_scenario_template: Also emit a starter scenario JSON file.

    Returns:
        GenerationResult with the generated files on success, or errors on failure.
    """
    # Step 1: Review
    logger.info(f"Step 1: Reviewing service description '{description.service_name}'...")
    try:
        validation = validate_service(description)
    except ServiceValidationError as e:
        logger.error(f"Service description rejected: {e.errors}")
        return GenerationResult(success=False, errors=e.errors, warnings=e.warnings, rejected=True)

    warnings = list(validation.warnings)
    for warning in warnings:
        logger.warning(f"Review warning: {warning}")

    # Step 2: Render the runner
    logger.info(f"Step 2: Rendering test runner for {len(description.methods)} methods...")
    try:
        code = generate_test_code(description)
    except GenerationError as e:
        logger.error(f"CodeGenerator failed: {e}")
        return GenerationResult(success=False, errors=[str(e)], warnings=warnings)

    files = {harness_file_name(description): code}

    # Step 3: Scenario template
    if include_scenario_template:
        logger.info("Step 3: Rendering scenario template...")
        files[scenario_file_name(description)] = generate_scenario_template(description)
    else:
        logger.info("Step 3: Skipped (include_scenario_template=False)")

    # Step 4: Write files
    written: list[Path] = []
    if output_dir is not None:
        logger.info(f"Step 4: Writing {len(files)} files to {output_dir}...")
        written = write_harness_files(files, output_dir)
    else:
        logger.info("Step 4: Skipped (no output directory)")

    return GenerationResult(
        success=True,
        code=code,
        files=files,
        written_paths=written,
        warnings=warnings,
    )
