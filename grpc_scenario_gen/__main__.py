"""
Command-line entry point.

Usage:
    python -m grpc_scenario_gen service.json                 # writes to $HARNESS_OUTPUT_DIR
    python -m grpc_scenario_gen service.json -o ./pb         # writes to ./pb
    python -m grpc_scenario_gen service.json --stdout        # prints the runner only
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from grpc_scenario_gen import config
from grpc_scenario_gen.orchestrator import run_pipeline
from grpc_scenario_gen.spec_schema import ServiceDescription

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="grpc_scenario_gen",
        description="Generate a scenario-driven Go test runner for a gRPC service",
    )
    parser.add_argument("service_json", type=Path, help="Path to the service description JSON")
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=None,
        help=f"Directory to write files into (default: {config.OUTPUT_DIR})",
    )
    parser.add_argument("--no-scenario", action="store_true", help="Do not emit a scenario template")
    parser.add_argument("--stdout", action="store_true", help="Print the runner instead of writing files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, stream=sys.stderr)

    try:
        description = ServiceDescription.model_validate_json(
            args.service_json.read_text(encoding="utf-8")
        )
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.service_json}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except ValidationError as e:
        print(f"Malformed service description {args.service_json}:\n{e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    output_dir = None if args.stdout else (args.output_dir or config.OUTPUT_DIR)
    result = run_pipeline(
        description,
        output_dir=output_dir,
        include_scenario_template=not args.no_scenario,
    )

    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)

    if not result.success:
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        return EXIT_FAILED

    if args.stdout:
        sys.stdout.write(result.code)
    else:
        for path in result.written_paths:
            print(path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
