"""
Harness Assembler — writes generated files to disk.

Takes the file dict built by the orchestrator (filename → content) and
writes every entry under an output directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_harness_files(files: dict[str, str], output_dir: Path) -> list[Path]:
    """
    Write generated files into output_dir.

    Args:
        files: Dict mapping relative paths to file contents.
        output_dir: Directory to write into. Created if missing.

    Returns:
        Paths of the written files, in the order of `files`.

    Raises:
        ValueError: if a relative path points outside output_dir.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    root = output_dir.resolve()

    written: list[Path] = []
    for relative_path, content in files.items():
        full_path = (output_dir / relative_path).resolve()
        if root not in full_path.parents:
            raise ValueError(f"Refusing to write outside {output_dir}: '{relative_path}'")
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {full_path} ({len(content)} chars)")
        written.append(full_path)

    return written
