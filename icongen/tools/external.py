"""External tool invocation — oslllo-svg-fixer and svg2vectordrawable.

Both tools are Node CLIs run through ``npx`` by default. Commands are
configurable so a globally installed binary can be used instead.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FIXER_COMMAND = "npx oslllo-svg-fixer"
DEFAULT_VECTOR_DRAWABLE_COMMAND = "npx svg2vectordrawable"


class ToolError(RuntimeError):
    """An external tool failed or did not produce its output."""

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr


def run_tool(command: str, args: list[str]) -> subprocess.CompletedProcess[str]:
    argv = shlex.split(command) + [str(a) for a in args]
    logger.debug("Running %s", shlex.join(argv))

    t0 = time.perf_counter()
    try:
        result = subprocess.run(argv, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ToolError(f"Executable not found: {argv[0]}", command=argv) from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise ToolError(
            f"{argv[0]} exited with status {e.returncode}: {stderr or 'no output'}",
            command=argv,
            stderr=stderr,
        ) from e

    logger.debug("  %s finished in %.1fms", argv[0], (time.perf_counter() - t0) * 1000)
    return result


def fix_svg(source: Path, destination_dir: Path, command: str = DEFAULT_FIXER_COMMAND) -> Path:
    """Repair an SVG's geometry; returns the path of the fixed copy."""
    run_tool(command, ["--source", source, "--destination", destination_dir, "--sp", "true"])

    fixed = destination_dir / source.name
    if not fixed.exists():
        raise ToolError(f"Fixed SVG file not found at: {fixed}")
    return fixed


def convert_to_vector_drawable(
    source: Path,
    output: Path,
    command: str = DEFAULT_VECTOR_DRAWABLE_COMMAND,
) -> Path:
    run_tool(command, ["-i", source, "-o", output])
    return output
