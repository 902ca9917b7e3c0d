"""Pipeline orchestrator — fixes, converts and packages every source icon in turn."""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from pathlib import Path

from icongen.engine.config import PipelineConfig
from icongen.engine.context import IconContext
from icongen.ios.asset_catalog import write_catalog, write_symbolset
from icongen.ios.template import render_symbol_svg
from icongen.models.report import BuildReport, IconResult
from icongen.svg.vector_drawable import recolor_drawable
from icongen.tools.external import ToolError, convert_to_vector_drawable, fix_svg

logger = logging.getLogger(__name__)

Step = Callable[[IconContext, PipelineConfig], None]


class SourceError(RuntimeError):
    """The icons directory is missing or holds no SVG files."""


class BuildError(RuntimeError):
    """Output directories could not be prepared."""


# ── Steps ────────────────────────────────────────────────────────────


def _require_fixed_svg(ctx: IconContext) -> Path:
    if ctx.fixed_svg is None:
        raise ToolError("fix step did not run")
    return ctx.fixed_svg


def fix_step(ctx: IconContext, config: PipelineConfig) -> None:
    ctx.fixed_svg = fix_svg(ctx.source, config.temp_dir, config.fixer_command)


def vector_drawable_step(ctx: IconContext, config: PipelineConfig) -> None:
    fixed_svg = _require_fixed_svg(ctx)
    output = config.android_dir / ctx.drawable_name
    convert_to_vector_drawable(fixed_svg, output, config.vector_drawable_command)


def recolor_step(ctx: IconContext, config: PipelineConfig) -> None:
    output = config.android_dir / ctx.drawable_name
    if not output.exists():
        message = f"Could not find the Vector Drawable at {output} for color modification"
        logger.warning(message)
        ctx.warnings.append(message)
        return
    recolor_drawable(output, config.fill_color)
    ctx.drawable = output


def symbolset_step(ctx: IconContext, config: PipelineConfig) -> None:
    fixed_svg = _require_fixed_svg(ctx)
    svg_text = fixed_svg.read_text(encoding="utf-8")
    symbol_svg = render_symbol_svg(svg_text, ctx.name, config.transform_mode)
    ctx.symbolset = write_symbolset(config.catalog_dir, ctx.name, ctx.filename, symbol_svg)


DEFAULT_STEPS: list[tuple[str, Step]] = [
    ("fix", fix_step),
    ("vector_drawable", vector_drawable_step),
    ("recolor", recolor_step),
    ("symbolset", symbolset_step),
]


# ── Orchestrator ─────────────────────────────────────────────────────


class Pipeline:
    """Runs the build steps for every SVG in the icons directory."""

    def __init__(
        self,
        config: PipelineConfig | None = None,
        steps: list[tuple[str, Step]] | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.steps = steps or DEFAULT_STEPS

    def discover_sources(self) -> list[Path]:
        icons_dir = self.config.icons_dir
        if not icons_dir.is_dir():
            raise SourceError(
                f"Icons directory '{icons_dir}' not found. Please create it and add your SVG icons."
            )

        sources = sorted(
            p for p in icons_dir.iterdir() if p.is_file() and p.suffix.lower() == ".svg"
        )
        if not sources:
            raise SourceError(f"No SVG files found in '{icons_dir}' directory. Please add some SVG icons.")
        return sources

    def prepare_output(self) -> None:
        try:
            for directory in (self.config.temp_dir, self.config.android_dir, self.config.ios_dir):
                directory.mkdir(parents=True, exist_ok=True)
            write_catalog(self.config.catalog_dir)
        except OSError as e:
            raise BuildError(f"Error creating directories: {e}") from e

    def run_icon(self, source: Path) -> IconContext:
        """Run every step for one icon; a tool failure stops this icon only."""
        ctx = IconContext(source=source)

        for name, step in self.steps:
            t0 = time.perf_counter()
            try:
                step(ctx, self.config)
            except ToolError as e:
                ctx.error = f"{name}: {e}"
                logger.error("  %s FAILED for %s: %s", name, ctx.name, e)
                break
            ctx.completed_steps.append(name)
            logger.debug("  %s completed in %.1fms", name, (time.perf_counter() - t0) * 1000)

        return ctx

    def cleanup(self) -> None:
        temp_dir = self.config.temp_dir
        if not temp_dir.exists():
            return
        try:
            shutil.rmtree(temp_dir)
        except OSError as e:
            logger.error("Error during cleanup of %s: %s", temp_dir, e)

    def run(self) -> BuildReport:
        """Build Android drawables and iOS symbolsets for every source icon."""
        start = time.perf_counter()

        sources = self.discover_sources()
        self.prepare_output()
        logger.info("Found %d SVG icons to process", len(sources))

        contexts: list[IconContext] = []
        try:
            for i, source in enumerate(sources, start=1):
                logger.info("Processing: [%d/%d] %s", i, len(sources), source.name)
                contexts.append(self.run_icon(source))
        finally:
            self.cleanup()

        report = BuildReport(
            android_dir=str(self.config.android_dir),
            catalog_dir=str(self.config.catalog_dir),
            icons=[_to_result(ctx) for ctx in contexts],
            processing_time_ms=(time.perf_counter() - start) * 1000,
        )

        if report.succeeded:
            logger.info("Successfully processed %d icons", len(report.android))
            logger.info("  Android: %s", report.android_dir)
            logger.info("  iOS: %s", report.catalog_dir)
        else:
            logger.warning("No icons were successfully processed")

        return report


def _to_result(ctx: IconContext) -> IconResult:
    return IconResult(
        name=ctx.name,
        source=str(ctx.source),
        drawable=str(ctx.drawable) if ctx.drawable else None,
        symbolset=str(ctx.symbolset) if ctx.symbolset else None,
        completed_steps=list(ctx.completed_steps),
        warnings=list(ctx.warnings),
        error=ctx.error,
    )
