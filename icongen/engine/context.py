"""IconContext — per-icon state flowing through the build steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from icongen.ios.asset_catalog import android_drawable_name, ios_symbol_name


@dataclass
class IconContext:
    """State for a single source icon."""

    source: Path
    # Fixed copy written by the SVG fixer
    fixed_svg: Path | None = None
    # Generated artifacts
    drawable: Path | None = None
    symbolset: Path | None = None
    completed_steps: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def name(self) -> str:
        return self.source.stem

    @property
    def filename(self) -> str:
        return self.source.name

    @property
    def ios_name(self) -> str:
        return ios_symbol_name(self.name)

    @property
    def drawable_name(self) -> str:
        return android_drawable_name(self.name)

    @property
    def failed(self) -> bool:
        return self.error is not None
