"""Pipeline configuration — where icons are read from and artifacts written to."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from icongen.config import Settings
from icongen.svg.transform import TransformMode
from icongen.svg.vector_drawable import THEME_FILL_COLOR
from icongen.tools.external import DEFAULT_FIXER_COMMAND, DEFAULT_VECTOR_DRAWABLE_COMMAND

CATALOG_NAME = "Icons.xcassets"


@dataclass
class PipelineConfig:
    """Directory layout and tool settings for one build."""

    icons_dir: Path = field(default_factory=lambda: Path("./assets/icons"))
    output_dir: Path = field(default_factory=lambda: Path("./assets/generated-icons"))

    fixer_command: str = DEFAULT_FIXER_COMMAND
    vector_drawable_command: str = DEFAULT_VECTOR_DRAWABLE_COMMAND

    # Replaces every android:fillColor in generated drawables
    fill_color: str = THEME_FILL_COLOR
    transform_mode: TransformMode = TransformMode.POSITIONAL

    @property
    def temp_dir(self) -> Path:
        return self.output_dir / "temp"

    @property
    def android_dir(self) -> Path:
        return self.output_dir / "android"

    @property
    def ios_dir(self) -> Path:
        return self.output_dir / "ios"

    @property
    def catalog_dir(self) -> Path:
        return self.ios_dir / CATALOG_NAME

    @classmethod
    def from_settings(cls, settings: Settings) -> PipelineConfig:
        return cls(
            icons_dir=Path(settings.icons_dir),
            output_dir=Path(settings.output_dir),
            fixer_command=settings.fixer_command,
            vector_drawable_command=settings.vector_drawable_command,
            fill_color=settings.android_fill_color,
            transform_mode=settings.transform_mode,
        )
