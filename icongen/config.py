"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from icongen.svg.transform import TransformMode
from icongen.svg.vector_drawable import THEME_FILL_COLOR
from icongen.tools.external import DEFAULT_FIXER_COMMAND, DEFAULT_VECTOR_DRAWABLE_COMMAND


class Settings(BaseSettings):
    log_level: str = "info"

    # Source and output locations (relative to the working directory)
    icons_dir: str = "./assets/icons"
    output_dir: str = "./assets/generated-icons"

    # External tools
    fixer_command: str = DEFAULT_FIXER_COMMAND
    vector_drawable_command: str = DEFAULT_VECTOR_DRAWABLE_COMMAND

    android_fill_color: str = THEME_FILL_COLOR
    transform_mode: TransformMode = TransformMode.POSITIONAL

    model_config = {"env_prefix": "ICONGEN_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
