"""icongen batch build engine."""

from icongen.engine.config import PipelineConfig
from icongen.engine.context import IconContext
from icongen.engine.pipeline import BuildError, Pipeline, SourceError

__all__ = [
    "PipelineConfig",
    "IconContext",
    "Pipeline",
    "SourceError",
    "BuildError",
]
