"""Build report models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IconResult(BaseModel):
    name: str
    source: str
    drawable: str | None = None
    symbolset: str | None = None
    completed_steps: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None


class BuildReport(BaseModel):
    android_dir: str
    catalog_dir: str
    icons: list[IconResult] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @property
    def android(self) -> list[str]:
        return [r.drawable for r in self.icons if r.drawable]

    @property
    def ios(self) -> list[str]:
        return [r.symbolset for r in self.icons if r.symbolset]

    @property
    def errors(self) -> dict[str, str]:
        return {r.name: r.error for r in self.icons if r.error}

    @property
    def succeeded(self) -> bool:
        return bool(self.android) and bool(self.ios)
