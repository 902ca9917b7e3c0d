"""Install generated icons into a React Native / Expo app project.

Android drawables are copied into ``android/app/src/main/res/drawable``.
The iOS asset catalog is copied next to the Xcode project sources; adding it
to ``project.pbxproj`` is left to Xcode or the prebuild tooling, and a warning
is logged while the project does not reference it yet.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ANDROID_SOURCE = "./assets/generated-icons/android"
DEFAULT_IOS_SOURCE = "./assets/generated-icons/ios/Icons.xcassets"

ANDROID_DRAWABLE_DIR = Path("android/app/src/main/res/drawable")


class InstallError(RuntimeError):
    """A resource source directory is missing or not a directory."""


def _resolve_source(project_root: Path, source: str, platform: str) -> Path:
    source_path = (project_root / source).resolve()
    if not source_path.exists():
        raise InstallError(f"{platform} resource source directory not found: {source_path}")
    if not source_path.is_dir():
        raise InstallError(f"{platform} resource source path is not a directory: {source_path}")
    return source_path


def install_android_icons(project_root: Path, source: str | None) -> list[Path]:
    """Copy every file (not subdirectories) of ``source`` into the drawable dir."""
    if not source:
        return []

    source_path = _resolve_source(project_root, source, "Android")
    drawable_dir = project_root / ANDROID_DRAWABLE_DIR
    drawable_dir.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for entry in sorted(source_path.iterdir()):
        if entry.is_dir():
            continue
        dest = drawable_dir / entry.name
        shutil.copyfile(entry, dest)
        copied.append(dest)

    logger.info("Copied %d Android drawable(s) to %s", len(copied), drawable_dir)
    return copied


def install_ios_icons(project_root: Path, source: str | None, project_name: str) -> Path | None:
    """Copy the asset catalog into ``ios/<project_name>/``, replacing an older copy."""
    if not source:
        return None

    source_path = _resolve_source(project_root, source, "iOS")
    dest = project_root / "ios" / project_name / source_path.name
    if source_path == dest.resolve():
        logger.info("Asset catalog already installed at %s", dest)
    else:
        if dest.exists():
            shutil.rmtree(dest)
        shutil.copytree(source_path, dest)
        logger.info("Copied asset catalog to %s", dest)

    pbxproj = project_root / "ios" / f"{project_name}.xcodeproj" / "project.pbxproj"
    if pbxproj.exists() and source_path.name not in pbxproj.read_text(encoding="utf-8"):
        logger.warning(
            "%s is not referenced by %s; add it to the %s group in Xcode",
            source_path.name,
            pbxproj,
            project_name,
        )
    return dest


def install_icons(
    project_root: Path,
    android: str | None = DEFAULT_ANDROID_SOURCE,
    ios: str | None = DEFAULT_IOS_SOURCE,
    project_name: str = "",
) -> tuple[list[Path], Path | None]:
    """Install Android then iOS resources. A ``None`` source skips that platform."""
    copied = install_android_icons(project_root, android)
    catalog = None
    if ios:
        if not project_name:
            project_name = _guess_project_name(project_root)
        catalog = install_ios_icons(project_root, ios, project_name)
    return copied, catalog


def _guess_project_name(project_root: Path) -> str:
    """Name of the single ``*.xcodeproj`` under ``ios/``."""
    projects = sorted((project_root / "ios").glob("*.xcodeproj"))
    if len(projects) != 1:
        raise InstallError(
            f"Cannot determine the iOS project name from {project_root / 'ios'}; pass project_name"
        )
    return projects[0].stem
