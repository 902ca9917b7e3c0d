"""Xcode asset catalog layout — Icons.xcassets with one .symbolset per icon."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CATALOG_INFO: dict[str, Any] = {"author": "xcode", "version": 1}


def ios_symbol_name(icon_name: str) -> str:
    """iOS symbol names use dots where source files use hyphens."""
    return icon_name.replace("-", ".")


def android_drawable_name(icon_name: str) -> str:
    """Android resource names must be identifiers: ``ic_`` prefix, underscores."""
    return f"ic_{icon_name.replace('-', '_')}.xml"


def _write_contents(directory: Path, contents: dict[str, Any]) -> Path:
    contents_path = directory / "Contents.json"
    contents_path.write_text(json.dumps(contents, indent=2), encoding="utf-8")
    return contents_path


def write_catalog(catalog_dir: Path) -> Path:
    catalog_dir.mkdir(parents=True, exist_ok=True)
    return _write_contents(catalog_dir, {"info": dict(CATALOG_INFO)})


def symbolset_dir(catalog_dir: Path, icon_name: str) -> Path:
    return catalog_dir / f"{ios_symbol_name(icon_name)}.symbolset"


def write_symbolset(catalog_dir: Path, icon_name: str, filename: str, symbol_svg: str) -> Path:
    """Create ``<name>.symbolset`` holding Contents.json and the symbol SVG."""
    target = symbolset_dir(catalog_dir, icon_name)
    target.mkdir(parents=True, exist_ok=True)

    _write_contents(
        target,
        {
            "info": dict(CATALOG_INFO),
            "symbols": [{"idiom": "universal", "filename": filename}],
        },
    )
    (target / filename).write_text(symbol_svg, encoding="utf-8")

    logger.debug("Wrote symbolset %s", target.name)
    return target
