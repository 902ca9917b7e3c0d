"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from icongen import __version__
from icongen.config import settings
from icongen.engine import BuildError, Pipeline, PipelineConfig, SourceError
from icongen.plugin import InstallError, install_icons
from icongen.plugin.installer import DEFAULT_ANDROID_SOURCE, DEFAULT_IOS_SOURCE
from icongen.svg.slots import SLOTS, UnknownSlotError
from icongen.svg.transform import TransformMode, transform_paths_for_slot

logger = logging.getLogger("icongen")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icongen",
        description="Generate Android vector drawables and iOS SF Symbols from SVG icons",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="Override ICONGEN_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    modes = [m.value for m in TransformMode]

    build = sub.add_parser("build", help="Process every SVG in the icons directory")
    build.add_argument("--icons-dir", type=Path, default=None)
    build.add_argument("--output-dir", type=Path, default=None)
    build.add_argument("--mode", choices=modes, default=None)

    install = sub.add_parser("install", help="Copy generated icons into an app project")
    install.add_argument("project_root", type=Path)
    install.add_argument("--android", default=DEFAULT_ANDROID_SOURCE)
    install.add_argument("--ios", default=DEFAULT_IOS_SOURCE)
    install.add_argument("--skip-android", action="store_true")
    install.add_argument("--skip-ios", action="store_true")
    install.add_argument("--project-name", default="")

    transform = sub.add_parser("transform", help="Print the slot path data for one SVG")
    transform.add_argument("svg", type=Path)
    transform.add_argument("--slot", type=int, default=1, help=f"One of {sorted(SLOTS)}")
    transform.add_argument("--mode", choices=modes, default=None)

    return parser


def _run_build(args: argparse.Namespace) -> int:
    config = PipelineConfig.from_settings(settings)
    if args.icons_dir is not None:
        config.icons_dir = args.icons_dir
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    if args.mode is not None:
        config.transform_mode = TransformMode(args.mode)

    report = Pipeline(config).run()
    for name, error in report.errors.items():
        logger.error("  %s: %s", name, error)
    return 0


def _run_install(args: argparse.Namespace) -> int:
    install_icons(
        args.project_root,
        android=None if args.skip_android else args.android,
        ios=None if args.skip_ios else args.ios,
        project_name=args.project_name,
    )
    return 0


def _run_transform(args: argparse.Namespace) -> int:
    mode = TransformMode(args.mode) if args.mode is not None else settings.transform_mode
    svg_text = args.svg.read_text(encoding="utf-8")
    print(transform_paths_for_slot(svg_text, args.slot, mode))
    return 0


_COMMANDS = {
    "build": _run_build,
    "install": _run_install,
    "transform": _run_transform,
}


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level or settings.log_level)

    try:
        return _COMMANDS[args.command](args)
    except (SourceError, BuildError, InstallError, UnknownSlotError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
