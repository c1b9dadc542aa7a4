"""Command line bootstrap for a themed build."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Mapping, Sequence

from bankthemes.config.settings import BuildSettings
from bankthemes.core.build_config import BuildConfigWriter
from bankthemes.errors import BuildError, format_error_for_user
from bankthemes.themes.fs import LocalFileSystem
from bankthemes.themes.loader import load_host_config, load_theme_catalog
from bankthemes.themes.registry import ThemeRegistry
from bankthemes.themes.service import ThemeBuildService

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _configure_build_logger(verbose: int, log_file: str | None) -> logging.Logger:
    logger = logging.getLogger("bankthemes")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter(_LOG_FORMAT))
    stream.setLevel(logging.DEBUG if verbose > 1 else logging.INFO if verbose else logging.WARNING)
    logger.addHandler(stream)
    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logging.getLogger("bankthemes.build")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bankthemes",
        description="Resolve themed component aliases and write the host build config.",
    )
    p.add_argument("--project-root", help="project containing src/components (default: cwd)")
    p.add_argument("--theme", help="theme to build; overrides BUILD_THEME")
    p.add_argument("--host-config", help="existing host config (YAML/JSON) to merge into")
    p.add_argument("--output", help="output file; .json writes JSON, anything else YAML")
    p.add_argument("--print", dest="print_only", action="store_true",
                   help="print the config to stdout instead of writing a file")
    p.add_argument("--log-file", help="also log to this rotating file")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def run_app(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Resolve the build theme and emit its configuration. Returns the exit code."""
    args = build_parser().parse_args(argv)
    logger = _configure_build_logger(args.verbose, args.log_file)

    settings = BuildSettings(environ=environ, project_root=args.project_root)
    if args.theme is not None:
        settings.build_theme = args.theme
    if args.output:
        settings.output_path = args.output

    try:
        themes_file = settings.themes_file
        registry = ThemeRegistry(load_theme_catalog(themes_file)) if themes_file else ThemeRegistry()
        service = ThemeBuildService(settings, registry, fs=LocalFileSystem())
        theme = service.resolve_theme()
        logger.info("building theme=%s project_root=%s", theme.name, settings.project_root)
        build = service.build(theme)

        host_config = load_host_config(Path(args.host_config)) if args.host_config else None
        writer = BuildConfigWriter(settings)
        if args.print_only:
            document = writer.render(build, host_config)
            sys.stdout.write(writer.dumps(document, as_json=_wants_json(args.output)))
            return 0
        path = writer.generate(build, host_config)
    except BuildError as exc:
        logger.error("build configuration failed: %s", exc.to_dict())
        sys.stderr.write(format_error_for_user(exc) + "\n")
        return 1

    logger.info("wrote %s", path)
    sys.stdout.write(f"{path}\n")
    return 0


def main() -> None:
    sys.exit(run_app())


def _wants_json(output: str | None) -> bool:
    return bool(output) and output.lower().endswith(".json")
