"""Sass prelude compilation."""

from __future__ import annotations

import logging
from pathlib import Path

from bankthemes.themes.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


def compile_style_prelude(
    variables_path: Path,
    mixins_path: Path,
    fs: FileSystem | None = None,
) -> str:
    """Theme variables followed by shared mixins, prepended to every stylesheet.

    Either file may be absent; it then contributes an empty string.
    """
    fs = fs or LocalFileSystem()
    variables = _read_optional(variables_path, fs)
    mixins = _read_optional(mixins_path, fs)
    return f"{variables}\n{mixins}\n"


def _read_optional(path: Path, fs: FileSystem) -> str:
    content = fs.read_text(path)
    if content is None:
        logger.debug("style asset %s not found; using empty contribution", path)
        return ""
    return content
