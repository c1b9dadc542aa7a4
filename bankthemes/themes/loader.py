"""Theme catalog and host configuration parsing."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Mapping

import yaml

from bankthemes.errors import BuildError, ErrorCode, InvalidConfigurationError, classify_os_error

_THEME_TOKEN_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")

_MAX_CATALOG_BYTES = 32 * 1024
_MAX_HOST_CONFIG_BYTES = 1024 * 1024
_MAX_THEME_TOKEN_LEN = 32
_MAX_BRAND_KEY_LEN = 64


def load_theme_catalog(path: Path) -> dict[str, str]:
    """Load a ``token: brand key`` mapping describing the closed theme set."""
    data = _load_mapping(path, max_bytes=_MAX_CATALOG_BYTES)
    themes = data.get("themes", data)
    if not isinstance(themes, Mapping) or not themes:
        raise InvalidConfigurationError(f"{path}: expected a non-empty mapping of themes", path=path)

    catalog: dict[str, str] = {}
    for raw_token, raw_brand in themes.items():
        if not isinstance(raw_token, str):
            raise InvalidConfigurationError(f"{path}: theme token {raw_token!r} must be a string", path=path)
        token = raw_token.strip().lower()
        if len(token) > _MAX_THEME_TOKEN_LEN or not _THEME_TOKEN_RE.match(token):
            raise InvalidConfigurationError(
                f"{path}: theme token must match pattern [a-z0-9-], got {raw_token!r}",
                path=path,
            )
        if token in catalog:
            raise InvalidConfigurationError(f"{path}: duplicate theme token {token!r}", path=path)
        catalog[token] = _brand_key(raw_brand, token, path)
    return catalog


def load_host_config(path: Path) -> dict[str, Any]:
    """Load the host build tool's existing configuration to merge into."""
    return dict(_load_mapping(path, max_bytes=_MAX_HOST_CONFIG_BYTES))


def _brand_key(value: object, token: str, path: Path) -> str:
    if value is None:
        return token.upper()
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigurationError(
            f"{path}: brand key for {token!r} must be a non-empty string", path=path
        )
    cleaned = value.strip()
    if len(cleaned) > _MAX_BRAND_KEY_LEN:
        raise InvalidConfigurationError(f"{path}: brand key for {token!r} is too long", path=path)
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise InvalidConfigurationError(
            f"{path}: brand key for {token!r} must be a single line string", path=path
        )
    return cleaned


def _load_mapping(path: Path, *, max_bytes: int) -> Mapping[str, Any]:
    content = _read_text_limited(path, max_bytes=max_bytes)
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidConfigurationError(f"Invalid document in {path}: {exc}", path=path) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"Expected a mapping in {path}", path=path)
    return data


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except FileNotFoundError as exc:
        raise BuildError(
            ErrorCode.CONFIG_MISSING, message=f"Configuration file not found: {path}", path=path
        ) from exc
    except OSError as exc:
        raise classify_os_error(exc, path, "stat") from exc
    if size > max_bytes:
        raise InvalidConfigurationError(f"{path}: file exceeds max size ({max_bytes} bytes)", path=path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidConfigurationError(f"Unable to decode {path}: {exc}", path=path) from exc
    except OSError as exc:
        raise classify_os_error(exc, path, "read") from exc
