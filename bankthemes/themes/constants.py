"""Theme build constants."""

from __future__ import annotations

# Directory token -> brand key. Adding a bank means adding a row here.
THEME_BRAND_KEYS: dict[str, str] = {
    "bbog": "BBOG",
    "bocc": "BOCC",
    "bavv": "BAVV",
    "bpop": "BPOP",
}

DEFAULT_THEME = "BBOG"
THEME_ENV_VAR = "BUILD_THEME"

COMPONENT_ALIAS_PREFIX = "@/components"

# Candidate file names, highest precedence first. "{name}" is the component name.
THEME_CANDIDATE_NAMES: tuple[str, ...] = (
    "{name}.tsx",
    "{name}.ts",
    "index.tsx",
    "index.ts",
)
SHARED_CANDIDATE_NAMES: tuple[str, ...] = (
    "{name}.tsx",
    "{name}.ts",
)

# Exclusion rules only apply to modules matching this test.
SOURCE_FILE_TEST = r"\.(tsx?|jsx?)$"

RESOLVE_EXTENSIONS: tuple[str, ...] = (
    ".tsx",
    ".ts",
    ".jsx",
    ".js",
    ".json",
)

ENV_THEME_KEY = "NEXT_PUBLIC_THEME"
ENV_BRAND_KEY = "NEXT_PUBLIC_BRAND_KEY"
