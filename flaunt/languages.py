from __future__ import annotations

from collections.abc import Mapping

DEFAULT_LANGUAGES: dict[str, str] = {
    "rs": "Rust",
    "cs": "C#",
    "go": "Go",
    "py": "Python",
    "js": "JS",
    "ts": "TS",
    "rb": "Ruby",
    "cpp": "C++",
    "c": "C",
    "sql": "SQL",
}

DEFAULT_PREFIX = "//"

DEFAULT_COMMENT_PREFIXES: dict[str, str] = {
    "sql": "--",
    "py": "##",
    "rb": "##",
}


def normalize_extension(ext: str) -> str:
    return str(ext or "").strip().lstrip(".").lower()


def language_for_extension(ext: str, *, overrides: Mapping[str, str] | None = None) -> str:
    key = normalize_extension(ext)
    if overrides and key in overrides:
        return overrides[key]
    return DEFAULT_LANGUAGES.get(key, key)


def comment_prefix_for_extension(
    ext: str, *, overrides: Mapping[str, str] | None = None
) -> str:
    key = normalize_extension(ext)
    if overrides and key in overrides:
        return overrides[key]
    return DEFAULT_COMMENT_PREFIXES.get(key, DEFAULT_PREFIX)
