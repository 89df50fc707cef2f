from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from flaunt.languages import normalize_extension

DEFAULT_PROBLEM_URL = "https://leetcode.com/problems/{slug}"


def repo_root() -> Path:
    # Project root is the directory that contains the `flaunt/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class FlauntSettings:
    folder: Path
    config_path: Path | None
    debug: bool


def _truthy(raw: str | None) -> bool:
    return (raw or "").strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> FlauntSettings:
    load_env()
    config_raw = (os.getenv("FLAUNT_CONFIG") or "").strip()
    return FlauntSettings(
        folder=Path((os.getenv("FLAUNT_FOLDER") or ".").strip() or "."),
        config_path=Path(config_raw) if config_raw else None,
        debug=_truthy(os.getenv("FLAUNT_DEBUG")),
    )


class FlauntConfig(BaseModel):
    # Extension (without the dot) -> display name, e.g. {"kt": "Kotlin"}.
    languages: dict[str, str] = Field(default_factory=dict)
    # Extension -> comment prefix that opens the metadata block, e.g. {"hs": "--"}.
    comment_prefixes: dict[str, str] = Field(default_factory=dict)
    declaration_policy: Literal["first", "last"] = "last"
    problem_url: str = DEFAULT_PROBLEM_URL

    @field_validator("languages", "comment_prefixes")
    @classmethod
    def _normalize_keys(cls, v: dict[str, str]) -> dict[str, str]:
        out: dict[str, str] = {}
        for k, val in v.items():
            key = normalize_extension(k)
            if not key:
                raise ValueError(f"invalid extension: {k!r}")
            value = str(val).strip()
            if not value:
                raise ValueError(f"empty value for extension {key!r}")
            out[key] = value
        return out

    @field_validator("problem_url")
    @classmethod
    def _url_has_slug(cls, v: str) -> str:
        if "{slug}" not in v:
            raise ValueError("problem_url must contain '{slug}'")
        try:
            v.format(slug="x")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"problem_url may only use the {{slug}} field: {e!r}") from e
        return v


def load_config(path: Path | None) -> FlauntConfig:
    if path is None:
        return FlauntConfig()
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return FlauntConfig()
    if not isinstance(data, dict):
        raise ValueError("config must be a YAML mapping")
    return FlauntConfig.model_validate(data)
