from __future__ import annotations

from flaunt.collect import collect_problems, parse_solving
from flaunt.config import FlauntConfig, FlauntSettings, load_config, load_settings
from flaunt.declarations import Header, fold_declarations, read_header
from flaunt.lexer import Lexer, ScanState, Token, TokenKind, strip_prefix
from flaunt.render import render_report, render_solvings_table
from flaunt.schemas import Difficulty, Problem, Solving

__all__ = [
    "__version__",
    # Tokenizer
    "Lexer",
    "ScanState",
    "Token",
    "TokenKind",
    "strip_prefix",
    # Declarations
    "Header",
    "fold_declarations",
    "read_header",
    # Schemas
    "Difficulty",
    "Problem",
    "Solving",
    # Collect / render
    "collect_problems",
    "parse_solving",
    "render_report",
    "render_solvings_table",
    # Config
    "FlauntConfig",
    "FlauntSettings",
    "load_config",
    "load_settings",
]

__version__ = "0.1.0"
