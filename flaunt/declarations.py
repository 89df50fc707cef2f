from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from flaunt.lexer import Lexer, Token, TokenKind, strip_prefix

DeclarationPolicy = Literal["first", "last"]

_TRIPLE = (TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.VALUE)


@dataclass(frozen=True)
class Header:
    declarations: dict[str, str] = field(default_factory=dict)
    comment: str | None = None


def fold_declarations(
    tokens: Sequence[Token], *, policy: DeclarationPolicy = "last"
) -> dict[str, str]:
    """Fold IDENTIFIER/ASSIGN/VALUE triples into a mapping.

    Duplicate keys resolve by `policy`; triples with an empty key are dropped.
    """
    if policy not in ("first", "last"):
        raise ValueError(f"unknown declaration policy: {policy!r}")

    if len(tokens) % 3:
        raise ValueError(f"incomplete declaration: {len(tokens)} tokens")

    out: dict[str, str] = {}
    for i in range(0, len(tokens) - 2, 3):
        triple = tokens[i : i + 3]
        if tuple(t.kind for t in triple) != _TRIPLE:
            raise ValueError(f"token stream out of order at index {i}")
        key = triple[0].text.strip().lower()
        if not key:
            continue
        if policy == "first" and key in out:
            continue
        out[key] = triple[2].text
    return out


def read_header(
    lines: Iterable[str], *, prefix: str = "//", policy: DeclarationPolicy = "last"
) -> Header:
    lexer = Lexer(prefix)
    tokens: list[Token] = []
    comment: str | None = None
    first = True
    for line in lines:
        body = strip_prefix(line, prefix)
        if body is None:
            break
        line_tokens = lexer.scan_line(line)
        if first:
            text = body.strip()
            if not line_tokens and text:
                comment = text
            first = False
        tokens.extend(line_tokens)
    return Header(declarations=fold_declarations(tokens, policy=policy), comment=comment)
