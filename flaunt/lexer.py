from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    IDENTIFIER = "identifier"
    ASSIGN = "assign"
    VALUE = "value"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str


class ScanState(str, Enum):
    AWAITING_IDENTIFIER = "awaiting_identifier"
    SCANNING_IDENTIFIER = "scanning_identifier"
    AWAITING_ASSIGN = "awaiting_assign"
    SCANNING_ASSIGN = "scanning_assign"
    AWAITING_VALUE = "awaiting_value"
    SCANNING_VALUE = "scanning_value"


ASSIGN = ":"
SEPARATOR = ","


def strip_prefix(line: str, prefix: str) -> str | None:
    """Return what follows `prefix` in `line`, or None when the line is not a metadata comment."""
    if not line.startswith(prefix):
        return None
    return line[len(prefix) :]


class Lexer:
    """Scans `key: value, key: value` declarations out of comment lines.

    One instance is fed the lines of a single file in order. A line that does
    not start with the prefix yields no tokens and resets the session. Every
    declaration must fit on one line, so the session is back in
    AWAITING_IDENTIFIER after each call.
    """

    def __init__(self, prefix: str = "//") -> None:
        if not prefix:
            raise ValueError("comment prefix must be non-empty")
        self.prefix = prefix
        self.state = ScanState.AWAITING_IDENTIFIER
        self._start = 0

    def reset(self) -> None:
        self.state = ScanState.AWAITING_IDENTIFIER
        self._start = 0

    def scan_line(self, line: str) -> list[Token]:
        body = strip_prefix(line.rstrip("\r\n"), self.prefix)
        if body is None:
            self.reset()
            return []

        out: list[Token] = []
        pos = 0
        while pos < len(body):
            ch = body[pos]
            state = self.state

            if state == ScanState.AWAITING_IDENTIFIER:
                if ch.isspace() or ch == SEPARATOR:
                    pos += 1
                    continue
                self._start = pos
                self.state = ScanState.SCANNING_IDENTIFIER
                # The first character is re-read in SCANNING_IDENTIFIER so a
                # leading ':' produces an empty identifier.
                continue

            if state == ScanState.SCANNING_IDENTIFIER:
                if ch == ASSIGN:
                    out.append(Token(TokenKind.IDENTIFIER, body[self._start : pos].strip()))
                    self.state = ScanState.AWAITING_ASSIGN
                    continue
                if ch == SEPARATOR:
                    # no colon before the comma: drop the partial declaration
                    self.state = ScanState.AWAITING_IDENTIFIER
                pos += 1
                continue

            if state == ScanState.AWAITING_ASSIGN:
                if ch.isspace():
                    pos += 1
                    continue
                self.state = ScanState.SCANNING_ASSIGN
                continue

            if state == ScanState.SCANNING_ASSIGN:
                out.append(Token(TokenKind.ASSIGN, ch))
                self.state = ScanState.AWAITING_VALUE
                pos += 1
                continue

            if state == ScanState.AWAITING_VALUE:
                if ch.isspace():
                    pos += 1
                    continue
                if ch == SEPARATOR:
                    out.append(Token(TokenKind.VALUE, ""))
                    self.state = ScanState.AWAITING_IDENTIFIER
                    pos += 1
                    continue
                self._start = pos
                self.state = ScanState.SCANNING_VALUE
                pos += 1
                continue

            # SCANNING_VALUE
            if ch == SEPARATOR:
                out.append(Token(TokenKind.VALUE, body[self._start : pos].strip()))
                self.state = ScanState.AWAITING_IDENTIFIER
            pos += 1

        self._finish_line(body, out)
        return out

    def _finish_line(self, body: str, out: list[Token]) -> None:
        if self.state == ScanState.SCANNING_VALUE:
            out.append(Token(TokenKind.VALUE, body[self._start :].strip()))
        elif self.state == ScanState.AWAITING_VALUE:
            out.append(Token(TokenKind.VALUE, ""))
        self.reset()
