from __future__ import annotations

import pytest

from flaunt.lexer import Lexer, ScanState, Token, TokenKind, strip_prefix


def _kinds(line: str, *, prefix: str = "//") -> list[tuple[str, str]]:
    return [(t.kind.value, t.text) for t in Lexer(prefix).scan_line(line)]


def test_single_declaration():
    assert Lexer().scan_line("// a: 1") == [
        Token(TokenKind.IDENTIFIER, "a"),
        Token(TokenKind.ASSIGN, ":"),
        Token(TokenKind.VALUE, "1"),
    ]


def test_multiple_declarations_ignore_whitespace_around_delimiters():
    assert _kinds("// a : 1 , b: two") == [
        ("identifier", "a"),
        ("assign", ":"),
        ("value", "1"),
        ("identifier", "b"),
        ("assign", ":"),
        ("value", "two"),
    ]


def test_spacing_is_optional():
    assert _kinds("// key:value") == _kinds("// key: value")


def test_value_keeps_inner_colon_and_spaces():
    assert _kinds("// note: a:b") == [("identifier", "note"), ("assign", ":"), ("value", "a:b")]
    assert _kinds("// comment: two pointers ,x: y")[2] == ("value", "two pointers")


def test_identifier_keeps_inner_spaces():
    assert _kinds("//  time complexity :O(n)")[:1] == [("identifier", "time complexity")]


@pytest.mark.parametrize("line", ["", "fn main() {}", " // a: 1", "-- a: 1", "/ a: 1"])
def test_non_matching_line_yields_nothing(line: str):
    lexer = Lexer()
    assert lexer.scan_line(line) == []
    assert lexer.scan_line(line) == []
    assert lexer.state == ScanState.AWAITING_IDENTIFIER


def test_prefix_only_line_is_empty():
    assert Lexer().scan_line("//") == []
    assert Lexer().scan_line("//   ") == []


def test_custom_prefix():
    assert _kinds("-- language: sql", prefix="--") == [
        ("identifier", "language"),
        ("assign", ":"),
        ("value", "sql"),
    ]
    assert _kinds("// language: sql", prefix="--") == []


def test_unterminated_identifier_is_dropped():
    assert _kinds("// just a note") == []
    assert _kinds("// a: 1, dangling") == [("identifier", "a"), ("assign", ":"), ("value", "1")]


def test_identifier_without_colon_before_comma_is_dropped():
    assert _kinds("// junk, a: 1") == [("identifier", "a"), ("assign", ":"), ("value", "1")]


def test_empty_identifier_and_value_are_emitted():
    assert _kinds("// : x") == [("identifier", ""), ("assign", ":"), ("value", "x")]
    assert _kinds("// a:") == [("identifier", "a"), ("assign", ":"), ("value", "")]
    assert _kinds("// a: , b: 2") == [
        ("identifier", "a"),
        ("assign", ":"),
        ("value", ""),
        ("identifier", "b"),
        ("assign", ":"),
        ("value", "2"),
    ]


def test_stray_commas_are_skipped():
    assert _kinds("// , a: 1,,") == [("identifier", "a"), ("assign", ":"), ("value", "1")]


def test_trailing_newline_is_not_part_of_value():
    assert _kinds("// a: 1\n") == [("identifier", "a"), ("assign", ":"), ("value", "1")]
    assert _kinds("// a: 1\r\n")[-1] == ("value", "1")


def test_state_resets_after_each_line():
    lexer = Lexer()
    lexer.scan_line("// half")
    assert lexer.state == ScanState.AWAITING_IDENTIFIER
    assert lexer.scan_line("// b: 2") == [
        Token(TokenKind.IDENTIFIER, "b"),
        Token(TokenKind.ASSIGN, ":"),
        Token(TokenKind.VALUE, "2"),
    ]


def test_fresh_instance_reproduces_token_sequence():
    lines = ["// a: 1, b: 2", "code", "// c : three", "//"]

    def run() -> list[Token]:
        lexer = Lexer()
        out: list[Token] = []
        for line in lines:
            out.extend(lexer.scan_line(line))
        return out

    assert run() == run()


def test_empty_prefix_rejected():
    with pytest.raises(ValueError, match="prefix"):
        Lexer("")


def test_strip_prefix():
    assert strip_prefix("// a", "//") == " a"
    assert strip_prefix("//", "//") == ""
    assert strip_prefix("# a", "//") is None
