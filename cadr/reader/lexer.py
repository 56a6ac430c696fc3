"""
  Lexer: source text -> list of tokens

- Works one line at a time and emits a NEWLINE token after every line.
- Each lexeme is classified against an ordered list of patterns; anything
  that is not a paren, quote mark, integer, boolean or string is a symbol.
- Strings are double-quoted, may contain spaces and parentheses, have no
  escapes and must close on the line they open on.
- ';' starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from cadr.errors import CadrSyntaxError


class TokenKind(Enum):
    OPEN_PAREN = "open-paren"
    CLOSE_PAREN = "close-paren"
    QUOTE = "quote-mark"
    INTEGER = "integer-literal"
    BOOLEAN = "boolean-literal"
    STRING = "string-literal"
    NEWLINE = "end-of-line"
    SYMBOL = "symbol"

    def __str__(self) -> str:
        return self.value


class Token(NamedTuple):
    kind: TokenKind
    text: str


TOKEN_RE = re.compile(
    r"(?P<comment>;.*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"[^"]*")'  # double-quoted string, no escapes
    r'|(?P<broken_string>"[^"]*$)'  # opening quote with no close on this line
    r'|(?P<atom>[^\s()\'";]+)'  # everything else up to a delimiter
)

# Atom classification, in priority order. SYMBOL is the fallback.
ATOM_PATTERNS: list[tuple[TokenKind, re.Pattern]] = [
    (TokenKind.INTEGER, re.compile(r"[+-]?\d+")),
    (TokenKind.BOOLEAN, re.compile(r"#[tf]")),
]

_FIXED_KINDS = {
    "lparen": TokenKind.OPEN_PAREN,
    "rparen": TokenKind.CLOSE_PAREN,
    "quote": TokenKind.QUOTE,
    "string": TokenKind.STRING,
}


def classify(lexeme: str) -> TokenKind:
    for kind, pattern in ATOM_PATTERNS:
        if pattern.fullmatch(lexeme):
            return kind
    return TokenKind.SYMBOL


def lex_line(line: str, line_no: int = 1) -> list[Token]:
    """Tokens of a single line, without the trailing NEWLINE."""
    tokens: list[Token] = []
    pos = 0
    n = len(line)
    while pos < n:
        if line[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(line, pos)
        if m is None:
            raise CadrSyntaxError(f"Unexpected char at {line_no}:{pos + 1}: {line[pos]!r}")
        group = m.lastgroup
        text = m.group(group)
        pos = m.end()
        if group == "comment":
            break
        if group == "broken_string":
            raise CadrSyntaxError(f"Unterminated string at {line_no}:{m.start() + 1}: {text}")
        if group == "atom":
            tokens.append(Token(classify(text), text))
        else:
            tokens.append(Token(_FIXED_KINDS[group], text))
    return tokens


def lex(source: str) -> list[Token]:
    """Tokenize `source` into a fully materialized list."""
    tokens: list[Token] = []
    for line_no, line in enumerate(source.splitlines(), start=1):
        tokens.extend(lex_line(line, line_no))
        tokens.append(Token(TokenKind.NEWLINE, "\n"))
    return tokens
