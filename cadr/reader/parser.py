"""
  Recursive-descent parser over a lexed token list.

    expr := QUOTE expr                 -> Quoted(expr)
          | '(' expr* ')'              -> Nil-terminated Pair chain, () -> Nil
          | '(' expr+ '.' expr ')'     -> Pair chain ending in the last expr
          | BOOLEAN | INTEGER | STRING | SYMBOL

NEWLINE tokens only separate forms; the cursor skips them.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from cadr.errors import CadrParseError
from cadr.reader.lexer import Token, TokenKind, lex
from cadr.types.literal import FALSE, TRUE, Integer, String
from cadr.types.nil import Nil
from cadr.types.node import Node
from cadr.types.pair import link
from cadr.types.procedure import Quoted
from cadr.types.symbol import Symbol

DOT = "."


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.index = 0

    def _skip_newlines(self) -> None:
        while self.index < len(self.tokens) and self.tokens[self.index].kind is TokenKind.NEWLINE:
            self.index += 1

    def at_end(self) -> bool:
        self._skip_newlines()
        return self.index >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        if self.at_end():
            return None
        return self.tokens[self.index]

    def advance(self, expected: Optional[TokenKind] = None) -> Token:
        """Consume the next non-NEWLINE token, checking its kind if `expected` is given."""
        token = self.peek()
        if token is None:
            raise CadrParseError(f"End of input, expecting {expected or 'an expression'}")
        if expected is not None and token.kind is not expected:
            raise CadrParseError(f"Expected {expected}, got {token.kind} {token.text!r}")
        self.index += 1
        return token

    def parse_expr(self) -> Node:
        token = self.advance()
        match token.kind:
            case TokenKind.QUOTE:
                return Quoted(self.parse_expr())
            case TokenKind.OPEN_PAREN:
                return self._parse_list()
            case TokenKind.BOOLEAN:
                return TRUE if token.text == "#t" else FALSE
            case TokenKind.INTEGER:
                return Integer(int(token.text))
            case TokenKind.STRING:
                return String(token.text[1:-1])
            case TokenKind.SYMBOL:
                return Symbol(token.text)
        raise CadrParseError(f"Unhandled token {token.kind} {token.text!r}")

    def _parse_list(self) -> Node:
        items: list[Node] = []
        while True:
            token = self.peek()
            if token is None:
                raise CadrParseError(f"End of input, expecting {TokenKind.CLOSE_PAREN}")
            if token.kind is TokenKind.CLOSE_PAREN:
                break
            if token.kind is TokenKind.SYMBOL and token.text == DOT and items:
                self.advance()
                tail = self.parse_expr()
                self.advance(TokenKind.CLOSE_PAREN)
                return link(items, tail)
            items.append(self.parse_expr())
        self.advance(TokenKind.CLOSE_PAREN)
        return link(items)

    def parse_all(self) -> Iterator[Node]:
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str) -> list[Node]:
    """Parse every top-level form in `source`."""
    return list(Parser(lex(source)).parse_all())


def parse_one(source: str) -> Node:
    """Parse the first form in `source`; Nil if there is none."""
    parser = Parser(lex(source))
    if parser.at_end():
        return Nil
    return parser.parse_expr()
