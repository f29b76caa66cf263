"""
  Lisp Reader: tokenizer and parser

- `(` and `)` are always single-character tokens
- any other run of non-whitespace characters is one token
- tokens that fully match a signed base-10 integer become Numbers,
  everything else becomes a Symbol
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterable, Iterator, NamedTuple, Optional

from lispy.types.errors import ParseError
from lispy.types.expression import Expression, List, Number, Symbol


TOKEN_RE = re.compile(r"(?P<lparen>\()|(?P<rparen>\))|(?P<atom>[^\s()]+)")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Token(NamedTuple):
    value: str
    offset: Optional[int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (value, offset) pairs, skipping whitespace."""
    for m in TOKEN_RE.finditer(source):
        yield Token(m.group(0), m.start())


def tokenize(source: str) -> deque[str]:
    return deque(tok.value for tok in lex(source))


def atom(token: str) -> Expression:
    if INTEGER_RE.fullmatch(token):
        return Number(int(token))
    return Symbol(token)


class TokenStream:
    """Destructive, front-consuming view over a token sequence.

    A deque passed in is consumed in place, so callers can keep reading
    further forms from the same sequence.
    """

    def __init__(self, tokens: Iterable[str | Token]):
        if isinstance(tokens, deque):
            self.tokens: deque[str | Token] = tokens
        else:
            self.tokens = deque(tokens)

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(lex(source))

    def peek(self) -> Optional[Token]:
        return _as_token(self.tokens[0]) if self.tokens else None

    def advance(self) -> Token:
        if not self.tokens:
            raise ParseError("unexpected end of input")
        return _as_token(self.tokens.popleft())

    def __len__(self) -> int:
        return len(self.tokens)

    def parse_expr(self) -> Expression:
        """Parse one complete form; nesting deeper than the call stack is a ParseError."""
        first = self.peek()
        try:
            return self._parse_form()
        except RecursionError:
            raise ParseError("nesting too deep", first.offset if first else None) from None

    def _parse_form(self) -> Expression:
        tok = self.advance()

        if tok.value == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise ParseError("unexpected end of input: unmatched '('", tok.offset)
                if nxt.value == ")":
                    self.advance()
                    break
                items.append(self._parse_form())
            return List(tuple(items))

        if tok.value == ")":
            raise ParseError("unexpected ')'", tok.offset)

        return atom(tok.value)

    def parse_all(self) -> Iterator[Expression]:
        while self.tokens:
            yield self.parse_expr()


def _as_token(tok: str | Token) -> Token:
    return tok if isinstance(tok, Token) else Token(tok, None)


def _as_stream(tokens: TokenStream | Iterable[str | Token]) -> TokenStream:
    return tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)


def parse(tokens: TokenStream | Iterable[str | Token]) -> Expression:
    """Parse the next complete form from the front of `tokens`."""
    return _as_stream(tokens).parse_expr()


def parse_all(tokens: TokenStream | Iterable[str | Token]) -> Iterator[Expression]:
    return _as_stream(tokens).parse_all()
