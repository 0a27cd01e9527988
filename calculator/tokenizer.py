import enum
import logging
from dataclasses import dataclass
from typing import Optional

from calculator.errors import UnexpectedCharacter
from calculator.utils import PrintableEnum

logger = logging.getLogger(__name__)


class TokenKind(PrintableEnum):
    INTEGER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.kind}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

ASCII_WHITESPACE = " \t\n\r\x0b\x0c"
ASCII_DIGITS = "0123456789"


def _is_whitespace(c: Optional[str]) -> bool:
    return c is not None and c in ASCII_WHITESPACE


def _is_digit(c: Optional[str]) -> bool:
    return c is not None and c in ASCII_DIGITS


class Scanner:
    """Produces tokens from a single line of source on demand.

    ``pos`` counts the characters consumed so far and is what diagnostics
    report. It only ever moves forward.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self._pos = 0
        self._current_char: Optional[str] = code[0] if code else None

    @property
    def pos(self) -> int:
        return self._pos

    def _advance(self) -> str:
        start = self._pos
        if self._current_char is not None:
            self._pos += 1
        self._current_char = self.code[self._pos] if self._pos < len(self.code) else None
        return self.code[start : self._pos]

    def _skip_whitespace(self) -> None:
        while _is_whitespace(self._current_char):
            self._advance()

    def _integer(self) -> str:
        start = self._pos
        while _is_digit(self._current_char):
            self._advance()
        return self.code[start : self._pos]

    def next_token(self) -> Token:
        self._skip_whitespace()

        c = self._current_char
        if c is None:
            token = Token(kind=TokenKind.EOF, lexeme="")
        elif _is_digit(c):
            token = Token(kind=TokenKind.INTEGER, lexeme=self._integer())
        elif c in SINGLE_CHAR_TOKENS:
            token = Token(kind=SINGLE_CHAR_TOKENS[c], lexeme=self._advance())
        else:
            raise UnexpectedCharacter(character=c, pos=self._pos)

        logger.debug("token %s, position %d", token, self._pos)
        return token


def tokenize(code: str) -> list[Token]:
    scanner = Scanner(code)
    tokens: list[Token] = []
    while True:
        token = scanner.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens
