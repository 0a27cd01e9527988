"""Syntax errors reported by the scanner and the parser.

The taxonomy is closed: the scanner only raises ``UnexpectedCharacter`` and the
parser only raises ``UnexpectedToken``. Evaluation errors live in
``calculator.runtime``.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calculator.tokenizer import Token, TokenKind


class CalcSyntaxError(Exception):
    """Base class for errors raised while scanning or parsing a line."""

    pos: int


@dataclass
class UnexpectedCharacter(CalcSyntaxError):
    character: str
    pos: int

    def __str__(self) -> str:
        return f"Unexpected character '{self.character}' at position {self.pos}"


@dataclass
class UnexpectedToken(CalcSyntaxError):
    current: "Token"
    pos: int
    expected: list["TokenKind"]

    def __str__(self) -> str:
        from calculator.tokenizer import TokenKind

        if self.current.kind is TokenKind.EOF:
            token_msg = "end of source"
        else:
            token_msg = f"'{self.current.lexeme}' (token type {self.current.kind})"
        return f"Unexpected {token_msg} at position {self.pos} (expecting one of {self.expected})"


def highlight(code: str, pos: int, context: int = 10) -> str:
    """Source excerpt around ``pos`` with a caret underneath it"""
    print_start_idx = max(0, pos - context)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(code), pos + context)
    print_ellipsis_post = print_end_idx < len(code)
    return "\n".join(
        [
            (
                ("..." if print_ellipsis_pre else "")
                + code[print_start_idx:print_end_idx]
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (pos - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )
