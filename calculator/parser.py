import logging
from dataclasses import dataclass

from calculator.errors import UnexpectedToken
from calculator.tokenizer import Scanner, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass
class Number:
    token: Token
    value: int


@dataclass
class UnaryOperation:
    operator: Token
    operand: "Expression"


@dataclass
class BinaryOperation:
    left: "Expression"
    operator: Token
    right: "Expression"


Expression = Number | UnaryOperation | BinaryOperation

FACTOR_START = [TokenKind.INTEGER, TokenKind.MINUS, TokenKind.LPAREN]
ADDITIVE_OPERATORS = [TokenKind.PLUS, TokenKind.MINUS]
MULTIPLICATIVE_OPERATORS = [TokenKind.STAR, TokenKind.SLASH]


def _integer_value(lexeme: str) -> int:
    digits = lexeme.lstrip("0")
    # anything past 20 significant digits is out of the 64-bit range already,
    # and int() refuses very long digit strings
    return int(digits[:20] or "0")


class Parser:
    """Recursive-descent parser with a single token of lookahead.

    Grammar, binary operators are left-associative::

        expr   : term ((PLUS | MINUS) term)*
        term   : factor ((STAR | SLASH) factor)*
        factor : MINUS factor | INTEGER | LPAREN expr RPAREN

    Nesting depth of the input is bounded by the interpreter's recursion limit.
    """

    def __init__(self, code: str) -> None:
        self.scanner = Scanner(code)
        self.current_token = self.scanner.next_token()

    def _advance(self) -> Token:
        token = self.current_token
        self.current_token = self.scanner.next_token()
        return token

    def _try_match(self, expected: list[TokenKind]) -> bool:
        return self.current_token.kind in expected

    def _eat(self, expected: TokenKind) -> Token:
        return self._eat_alt([expected])

    def _eat_alt(self, expected: list[TokenKind]) -> Token:
        if self._try_match(expected):
            return self._advance()
        raise UnexpectedToken(current=self.current_token, pos=self.scanner.pos, expected=list(expected))

    def _factor(self) -> Expression:
        if self._try_match([TokenKind.MINUS]):
            operator = self._advance()
            return UnaryOperation(operator=operator, operand=self._factor())
        elif self._try_match([TokenKind.INTEGER]):
            token = self._advance()
            return Number(token=token, value=_integer_value(token.lexeme))
        elif self._try_match([TokenKind.LPAREN]):
            self._advance()
            result = self._expr()
            self._eat(TokenKind.RPAREN)
            return result
        else:
            # every kind a factor may start with, not just the last one tried
            raise UnexpectedToken(current=self.current_token, pos=self.scanner.pos, expected=list(FACTOR_START))

    def _term(self) -> Expression:
        result = self._factor()
        while self._try_match(MULTIPLICATIVE_OPERATORS):
            operator = self._advance()
            result = BinaryOperation(left=result, operator=operator, right=self._factor())
        return result

    def _expr(self) -> Expression:
        result = self._term()
        while self._try_match(ADDITIVE_OPERATORS):
            operator = self._advance()
            result = BinaryOperation(left=result, operator=operator, right=self._term())
        return result

    def parse(self) -> Expression:
        result = self._expr()
        self._eat(TokenKind.EOF)
        logger.debug("parsed %s", result)
        return result


def parse(code: str) -> Expression:
    return Parser(code).parse()
