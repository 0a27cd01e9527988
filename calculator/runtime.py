import logging
from dataclasses import dataclass

from calculator.parser import BinaryOperation, Expression, Number, UnaryOperation, parse
from calculator.tokenizer import TokenKind
from calculator.utils import div_toward_zero

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


class DivisionByZero(CalcRuntimeError):
    pass


class IntegerOverflow(CalcRuntimeError):
    pass


def _checked(value: int, what: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise IntegerOverflow(f"{what} does not fit in a 64-bit signed integer")
    return value


def evaluate(expression: Expression) -> int:
    """Reduces the tree to a 64-bit signed integer.

    Arithmetic is checked: leaving the 64-bit range raises ``IntegerOverflow``
    and dividing by zero raises ``DivisionByZero``. Division truncates toward zero.
    """
    if isinstance(expression, Number):
        return _checked(expression.value, f"Integer literal {expression.token.lexeme}")
    elif isinstance(expression, UnaryOperation):
        operand = evaluate(expression.operand)
        if expression.operator.kind is TokenKind.MINUS:
            return _checked(-operand, "Negation")
        else:
            raise RuntimeError(f"Unexpected unary operator: {expression.operator.kind}")
    elif isinstance(expression, BinaryOperation):
        left = evaluate(expression.left)
        right = evaluate(expression.right)
        kind = expression.operator.kind
        if kind is TokenKind.PLUS:
            return _checked(left + right, "Addition")
        elif kind is TokenKind.MINUS:
            return _checked(left - right, "Subtraction")
        elif kind is TokenKind.STAR:
            return _checked(left * right, "Multiplication")
        elif kind is TokenKind.SLASH:
            if right == 0:
                raise DivisionByZero(f"Division by zero ({left} / 0)")
            return _checked(div_toward_zero(left, right), "Division")
        else:
            raise RuntimeError(f"Unexpected binary operator: {kind}")
    else:
        raise RuntimeError(f"Unexpected expression type: {expression}")


def calculate(code: str) -> int:
    result = evaluate(parse(code))
    logger.debug("%r evaluated to %d", code, result)
    return result
