import pytest

from calculator.errors import UnexpectedCharacter, UnexpectedToken, highlight
from calculator.parser import parse
from calculator.tokenizer import Token, TokenKind


@pytest.mark.parametrize(
    "code, message",
    [
        pytest.param(
            "3-*1",
            "Unexpected '*' (token type STAR) at position 3 (expecting one of [INTEGER, MINUS, LPAREN])",
        ),
        pytest.param(
            "(1 + 2",
            "Unexpected end of source at position 6 (expecting one of [RPAREN])",
        ),
        pytest.param(
            "1 2",
            "Unexpected '2' (token type INTEGER) at position 3 (expecting one of [EOF])",
        ),
        pytest.param("7 % 2", "Unexpected character '%' at position 2"),
    ],
)
def test_error_message(code: str, message: str) -> None:
    with pytest.raises((UnexpectedToken, UnexpectedCharacter)) as exc_info:
        parse(code)
    assert str(exc_info.value) == message


def test_unexpected_token_message_for_eof() -> None:
    err = UnexpectedToken(current=Token(TokenKind.EOF, ""), pos=0, expected=[TokenKind.INTEGER])
    assert str(err) == "Unexpected end of source at position 0 (expecting one of [INTEGER])"


def test_highlight_short_line() -> None:
    assert highlight("1 + 2 $", 6) == "1 + 2 $\n      ^"


def test_highlight_at_end_of_source() -> None:
    assert highlight("(1 + 2", 6) == "(1 + 2\n      ^"


def test_highlight_long_line_is_truncated() -> None:
    code = "1234567890123456789+x" + "0" * 30
    excerpt, caret = highlight(code, 20).split("\n")
    assert excerpt.startswith("...")
    assert excerpt.endswith("...")
    assert caret.index("^") == excerpt.index("x")
