import pytest

from calculator.errors import UnexpectedCharacter
from calculator.tokenizer import Scanner, Token, TokenKind, tokenize


def test_tokenize_all_kinds() -> None:
    assert tokenize("12+(3 - 45)*6/7") == [
        Token(TokenKind.INTEGER, "12"),
        Token(TokenKind.PLUS, "+"),
        Token(TokenKind.LPAREN, "("),
        Token(TokenKind.INTEGER, "3"),
        Token(TokenKind.MINUS, "-"),
        Token(TokenKind.INTEGER, "45"),
        Token(TokenKind.RPAREN, ")"),
        Token(TokenKind.STAR, "*"),
        Token(TokenKind.INTEGER, "6"),
        Token(TokenKind.SLASH, "/"),
        Token(TokenKind.INTEGER, "7"),
        Token(TokenKind.EOF, ""),
    ]


@pytest.mark.parametrize("code", ["", "   ", "\t\r\n"])
def test_blank_input_is_just_eof(code: str) -> None:
    assert tokenize(code) == [Token(TokenKind.EOF, "")]


def test_integer_lexeme_keeps_leading_zeros() -> None:
    assert tokenize("000123")[0] == Token(TokenKind.INTEGER, "000123")


def test_integer_has_no_range_check() -> None:
    assert tokenize("99999999999999999999999")[0].lexeme == "99999999999999999999999"


def test_eof_is_idempotent() -> None:
    scanner = Scanner("1 ")
    assert scanner.next_token().kind is TokenKind.INTEGER
    for _ in range(3):
        assert scanner.next_token() == Token(TokenKind.EOF, "")
        assert scanner.pos == 2


def test_position_counts_consumed_characters() -> None:
    scanner = Scanner("  12 +")
    assert scanner.pos == 0
    scanner.next_token()
    assert scanner.pos == 4
    scanner.next_token()
    assert scanner.pos == 6


@pytest.mark.parametrize(
    "code, character, pos",
    [
        pytest.param("1 + x", "x", 4),
        pytest.param("$", "$", 0),
        pytest.param("2 ^ 3", "^", 2),
        pytest.param("1.5", ".", 1),
        pytest.param("12 + é", "é", 5),
        pytest.param("1\u00a0+ 1", "\u00a0", 1),
    ],
)
def test_unexpected_character(code: str, character: str, pos: int) -> None:
    with pytest.raises(UnexpectedCharacter) as exc_info:
        tokenize(code)
    assert exc_info.value.character == character
    assert exc_info.value.pos == pos


def test_unexpected_character_is_raised_lazily() -> None:
    scanner = Scanner("1 #")
    assert scanner.next_token() == Token(TokenKind.INTEGER, "1")
    with pytest.raises(UnexpectedCharacter):
        scanner.next_token()
