import pytest

from lomboktojson.tokens import Token, TokenType


def test_str_without_literal():
    assert str(Token(TokenType.KEY, "name")) == "KEY name map[]"


def test_str_with_literal_sorted():
    token = Token(TokenType.VALUE, "x", {"b": "2", "a": "1"})
    assert str(token) == "VALUE x map[a:1 b:2]"


@pytest.mark.parametrize("token_type", list(TokenType))
def test_token_type_round_trips_through_value(token_type):
    assert TokenType(token_type.value) is token_type
    assert token_type.value == token_type.name


@pytest.mark.parametrize("token_type", list(TokenType))
def test_str_starts_with_type_value(token_type):
    token = Token(token_type, "lex")
    assert str(token).split(" ")[0] == token_type.value
    assert str(token).split(" ")[1] == "lex"


def test_tokens_compare_by_fields():
    assert Token(TokenType.COMMA, ",") == Token(TokenType.COMMA, ",")
    assert Token(TokenType.COMMA, ",") != Token(TokenType.EQUALS, "=")


def test_unknown_type_value_rejected():
    with pytest.raises(ValueError):
        TokenType("BRACE")