import pytest

from meshstage.parser import Parser, Token, TokenType, is_number, looks_like_path


@pytest.mark.parametrize("text", ["0", "12", "-3.5", "+7", ".5", "5.", "1e3", "2.5E-4", "-1e+2"])
def test_numbers_are_recognised(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "abc", "1e", "-", ".", "1.2.3", "inf", "nan", "12abc", "0x10", "1e39"])
def test_non_numbers_are_rejected(text):
    assert is_number(text) is False


@pytest.mark.parametrize("text", ["a/b", "C:\\models", "model.obj", "..", "x.y"])
def test_path_like_text(text):
    assert looks_like_path(text) is True


@pytest.mark.parametrize("text", ["exit", "y", "model", "123"])
def test_not_path_like_text(text):
    assert looks_like_path(text) is False


@pytest.mark.parametrize(
    "part,expected",
    [
        ("42", TokenType.NUMBER),
        ("-0.25", TokenType.NUMBER),
        ("/tmp/cube.obj", TokenType.PATH),
        ("cube.obj", TokenType.PATH),
        ("1.2.3", TokenType.PATH),
        ("3.5e39", TokenType.PATH),
        ("exit", TokenType.WORD),
        ("inf", TokenType.WORD),
        ("1e40", TokenType.WORD),
    ],
)
def test_classify(part, expected):
    assert Parser().classify(part) is expected


def test_tokenize_splits_on_whitespace():
    tokens = Parser().tokenize("  10 20\t30\n")
    assert tokens == [
        Token(TokenType.NUMBER, "10"),
        Token(TokenType.NUMBER, "20"),
        Token(TokenType.NUMBER, "30"),
    ]


def test_tokenize_mixed_input():
    tokens = Parser().tokenize("load models/cube.obj 2")
    assert [token.type for token in tokens] == [TokenType.WORD, TokenType.PATH, TokenType.NUMBER]
    assert [token.text for token in tokens] == ["load", "models/cube.obj", "2"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_tokenize_blank_input(text):
    assert Parser().tokenize(text) == []


def test_tokenize_round_trips_texts():
    text = "a b.c 1 -2.5 x/y"
    assert " ".join(token.text for token in Parser().tokenize(text)) == text