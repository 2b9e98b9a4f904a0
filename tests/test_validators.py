import pytest

from meshstage.parser import Parser, Token, TokenType
from meshstage.requests import (
    ChangeColorRequest,
    ConsoleAction,
    DeleteObjectRequest,
    ImportObjectRequest,
    MoveObjectRequest,
    RotateObjectRequest,
    ScaleObjectRequest,
)
from meshstage.validators import (
    validate_color,
    validate_delete,
    validate_import,
    validate_move,
    validate_rotate,
    validate_scale,
    validator_for,
)


def tokens(text):
    return Parser().tokenize(text)


def test_color_accepts_bounds():
    assert validate_color(tokens("255 0 128")) == ChangeColorRequest(255.0, 0.0, 128.0)


@pytest.mark.parametrize("text", ["256 0 0", "-1 0 0", "1 2", "1 2 3 4", "a b c", ""])
def test_color_rejects(text):
    assert validate_color(tokens(text)) is None


def test_move_accepts_range_edges():
    assert validate_move(tokens("-1000 1000 2.5")) == MoveObjectRequest(-1000.0, 1000.0, 2.5)


@pytest.mark.parametrize("text", ["-1000.5 0 0", "0 1001 0", "x 0 0", "0 0"])
def test_move_rejects(text):
    assert validate_move(tokens(text)) is None


def test_rotate_accepts_full_turn():
    assert validate_rotate(tokens("360 0 90")) == RotateObjectRequest(360.0, 0.0, 90.0)


@pytest.mark.parametrize("text", ["-1 0 0", "0 361 0", "0 0"])
def test_rotate_rejects(text):
    assert validate_rotate(tokens(text)) is None


def test_scale_accepts_limits():
    assert validate_scale(tokens("0.1 10 1")) == ScaleObjectRequest(0.1, 10.0, 1.0)


@pytest.mark.parametrize("text", ["0.05 1 1", "1 10.5 1", "0 0 0", "1 1"])
def test_scale_rejects(text):
    assert validate_scale(tokens(text)) is None


@pytest.mark.parametrize("text", ["y", "Y", "  y  "])
def test_delete_accepts_y(text):
    assert validate_delete(tokens(text)) == DeleteObjectRequest()


@pytest.mark.parametrize("text", ["yes", "n", "y y", ""])
def test_delete_rejects(text):
    assert validate_delete(tokens(text)) is None


def test_non_number_token_is_rejected_even_if_numeric_text():
    fake = [Token(TokenType.WORD, "1"), Token(TokenType.NUMBER, "2"), Token(TokenType.NUMBER, "3")]
    assert validate_color(fake) is None


def test_import_accepts_readable_obj(tmp_path):
    model = tmp_path / "cube.obj"
    model.write_text("v 0 0 0\n")
    assert validate_import(tokens(str(model))) == ImportObjectRequest(str(model))


def test_import_extension_is_case_insensitive(tmp_path):
    model = tmp_path / "CUBE.OBJ"
    model.write_text("v 0 0 0\n")
    request = validate_import(tokens(str(model)))
    assert request is not None and request.path == str(model)


def test_import_rejects_other_extension(tmp_path):
    model = tmp_path / "cube.txt"
    model.write_text("v 0 0 0\n")
    assert validate_import(tokens(str(model))) is None


def test_import_rejects_missing_file(tmp_path):
    assert validate_import(tokens(str(tmp_path / "missing.obj"))) is None


def test_import_rejects_directory(tmp_path):
    folder = tmp_path / "folder.obj"
    folder.mkdir()
    assert validate_import(tokens(str(folder))) is None


def test_import_rejects_two_tokens(tmp_path):
    model = tmp_path / "cube.obj"
    model.write_text("v 0 0 0\n")
    assert validate_import(tokens(f"{model} {model}")) is None


def test_import_rejects_number_token():
    assert validate_import([Token(TokenType.NUMBER, "1.0")]) is None


@pytest.mark.parametrize(
    "action, validator",
    [
        (ConsoleAction.IMPORT_OBJECT, validate_import),
        (ConsoleAction.CHANGE_COLOR, validate_color),
        (ConsoleAction.MOVE_OBJECT, validate_move),
        (ConsoleAction.ROTATE_OBJECT, validate_rotate),
        (ConsoleAction.SCALE_OBJECT, validate_scale),
        (ConsoleAction.DELETE_OBJECT, validate_delete),
    ],
)
def test_validator_for(action, validator):
    assert validator_for(action) is validator


def test_validator_for_none_raises():
    with pytest.raises(ValueError):
        validator_for(ConsoleAction.NONE)