"""Turning tokenized console input into edit requests."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import Optional

from .parser import Token, TokenType
from .requests import (
    ChangeColorRequest,
    ConsoleAction,
    DeleteObjectRequest,
    ImportObjectRequest,
    MoveObjectRequest,
    RotateObjectRequest,
    ScaleObjectRequest,
)


def _float_triplet(
    tokens: Sequence[Token], low: float, high: float
) -> Optional[tuple[float, float, float]]:
    if len(tokens) != 3:
        return None
    values = []
    for token in tokens:
        if token.type is not TokenType.NUMBER:
            return None
        value = float(token.text)
        if not low <= value <= high:
            return None
        values.append(value)
    return values[0], values[1], values[2]


def _is_readable_regular_file(path: str) -> bool:
    if not os.path.isfile(path):
        return False
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def validate_import(tokens: Sequence[Token]) -> Optional[ImportObjectRequest]:
    """Accept a single path to a readable .obj file."""
    if len(tokens) != 1:
        return None
    token = tokens[0]
    if token.type not in (TokenType.PATH, TokenType.WORD):
        return None
    path = token.text
    _, extension = os.path.splitext(path)
    if extension.lower() != ".obj" or not _is_readable_regular_file(path):
        return None
    return ImportObjectRequest(path)


def validate_color(tokens: Sequence[Token]) -> Optional[ChangeColorRequest]:
    """Accept three numbers from 0 to 255."""
    values = _float_triplet(tokens, 0.0, 255.0)
    return ChangeColorRequest(*values) if values is not None else None


def validate_move(tokens: Sequence[Token]) -> Optional[MoveObjectRequest]:
    """Accept three coordinates from -1000 to 1000."""
    values = _float_triplet(tokens, -1000.0, 1000.0)
    return MoveObjectRequest(*values) if values is not None else None


def validate_rotate(tokens: Sequence[Token]) -> Optional[RotateObjectRequest]:
    """Accept three angles in degrees from 0 to 360."""
    values = _float_triplet(tokens, 0.0, 360.0)
    return RotateObjectRequest(*values) if values is not None else None


def validate_scale(tokens: Sequence[Token]) -> Optional[ScaleObjectRequest]:
    """Accept three scale factors from 0.1 to 10."""
    values = _float_triplet(tokens, 0.1, 10.0)
    return ScaleObjectRequest(*values) if values is not None else None


def validate_delete(tokens: Sequence[Token]) -> Optional[DeleteObjectRequest]:
    """Accept a single "y" in either case."""
    if len(tokens) != 1 or tokens[0].text.lower() != "y":
        return None
    return DeleteObjectRequest()


_VALIDATORS: dict[ConsoleAction, Callable[[Sequence[Token]], object]] = {
    ConsoleAction.IMPORT_OBJECT: validate_import,
    ConsoleAction.CHANGE_COLOR: validate_color,
    ConsoleAction.MOVE_OBJECT: validate_move,
    ConsoleAction.ROTATE_OBJECT: validate_rotate,
    ConsoleAction.SCALE_OBJECT: validate_scale,
    ConsoleAction.DELETE_OBJECT: validate_delete,
}


def validator_for(action: ConsoleAction) -> Callable[[Sequence[Token]], object]:
    """Return the validator of an edit action."""
    try:
        return _VALIDATORS[action]
    except KeyError:
        raise ValueError(f"no validator for {action!r}") from None