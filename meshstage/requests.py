"""Console edit actions, the requests they carry and the prompts they show."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConsoleAction(Enum):
    """An edit that the console dialogue can ask the user for."""

    NONE = auto()
    IMPORT_OBJECT = auto()
    CHANGE_COLOR = auto()
    MOVE_OBJECT = auto()
    ROTATE_OBJECT = auto()
    SCALE_OBJECT = auto()
    DELETE_OBJECT = auto()


@dataclass(frozen=True)
class ImportObjectRequest:
    """Path of a model file to load into the scene."""

    path: str


@dataclass(frozen=True)
class ChangeColorRequest:
    """RGB colour, each channel from 0 to 255."""

    r: float = 255.0
    g: float = 255.0
    b: float = 255.0


@dataclass(frozen=True)
class MoveObjectRequest:
    """New object position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class RotateObjectRequest:
    """New object rotation about X, Y and Z in degrees."""

    x_degrees: float = 0.0
    y_degrees: float = 0.0
    z_degrees: float = 0.0


@dataclass(frozen=True)
class ScaleObjectRequest:
    """New per-axis object scale."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


@dataclass(frozen=True)
class DeleteObjectRequest:
    """Confirmation that the selected object should be removed."""


@dataclass(frozen=True)
class Messages:
    """The prompt shown on entering an input mode and the reply to bad input."""

    hint: str
    failure: str


_MESSAGES: dict[ConsoleAction, Messages] = {
    ConsoleAction.IMPORT_OBJECT: Messages(
        hint=(
            "Object input mode is active. Type a readable .obj file path, or "
            '"exit" to cancel.'
        ),
        failure="Invalid file path. Type a readable .obj file path.",
    ),
    ConsoleAction.CHANGE_COLOR: Messages(
        hint=(
            "Color input mode is active. Type exactly 3 RGB numbers from 0 to 255, "
            'or "exit" to cancel.'
        ),
        failure="Invalid RGB color. Type exactly 3 whole numbers from 0 to 255.",
    ),
    ConsoleAction.MOVE_OBJECT: Messages(
        hint=(
            "Position input mode is active. Type exactly 3 coordinates from -1000 "
            'to 1000, or "exit" to cancel.'
        ),
        failure="Invalid position. Type exactly 3 coordinates from -1000 to 1000.",
    ),
    ConsoleAction.ROTATE_OBJECT: Messages(
        hint=(
            "Rotation input mode is active. Type rotation by X Y Z in degrees from "
            '0 to 360, or "exit" to cancel.'
        ),
        failure="Invalid rotation. Type exactly 3 degree values from 0 to 360.",
    ),
    ConsoleAction.SCALE_OBJECT: Messages(
        hint=(
            "Scale input mode is active. Type scale by X Y Z as 3 numbers from 0.1 "
            'to 10, or "exit" to cancel.'
        ),
        failure="Invalid scale. Type exactly 3 scale values from 0.1 to 10.",
    ),
    ConsoleAction.DELETE_OBJECT: Messages(
        hint=(
            "Delete input mode is active. Type y to delete the selected "
            'object, or type "exit" to cancel.'
        ),
        failure="Invalid delete input. Type y to delete the selected object.",
    ),
}


def messages_for(action: ConsoleAction) -> Messages:
    """Return the prompt texts of an edit action."""
    try:
        return _MESSAGES[action]
    except KeyError:
        raise ValueError(f"no console messages for {action!r}") from None