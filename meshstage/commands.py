"""Edit commands that apply validated requests to the scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .camera import Camera
from .importer import Importer
from .requests import (
    ChangeColorRequest,
    ConsoleAction,
    DeleteObjectRequest,
    ImportObjectRequest,
    MoveObjectRequest,
    RotateObjectRequest,
    ScaleObjectRequest,
)
from .transform import to_radians
from .world import SceneObject, World


class CommandError(RuntimeError):
    """Raised when an edit command cannot be applied."""


@dataclass
class ModelContext:
    """The scene state that commands operate on."""

    world: World
    camera: Camera
    renderer: Any
    importer: Importer


def _selected(context: ModelContext, verb: str) -> SceneObject:
    obj = context.world.selected_object()
    if obj is None:
        raise CommandError(f"No selected object to {verb}.")
    return obj


class ImportObjectCommand:
    def execute(self, context: ModelContext, request: ImportObjectRequest) -> None:
        try:
            mesh = context.importer.load_mesh_from_file(request.path)
            context.world.add_object(SceneObject(mesh))
        except Exception as error:
            raise CommandError(f"Failed to import object: {error}") from error


class ChangeColorCommand:
    def execute(self, context: ModelContext, request: ChangeColorRequest) -> None:
        obj = _selected(context, "recolor")
        obj.color[:3] = (request.r / 255.0, request.g / 255.0, request.b / 255.0)


class MoveObjectCommand:
    def execute(self, context: ModelContext, request: MoveObjectRequest) -> None:
        obj = _selected(context, "move")
        obj.transform.position = np.array([request.x, request.y, request.z])


class RotateObjectCommand:
    def execute(self, context: ModelContext, request: RotateObjectRequest) -> None:
        obj = _selected(context, "rotate")
        obj.transform.rotation = np.array(
            [
                to_radians(request.x_degrees),
                to_radians(request.y_degrees),
                to_radians(request.z_degrees),
            ]
        )


class ScaleObjectCommand:
    def execute(self, context: ModelContext, request: ScaleObjectRequest) -> None:
        obj = _selected(context, "scale")
        obj.transform.scale = np.array([request.x, request.y, request.z])


class DeleteObjectCommand:
    def execute(self, context: ModelContext, request: DeleteObjectRequest) -> None:
        _selected(context, "delete")
        context.world.remove_selected_object()


_COMMANDS = {
    ConsoleAction.IMPORT_OBJECT: ImportObjectCommand,
    ConsoleAction.CHANGE_COLOR: ChangeColorCommand,
    ConsoleAction.MOVE_OBJECT: MoveObjectCommand,
    ConsoleAction.ROTATE_OBJECT: RotateObjectCommand,
    ConsoleAction.SCALE_OBJECT: ScaleObjectCommand,
    ConsoleAction.DELETE_OBJECT: DeleteObjectCommand,
}


def command_for(action: ConsoleAction):
    """Return a new command object for an edit action."""
    try:
        return _COMMANDS[action]()
    except KeyError:
        raise ValueError(f"no command for {action!r}") from None