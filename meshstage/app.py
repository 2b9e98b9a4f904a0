"""The interactive viewer: a render loop with a console-driven edit mode."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from enum import Enum, auto
from typing import Optional

from .camera import Camera
from .commands import ModelContext, command_for
from .dialogue import Dialogue
from .importer import Importer
from .renderer import Renderer
from .requests import ConsoleAction, messages_for
from .validators import validator_for
from .window import Event, EventKind, Window
from .world import SceneObject, World


class AppState(Enum):
    RENDERING = auto()
    EDIT = auto()


class KeyboardAction(Enum):
    NONE = auto()
    IMPORT = auto()
    EDIT = auto()
    BACK = auto()
    NEXT_OBJECT = auto()
    PREVIOUS_OBJECT = auto()
    COLOR = auto()
    POSITION = auto()
    SCALE = auto()
    ROTATION = auto()
    DELETE = auto()


_KEY_ACTIONS = {
    "NUM_ADD": KeyboardAction.IMPORT,
    "E": KeyboardAction.EDIT,
    "B": KeyboardAction.BACK,
    "RIGHT": KeyboardAction.NEXT_OBJECT,
    "LEFT": KeyboardAction.PREVIOUS_OBJECT,
    "C": KeyboardAction.COLOR,
    "P": KeyboardAction.POSITION,
    "S": KeyboardAction.SCALE,
    "R": KeyboardAction.ROTATION,
    "DELETE": KeyboardAction.DELETE,
}

_CONSOLE_ACTIONS = {
    KeyboardAction.IMPORT: ConsoleAction.IMPORT_OBJECT,
    KeyboardAction.COLOR: ConsoleAction.CHANGE_COLOR,
    KeyboardAction.POSITION: ConsoleAction.MOVE_OBJECT,
    KeyboardAction.SCALE: ConsoleAction.SCALE_OBJECT,
    KeyboardAction.ROTATION: ConsoleAction.ROTATE_OBJECT,
    KeyboardAction.DELETE: ConsoleAction.DELETE_OBJECT,
}

_MOVEMENT_SPEED = 3.0
_ROTATION_SPEED = 90.0


def action_from_event(event: Event) -> KeyboardAction:
    """Map a window event to the keyboard action it triggers."""
    if event.kind is EventKind.TEXT_ENTERED and event.text == "+":
        return KeyboardAction.IMPORT
    if event.kind is not EventKind.KEY_PRESSED:
        return KeyboardAction.NONE
    return _KEY_ACTIONS.get(event.key, KeyboardAction.NONE)


class App:
    """Owns the scene and the window and runs the main loop."""

    HELP_RENDERING = "Rendering mode is active.\nPress E to enter edit mode."
    HELP_EDIT = (
        "Edit mode is active.\n"
        "Use Left/Right to select objects. Press + to import, C to change color, "
        "P to change position, S to change scale, R to change rotation, Delete "
        "to delete, B to return to rendering mode."
    )

    def __init__(
        self,
        *,
        window: Optional[Window] = None,
        world: Optional[World] = None,
        camera: Optional[Camera] = None,
        renderer=None,
        importer: Optional[Importer] = None,
        dialogue: Optional[Dialogue] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.window = window if window is not None else Window(800, 600, "test")
        world = world if world is not None else World()
        camera = camera if camera is not None else Camera()
        renderer = renderer if renderer is not None else Renderer(world, camera)
        importer = importer if importer is not None else Importer()
        self.model = ModelContext(world, camera, renderer, importer)
        self.dialogue = dialogue if dialogue is not None else Dialogue()
        self._clock = clock if clock is not None else time.perf_counter
        self._state = AppState.RENDERING
        self._frame_time_accumulator = 0.0

        width, height = self.window.size()
        self.dialogue.print_message(f"Window resolution: {width}x{height}")
        self.dialogue.print_message(self.HELP_RENDERING)

    @property
    def state(self) -> AppState:
        return self._state

    def _switch_state(self, next_state: AppState) -> None:
        self._state = next_state
        if next_state is AppState.RENDERING:
            self.dialogue.print_message(self.HELP_RENDERING)
        else:
            self.dialogue.print_message(self.HELP_EDIT)

    def _update_camera(self, delta_time: float) -> None:
        camera = self.model.camera
        movement = _MOVEMENT_SPEED * delta_time
        rotation = _ROTATION_SPEED * delta_time
        bindings = (
            ("W", camera.move_forward, movement),
            ("S", camera.move_forward, -movement),
            ("D", camera.move_right, movement),
            ("A", camera.move_right, -movement),
            ("LEFT", camera.rotate_yaw, -rotation),
            ("RIGHT", camera.rotate_yaw, rotation),
            ("UP", camera.rotate_pitch, rotation),
            ("DOWN", camera.rotate_pitch, -rotation),
        )
        for key, apply, amount in bindings:
            if self.window.is_key_pressed(key):
                apply(amount)

    def _render_frame(self, highlighted_object: Optional[SceneObject] = None) -> None:
        self.model.renderer.draw_scene(self.window.size(), highlighted_object)
        self.window.display()

    def _print_frame_time(self, delta_time: float) -> None:
        self._frame_time_accumulator += delta_time
        if self._frame_time_accumulator < 1.0:
            return
        print(f"Frame time: {delta_time * 1000.0:g} ms")
        self._frame_time_accumulator = 0.0

    def _handle_console_command(self, action: ConsoleAction) -> None:
        if action is not ConsoleAction.IMPORT_OBJECT and self.model.world.is_empty:
            self.dialogue.print_message("No selected object.")
            return

        request = self.dialogue.get_user_request(messages_for(action), validator_for(action))
        if request is None:
            return

        command = command_for(action)
        try:
            self.dialogue.print_message("Applying changes...")
            command.execute(self.model, request)
            self.dialogue.print_message("Success!")
        except RuntimeError as error:
            raise RuntimeError(f"Failed to execute command: {error}") from error

    def _rendering_frame(self, action: KeyboardAction, delta_time: float) -> None:
        if action is KeyboardAction.EDIT:
            self._switch_state(AppState.EDIT)
            return
        self._update_camera(delta_time)
        self._render_frame()
        self._print_frame_time(delta_time)

    def _edit_frame(self, action: KeyboardAction, delta_time: float) -> None:
        world = self.model.world
        if action is KeyboardAction.BACK:
            self._switch_state(AppState.RENDERING)
            return
        if action is KeyboardAction.NEXT_OBJECT and not world.is_empty:
            world.select_next_object()
            return
        if action is KeyboardAction.PREVIOUS_OBJECT and not world.is_empty:
            world.select_previous_object()
            return
        console_action = _CONSOLE_ACTIONS.get(action)
        if console_action is not None:
            self._handle_console_command(console_action)
            return
        self._render_frame(world.selected_object())
        self._print_frame_time(delta_time)

    def run(self) -> int:
        """Run until the window closes; return 0, or 1 after a failed command."""
        try:
            self._frame_time_accumulator = 0.0
            last = self._clock()
            while self.window.is_running():
                now = self._clock()
                delta_time = now - last
                last = now

                action = KeyboardAction.NONE
                while (event := self.window.poll_event()) is not None:
                    self.window.handle_event(event)
                    next_action = action_from_event(event)
                    if next_action is not KeyboardAction.NONE:
                        action = next_action

                if not self.window.is_running():
                    continue

                if self._state is AppState.RENDERING:
                    self._rendering_frame(action, delta_time)
                else:
                    self._edit_frame(action, delta_time)
        except RuntimeError as error:
            print(error)
            return 1
        return 0


def main(argv=None) -> int:
    """Open the viewer window and run it."""
    try:
        App().run()
    except Exception as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0