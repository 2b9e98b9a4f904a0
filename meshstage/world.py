"""Scene objects and the world that holds them with a current selection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .mesh import MeshData
from .transform import Transform


def _default_color() -> np.ndarray:
    return np.array([1.0, 0.55, 0.57, 1.0])


@dataclass(eq=False)
class SceneObject:
    """A triangulated model placed in the scene with a transform and RGBA colour."""

    mesh_data: MeshData
    transform: Transform = field(default_factory=Transform)
    color: np.ndarray = field(default_factory=_default_color)

    def __post_init__(self) -> None:
        data = self.mesh_data
        if not data.positions or not data.indices:
            raise ValueError("Could not upload empty mesh on GPU.")
        if len(data.normals) != len(data.positions):
            raise ValueError(
                "Could not upload mesh on GPU: normals count does not match "
                "positions count."
            )
        self.color = np.array(self.color, dtype=np.float64).reshape(4)


class World:
    """An ordered collection of scene objects, one of which may be selected."""

    def __init__(self) -> None:
        self._objects: list[SceneObject] = []
        self._selected: Optional[int] = None

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    @property
    def is_empty(self) -> bool:
        return not self._objects

    def add_object(self, obj: SceneObject) -> None:
        """Append an object; the first object added becomes selected."""
        if not self._objects:
            self._selected = 0
        self._objects.append(obj)

    def selected_object(self) -> Optional[SceneObject]:
        if self._selected is None:
            return None
        return self._objects[self._selected]

    def remove_selected_object(self) -> None:
        """Remove the selection; the object after it (wrapping) becomes selected."""
        if self._selected is None:
            return
        del self._objects[self._selected]
        if not self._objects:
            self._selected = None
            return
        self._selected %= len(self._objects)

    def select_next_object(self) -> None:
        if self._selected is not None:
            self._selected = (self._selected + 1) % len(self._objects)

    def select_previous_object(self) -> None:
        if self._selected is not None:
            self._selected = (self._selected - 1) % len(self._objects)