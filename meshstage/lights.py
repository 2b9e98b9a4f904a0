"""Scene light sources."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _vector3(values) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


@dataclass
class AmbientLight:
    """Uniform light added to every surface."""

    color: np.ndarray = field(default_factory=lambda: np.array([0.15, 0.15, 0.15]))

    def __post_init__(self) -> None:
        self.color = _vector3(self.color)


class DirectionalLight:
    """Light arriving from one direction; the direction is kept normalised."""

    def __init__(self, direction=(-0.2, -1.0, -0.3), color=(1.0, 1.0, 1.0)) -> None:
        self.direction = direction
        self.color = _vector3(color)

    @property
    def direction(self) -> np.ndarray:
        return self._direction.copy()

    @direction.setter
    def direction(self, value) -> None:
        vector = _vector3(value)
        norm = float(np.linalg.norm(vector))
        self._direction = vector / norm if norm > 0.0 else vector

    def __repr__(self) -> str:
        return f"DirectionalLight(direction={self._direction.tolist()}, color={self.color.tolist()})"