"""Object placement: translation, rotation and scale as a 4x4 model matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def _vector3(values) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


def _axis_rotations(rx: float, ry: float, rz: float) -> np.ndarray:
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)
    about_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    about_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    about_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return about_z @ about_y @ about_x


@dataclass
class Transform:
    """Position, rotation (radians about X, Y, Z) and per-axis scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vector3(self.position)
        self.rotation = _vector3(self.rotation)
        self.scale = _vector3(self.scale)

    def matrix(self) -> np.ndarray:
        """Return translation * rotation(Z*Y*X) * scale as a 4x4 matrix."""
        position = _vector3(self.position)
        rx, ry, rz = _vector3(self.rotation)
        scale = _vector3(self.scale)

        result = np.eye(4)
        result[:3, :3] = _axis_rotations(rx, ry, rz) * scale[np.newaxis, :]
        result[:3, 3] = position
        return result