"""A first-person camera with yaw/pitch orientation and perspective projection."""

from __future__ import annotations

import math

import numpy as np

_MAX_PITCH = 89.0
_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _normalized(vector: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(vector))
    return vector / norm if norm > 0.0 else vector.copy()


def _clamp_pitch(pitch_degrees: float) -> float:
    return min(max(pitch_degrees, -_MAX_PITCH), _MAX_PITCH)


class Camera:
    """Camera looking along a direction given by yaw and pitch in degrees."""

    def __init__(
        self,
        position=(0.0, 0.0, 3.0),
        yaw_degrees: float = -90.0,
        pitch_degrees: float = 0.0,
        fov_degrees: float = 45.0,
        z_near: float = 0.1,
        z_far: float = 100.0,
    ) -> None:
        self._position = np.array(position, dtype=np.float64).reshape(3)
        self._yaw = float(yaw_degrees)
        self._pitch = _clamp_pitch(float(pitch_degrees))
        self.fov_degrees = float(fov_degrees)
        self.z_near = float(z_near)
        self.z_far = float(z_far)
        self._forward = np.zeros(3)
        self._right = np.zeros(3)
        self._up = np.zeros(3)
        self.update_vectors()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    def move_forward(self, distance: float) -> None:
        self._position = self._position + self._forward * distance

    def move_right(self, distance: float) -> None:
        self._position = self._position + self._right * distance

    def rotate_yaw(self, degrees: float) -> None:
        self._yaw += degrees
        self.update_vectors()

    def rotate_pitch(self, degrees: float) -> None:
        self._pitch = _clamp_pitch(self._pitch + degrees)
        self.update_vectors()

    def update_vectors(self) -> None:
        """Recompute the forward, right and up vectors from yaw and pitch."""
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        self._forward = _normalized(
            np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )
        self._right = _normalized(np.cross(self._forward, _WORLD_UP))
        self._up = _normalized(np.cross(self._right, self._forward))

    def view_matrix(self) -> np.ndarray:
        view = np.eye(4)
        view[0, :3] = self._right
        view[1, :3] = self._up
        view[2, :3] = -self._forward
        view[0, 3] = -float(self._right @ self._position)
        view[1, 3] = -float(self._up @ self._position)
        view[2, 3] = float(self._forward @ self._position)
        return view

    def projection_matrix(self, width: float, height: float) -> np.ndarray:
        aspect_ratio = width / height
        tan_half_fov = math.tan(math.radians(self.fov_degrees) / 2.0)
        near, far = self.z_near, self.z_far

        projection = np.zeros((4, 4))
        projection[0, 0] = 1.0 / (tan_half_fov * aspect_ratio)
        projection[1, 1] = 1.0 / tan_half_fov
        projection[2, 2] = -(far + near) / (far - near)
        projection[2, 3] = -(2.0 * far * near) / (far - near)
        projection[3, 2] = -1.0
        return projection

    def set_position(self, position) -> None:
        self._position = np.array(position, dtype=np.float64).reshape(3)

    def set_rotation(self, yaw_degrees: float, pitch_degrees: float) -> None:
        self._yaw = float(yaw_degrees)
        self._pitch = _clamp_pitch(float(pitch_degrees))
        self.update_vectors()