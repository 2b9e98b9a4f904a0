"""Loading Wavefront OBJ models into triangulated mesh buffers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import numpy as np

from .mesh import Mesh, MeshData

_DEFAULT_NORMAL = (0.0, 1.0, 0.0)
_MISSING_NORMAL = (0.0, 0.0, 0.0)

_FaceVertex = tuple[int, Optional[int], int]


class MeshImportError(Exception):
    """Raised when a model file cannot be read or understood."""


def _coords(args: Sequence[str], line_number: int) -> tuple[float, float, float]:
    if len(args) < 3:
        raise MeshImportError(f"line {line_number}: expected 3 coordinates")
    try:
        x, y, z = (float(value) for value in args[:3])
    except ValueError:
        raise MeshImportError(f"line {line_number}: invalid coordinate") from None
    return x, y, z


def _resolve(index_text: str, count: int, line_number: int) -> int:
    try:
        index = int(index_text)
    except ValueError:
        raise MeshImportError(f"line {line_number}: invalid index {index_text!r}") from None
    if index == 0:
        raise MeshImportError(f"line {line_number}: index 0 is not allowed")
    return index - 1 if index > 0 else count + index


def _face_vertex(
    spec: str, position_count: int, normal_count: int, line_number: int
) -> _FaceVertex:
    parts = spec.split("/")
    position = _resolve(parts[0], position_count, line_number)
    normal = None
    if len(parts) > 2 and parts[2]:
        normal = _resolve(parts[2], normal_count, line_number)
    return position, normal, line_number


def _smooth_normals(
    positions: list[tuple[float, float, float]], indices: list[int]
) -> list[tuple[float, float, float]]:
    points = np.array(positions, dtype=np.float64)
    triangles = np.array(indices, dtype=np.int64).reshape(-1, 3)
    corners = points[triangles]
    face_normals = np.cross(corners[:, 1] - corners[:, 0], corners[:, 2] - corners[:, 0])
    lengths = np.linalg.norm(face_normals, axis=1, keepdims=True)
    face_normals = np.divide(
        face_normals, lengths, out=np.zeros_like(face_normals), where=lengths > 0.0
    )
    accumulated = np.zeros_like(points)
    for corner in range(3):
        np.add.at(accumulated, triangles[:, corner], face_normals)

    normals = []
    for vector in accumulated:
        length = float(np.linalg.norm(vector))
        if length > 0.0:
            normals.append(tuple(float(c) for c in vector / length))
        else:
            normals.append(_DEFAULT_NORMAL)
    return normals


def _build_mesh(
    faces: list[list[_FaceVertex]],
    positions: list[tuple[float, float, float]],
    normals: list[tuple[float, float, float]],
    data: MeshData,
) -> None:
    triangles = [
        (face[0], second, third)
        for face in faces
        if len(face) >= 3
        for second, third in zip(face[1:], face[2:])
    ]
    if not triangles:
        return

    has_normals = any(normal is not None for triangle in triangles for _, normal, _ in triangle)
    vertex_ids: dict[tuple, int] = {}
    mesh_positions: list[tuple[float, float, float]] = []
    mesh_normals: list[tuple[float, float, float]] = []
    local_indices: list[int] = []

    for triangle in triangles:
        for position_index, normal_index, line_number in triangle:
            if not 0 <= position_index < len(positions):
                raise MeshImportError(f"line {line_number}: vertex index out of range")
            position = positions[position_index]
            normal: Optional[tuple[float, float, float]] = None
            if has_normals:
                if normal_index is None:
                    normal = _MISSING_NORMAL
                elif 0 <= normal_index < len(normals):
                    normal = normals[normal_index]
                else:
                    raise MeshImportError(f"line {line_number}: normal index out of range")
            key = (position, normal)
            vertex_id = vertex_ids.get(key)
            if vertex_id is None:
                vertex_id = len(mesh_positions)
                vertex_ids[key] = vertex_id
                mesh_positions.append(position)
                if normal is not None:
                    mesh_normals.append(normal)
            local_indices.append(vertex_id)

    if not has_normals:
        mesh_normals = _smooth_normals(mesh_positions, local_indices)

    data.meshes.append(
        Mesh(
            num_indices=len(triangles) * 3,
            base_vertex=len(data.positions),
            base_index=len(data.indices),
        )
    )
    data.positions.extend(mesh_positions)
    data.normals.extend(mesh_normals)
    data.indices.extend(local_indices)


def parse_obj(text: str) -> MeshData:
    """Parse OBJ text into triangulated meshes with joined vertices and normals.

    Each object, group or material section becomes one mesh; polygons are
    fan-triangulated, and meshes without normals get smooth normals.
    """
    positions: list[tuple[float, float, float]] = []
    normals: list[tuple[float, float, float]] = []
    sections: list[list[list[_FaceVertex]]] = [[]]

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *args = line.split()
        if keyword == "v":
            positions.append(_coords(args, line_number))
        elif keyword == "vn":
            normals.append(_coords(args, line_number))
        elif keyword in ("o", "g", "usemtl"):
            if sections[-1]:
                sections.append([])
        elif keyword == "f":
            sections[-1].append(
                [_face_vertex(spec, len(positions), len(normals), line_number) for spec in args]
            )

    data = MeshData()
    for faces in sections:
        _build_mesh(faces, positions, normals, data)
    if not data.meshes:
        raise MeshImportError("model contains no triangles")
    return data


class Importer:
    """Reads model files from disk."""

    def load_mesh_from_file(self, path) -> MeshData:
        """Load an OBJ file; raise MeshImportError if it cannot be used."""
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError as error:
            raise MeshImportError(f"unable to open file {path}: {error}") from error
        return parse_obj(text)