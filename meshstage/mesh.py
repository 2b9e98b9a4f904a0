"""Geometry buffers for a triangulated model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Mesh:
    """One sub-mesh: its index count and offsets into the shared buffers."""

    num_indices: int = 0
    base_vertex: int = 0
    base_index: int = 0


@dataclass
class MeshData:
    """Sub-meshes plus shared position, normal and index buffers."""

    meshes: list[Mesh] = field(default_factory=list)
    positions: list[tuple[float, float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def clear(self) -> None:
        self.meshes.clear()
        self.positions.clear()
        self.normals.clear()
        self.indices.clear()