"""Triangle meshes loaded from Wavefront OBJ files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


class ObjFormatError(ValueError):
    """Raised when OBJ data cannot be read."""


def _floats(args: list[str], count: int, line_number: int) -> list[float]:
    if len(args) < count:
        raise ObjFormatError(f"line {line_number}: expected {count} numbers")
    try:
        return [float(a) for a in args[:count]]
    except ValueError as exc:
        raise ObjFormatError(f"line {line_number}: {exc}") from exc


def _face(args: list[str], line_number: int) -> list[tuple[int, int, int]]:
    if len(args) < 3:
        raise ObjFormatError(f"line {line_number}: a face needs three corners")
    corners = []
    for corner in args[:3]:
        parts = corner.split("/")
        try:
            if len(parts) != 3:
                raise ValueError(corner)
            v, vt, vn = (int(p) for p in parts)
        except ValueError as exc:
            raise ObjFormatError(
                f"line {line_number}: face corners must be v/vt/vn, got {corner!r}"
            ) from exc
        corners.append((v, vt, vn))
    return corners


def _lookup(table: list[list[float]], index: int, what: str) -> list[float]:
    if not 1 <= index <= len(table):
        raise ObjFormatError(f"{what} index {index} out of range 1..{len(table)}")
    return table[index - 1]


def parse_obj(lines: Iterable[str]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Read OBJ text and return unindexed per-corner positions, uvs and normals.

    Only the first three corners of each face are used; unknown statements
    and comments are ignored.
    """
    positions: list[list[float]] = []
    tex_coords: list[list[float]] = []
    vertex_normals: list[list[float]] = []
    corners: list[tuple[int, int, int]] = []

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        head, args = tokens[0], tokens[1:]
        if head == "v":
            positions.append(_floats(args, 3, line_number))
        elif head == "vt":
            tex_coords.append(_floats(args, 2, line_number))
        elif head == "vn":
            vertex_normals.append(_floats(args, 3, line_number))
        elif head == "f":
            corners.extend(_face(args, line_number))

    vertices = [_lookup(positions, v, "vertex") for v, _, _ in corners]
    uvs = [_lookup(tex_coords, vt, "texture") for _, vt, _ in corners]
    normals = [_lookup(vertex_normals, vn, "normal") for _, _, vn in corners]
    return (
        np.array(vertices, dtype=float).reshape(-1, 3),
        np.array(uvs, dtype=float).reshape(-1, 2),
        np.array(normals, dtype=float).reshape(-1, 3),
    )


def load_obj(path: str | os.PathLike[str]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Read an OBJ file; see :func:`parse_obj`."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)


def calculate_tangents(vertices, uvs) -> tuple[np.ndarray, np.ndarray]:
    """Return per-vertex tangents and bitangents, shared across each triangle.

    Triangles whose texture coordinates are degenerate yield non-finite values.
    """
    positions = np.asarray(vertices, dtype=float).reshape(-1, 3)
    coords = np.asarray(uvs, dtype=float).reshape(-1, 2)
    if len(positions) != len(coords):
        raise ValueError("vertices and uvs must have the same length")
    if len(positions) % 3:
        raise ValueError("vertex count must be a multiple of three")

    tri = positions.reshape(-1, 3, 3)
    tex = coords.reshape(-1, 3, 2)
    e1 = tri[:, 1] - tri[:, 0]
    e2 = tri[:, 2] - tri[:, 1]
    d1 = tex[:, 1] - tex[:, 0]
    d2 = tex[:, 2] - tex[:, 1]
    du1, dv1 = d1[:, :1], d1[:, 1:]
    du2, dv2 = d2[:, :1], d2[:, 1:]

    with np.errstate(divide="ignore", invalid="ignore"):
        denom = 1.0 / (du1 * dv2 - du2 * dv1)
        tangent = (dv2 * e1 - dv1 * e2) * denom
        bitangent = (du1 * e2 - du2 * e1) * denom

    return np.repeat(tangent, 3, axis=0), np.repeat(bitangent, 3, axis=0)


@dataclass(frozen=True)
class Texture:
    """An image bound to a named shader sampler."""

    path: str
    kind: str

    @property
    def uniform_name(self) -> str:
        """Name of the sampler uniform, e.g. ``diffuseMap``."""
        return f"{self.kind}Map"


@dataclass
class Mesh:
    """Unindexed triangle geometry with material properties and textures."""

    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray
    tangents: np.ndarray
    bitangents: np.ndarray
    textures: list[Texture] = field(default_factory=list)
    ka: float = 0.0
    kd: float = 0.0
    ks: float = 0.0
    ns: float = 0.0

    @classmethod
    def from_obj(cls, path: str | os.PathLike[str]) -> Mesh:
        """Load a mesh from an OBJ file and compute its tangent frames."""
        vertices, uvs, normals = load_obj(path)
        tangents, bitangents = calculate_tangents(vertices, uvs)
        return cls(vertices, uvs, normals, tangents, bitangents)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def add_texture(self, path: str | os.PathLike[str], kind: str) -> Texture:
        """Attach a texture; its unit is its position in the list."""
        texture = Texture(os.fspath(path), kind)
        self.textures.append(texture)
        return texture

    def material_uniforms(self) -> dict[str, float | int]:
        """Return lighting coefficients and sampler-to-unit bindings."""
        result: dict[str, float | int] = {
            "ka": self.ka,
            "kd": self.kd,
            "ks": self.ks,
            "Ns": self.ns,
        }
        for unit, texture in enumerate(self.textures):
            result[texture.uniform_name] = unit
        return result