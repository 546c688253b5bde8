"""First-person camera producing view and projection matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from scenekit import maths
from scenekit.maths import Quaternion


def _vector(*components: float) -> np.ndarray:
    return np.array(components, dtype=float)


@dataclass
class Camera:
    """A camera with Euler-angle steering and quaternion smoothing."""

    eye: np.ndarray
    target: np.ndarray

    fov: float = field(default_factory=lambda: maths.radians(45.0))
    aspect: float = 1024.0 / 768.0
    near: float = 0.2
    far: float = 100.0

    world_up: np.ndarray = field(default_factory=lambda: _vector(0.0, 1.0, 0.0))

    view: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection: np.ndarray = field(default_factory=lambda: np.identity(4))

    orientation: Quaternion = field(
        default_factory=lambda: Quaternion.from_euler(0.0, 0.0)
    )

    right: np.ndarray = field(default_factory=lambda: _vector(1.0, 0.0, 0.0))
    up: np.ndarray = field(default_factory=lambda: _vector(0.0, 1.0, 0.0))
    front: np.ndarray = field(default_factory=lambda: _vector(0.0, 0.0, -1.0))

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def __post_init__(self) -> None:
        self.eye = np.array(self.eye, dtype=float)
        self.target = np.array(self.target, dtype=float)

    def _update_matrices(self) -> None:
        self.view = self.orientation.matrix() @ maths.translate(-self.eye)
        self.projection = maths.perspective(self.fov, self.aspect, self.near, self.far)

    def calculate_matrices(self) -> None:
        """Refresh the camera vectors, then the view and projection matrices."""
        self.calculate_camera_vectors()
        self._update_matrices()

    def calculate_camera_vectors(self) -> None:
        """Derive front, right and up from the yaw and pitch angles."""
        cos_pitch = math.cos(self.pitch)
        self.front = _vector(
            math.cos(self.yaw) * cos_pitch,
            math.sin(self.pitch),
            math.sin(self.yaw) * cos_pitch,
        )
        self.right = maths.normalize(maths.cross(self.front, self.world_up))
        self.up = maths.cross(self.right, self.front)

    def quaternion_camera(self) -> None:
        """Ease the orientation towards the Euler angles and rebuild the matrices.

        The eye is held at walking height, and the camera vectors are read back
        from the resulting view matrix.
        """
        target_orientation = Quaternion.from_euler(-self.pitch, self.yaw)
        self.orientation = maths.slerp(self.orientation, target_orientation, 0.2)

        self.eye[1] = 1.75

        self._update_matrices()

        self.right = self.view[0, :3].copy()
        self.up = self.view[1, :3].copy()
        self.front = -self.view[2, :3]