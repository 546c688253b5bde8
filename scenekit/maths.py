"""Vector, matrix and quaternion helpers for the renderer.

Matrices are 4x4 numpy arrays in conventional row/column order, so a point
``p`` is transformed as ``m @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

VectorLike = Sequence[float] | np.ndarray


def _vec3(v: VectorLike) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


@dataclass
class Quaternion:
    """A quaternion ``w + xi + yj + zk``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_euler(cls, pitch: float, yaw: float) -> Quaternion:
        """Build an orientation from pitch and yaw angles in radians."""
        cos_pitch = math.cos(0.5 * pitch)
        sin_pitch = math.sin(0.5 * pitch)
        cos_yaw = math.cos(0.5 * yaw)
        sin_yaw = math.sin(0.5 * yaw)
        return cls(
            w=cos_pitch * cos_yaw,
            x=sin_pitch * cos_yaw,
            y=cos_pitch * sin_yaw,
            z=sin_pitch * sin_yaw,
        )

    def matrix(self) -> np.ndarray:
        """Return the 4x4 rotation matrix this quaternion describes."""
        w, x, y, z = self.w, self.x, self.y, self.z
        s = 2.0 / (w * w + x * x + y * y + z * z)
        xs, ys, zs = x * s, y * s, z * s
        xx, xy, xz = x * xs, x * ys, x * zs
        yy, yz, zz = y * ys, y * zs, z * zs
        xw, yw, zw = w * xs, w * ys, w * zs

        m = np.identity(4)
        m[0, 0] = 1.0 - (yy + zz)
        m[1, 0] = xy + zw
        m[2, 0] = xz - yw
        m[0, 1] = xy - zw
        m[1, 1] = 1.0 - (xx + zz)
        m[2, 1] = yz + xw
        m[0, 2] = xz + yw
        m[1, 2] = yz - xw
        m[2, 2] = 1.0 - (xx + yy)
        return m


def translate(v: VectorLike) -> np.ndarray:
    """Return a translation matrix moving points by ``v``."""
    vec = _vec3(v)
    m = np.identity(4)
    m[:3, 3] = vec
    return m


def scale(v: VectorLike) -> np.ndarray:
    """Return a scaling matrix with factors ``v`` along x, y and z."""
    vec = _vec3(v)
    m = np.identity(4)
    m[0, 0], m[1, 1], m[2, 2] = vec
    return m


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection matrix (vertical field of view in radians)."""
    half = math.tan(fov / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * half)
    m[1, 1] = 1.0 / half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def length(v: VectorLike) -> float:
    """Return the Euclidean length of ``v``."""
    x, y, z = _vec3(v)
    return math.sqrt(x * x + y * y + z * z)


def normalize(v: VectorLike) -> np.ndarray:
    """Return ``v`` scaled to unit length, or the zero vector if ``v`` is zero."""
    vec = _vec3(v)
    size = length(vec)
    if size == 0.0:
        return np.zeros(3)
    return vec / size


def cross(a: VectorLike, b: VectorLike) -> np.ndarray:
    """Return the cross product ``a x b``."""
    ax, ay, az = _vec3(a)
    bx, by, bz = _vec3(b)
    return np.array([ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx])


def radians(angle: float) -> float:
    """Convert degrees to radians using pi rounded to 3.1416."""
    return angle * 3.1416 / 180.0


def rotate(angle: float, v: VectorLike) -> np.ndarray:
    """Return a matrix rotating by ``angle`` radians about the axis ``v``."""
    axis = normalize(v)
    c = math.cos(0.5 * angle)
    s = math.sin(0.5 * angle)
    return Quaternion(c, s * axis[0], s * axis[1], s * axis[2]).matrix()


def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Spherically interpolate from ``q1`` towards ``q2`` by fraction ``t``."""
    cos_theta = q1.w * q2.w + q1.x * q2.x + q1.y * q2.y + q1.z * q2.z

    # Nearly identical orientations: avoid dividing by sin(theta) ~ 0.
    if cos_theta > 0.9999:
        return q2

    # Take the short way round the sphere.
    if cos_theta < 0:
        q2 = Quaternion(-q2.w, -q2.x, -q2.y, -q2.z)
        cos_theta = -cos_theta

    theta = math.acos(min(cos_theta, 1.0))
    sin_theta = math.sin(theta)
    a = math.sin((1.0 - t) * theta) / sin_theta
    b = math.sin(t * theta) / sin_theta
    return Quaternion(
        w=a * q1.w + b * q2.w,
        x=a * q1.x + b * q2.x,
        y=a * q1.y + b * q2.y,
        z=a * q1.z + b * q2.z,
    )