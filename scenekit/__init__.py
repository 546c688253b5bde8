"""Transforms, quaternions, a first-person camera and OBJ meshes for a small 3D renderer."""

__version__ = "0.1.0"
__all__ = ["maths", "camera", "model"]