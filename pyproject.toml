[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenekit"
version = "0.1.0"
description = "Scene maths for a small real-time 3D renderer: transforms, quaternions, a first-person camera and OBJ meshes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "graphics", "quaternion", "slerp", "camera", "obj", "wavefront", "tangents"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["scenekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
