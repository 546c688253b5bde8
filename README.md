# scenekit

scenekit holds the scene-side maths and data of a small real-time 3D
renderer, written with NumPy. It works out the values a renderer passes to
its shaders: view and projection matrices, model transforms, and per-vertex
mesh attributes with tangent frames. It draws nothing itself. You can use it
with any graphics binding, or on its own for tests and offline work.

## Installation

```
pip install scenekit
```

To install the test tools as well:

```
pip install "scenekit[test]"
```

scenekit needs Python 3.10 or later and NumPy.

## Modules

### `scenekit.maths`

- `translate(v)`, `scale(v)` and `rotate(angle, axis)` build 4×4 transforms.
  `rotate` turns by an angle in radians about an axis, which it normalises
  first.
- `perspective(fov, aspect, near, far)` builds a perspective projection. The
  vertical field of view is in radians.
- `length(v)`, `normalize(v)` and `cross(a, b)` work on 3-vectors.
  `normalize` returns the zero vector for a zero input. The helpers raise
  `ValueError` for anything that is not three components.
- `radians(degrees)` converts degrees to radians, taking pi as 3.1416.
- `Quaternion(w, x, y, z)` is a dataclass. Its default is the identity.
  `Quaternion.from_euler(pitch, yaw)` builds an orientation from two angles,
  and `matrix()` returns the rotation as a 4×4 matrix.
- `slerp(q1, q2, t)` interpolates along the shorter arc. When the two
  quaternions are almost equal (cos θ > 0.9999) it returns `q2` as it is.

### `scenekit.camera`

`Camera(eye, target)` is a first-person camera steered by `yaw` and `pitch`,
in radians. By default it has a 45° field of view, a 1024:768 aspect ratio,
a near plane at 0.2 and a far plane at 100.

- `calculate_camera_vectors()` sets `front`, `right` and `up` from the yaw and
  pitch.
- `calculate_matrices()` does the same, then sets `view` and `projection`.
- `quaternion_camera()` eases `orientation` 20% of the way towards the current
  angles. It fixes the eye height at 1.75 and rebuilds `view` and
  `projection`. It then reads `right`, `up` and `front` back from the view
  matrix.

### `scenekit.model`

- `parse_obj(lines)` reads Wavefront OBJ text and returns three arrays: the
  positions (N×3), the texture coordinates (N×2) and the normals (N×3), one
  row per face corner. `load_obj(path)` does the same for a file.
  - Faces must use `v/vt/vn` corners. Only the first three corners of each
    face are used.
  - Other statements are skipped, and so are comments.
  - Malformed numbers, malformed faces and out-of-range indices raise
    `ObjFormatError`, which is a `ValueError`.
- `calculate_tangents(vertices, uvs)` returns tangents and bitangents, one
  per vertex. All three corners of a triangle get the same value. Triangles
  with degenerate texture coordinates give non-finite values.
- `Mesh` holds the geometry, the material coefficients `ka`, `kd`, `ks` and
  `ns`, and a list of `Texture`s.
  - `Mesh.from_obj(path)` loads a mesh and computes its tangents.
  - `add_texture(path, kind)` attaches a texture. Its unit is its position in
    the list.
  - `material_uniforms()` returns the coefficients under the names `ka`, `kd`,
    `ks` and `Ns`, and maps each sampler name, such as `diffuseMap`, to its
    texture unit.

## Matrix layout

Matrices are 4×4 NumPy arrays in the usual row/column order: a point is
transformed as `m @ [x, y, z, 1]`, and the translation sits in the last
column. An API that expects column-major data needs either `m.T` or its own
transpose flag.

## Example

```python
import numpy as np
from scenekit import maths
from scenekit.camera import Camera
from scenekit.model import parse_obj, calculate_tangents

camera = Camera(eye=np.array([0.0, 0.0, 7.5]), target=np.zeros(3))
camera.yaw = maths.radians(-90.0)
camera.quaternion_camera()

model = (
    maths.translate([0.0, 1.5, -3.0])
    @ maths.rotate(maths.radians(20.0), [0.0, 1.0, 0.0])
    @ maths.scale([0.75, 0.75, 0.75])
)
mv = camera.view @ model
mvp = camera.projection @ mv

obj = """
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1
""".splitlines()
vertices, uvs, normals = parse_obj(obj)
tangents, bitangents = calculate_tangents(vertices, uvs)
```

## What it does not do

scenekit has no lighting model and no window or render loop. It has no
ready-made scene and does no input handling: the caller moves the camera by
setting `eye`, `yaw` and `pitch`. A `Texture` records a path and a sampler
kind only, and scenekit does not read image files.