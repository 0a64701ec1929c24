# softraster

A small software rasterizer for Python with no dependencies. It provides
the math for a simple 2D/3D rendering pipeline, and a renderer that draws
points and lines into a colour buffer in memory and keeps a depth buffer
beside it.

## Installation

```
pip install softraster
```

## Modules

- `softraster.mathutil`: scalar helpers such as `clamp`, `lerp`, `square`,
  `deg2rad`, `rad2deg`, `floor_to_int`, `round_to_int`, `fmod`, `inv_sqrt`,
  `sin_cos` (degrees) and `sin_cos_rad` (radians), both returning a
  `(sin, cos)` tuple. It also holds the `BoundCheckResult` enum
  (`OUTSIDE`, `INTERSECT`, `INSIDE`) and the `SMALL_NUMBER` tolerance.
- `softraster.vector2`, `softraster.vector3`, `softraster.vector4`:
  immutable `Vector2`, `Vector3` and `Vector4` with `+`, `-`, scalar and
  component-wise `*`, `/`, `dot`, `size`, `normalized` and string
  formatting. `Vector3` adds `cross`; `Vector3.from_vector2` and
  `Vector4.from_vector2` / `from_vector3` / `point` build homogeneous
  coordinates.
- `softraster.matrix`: column-major `Matrix2x2`, `Matrix3x3` and
  `Matrix4x4`, multiplied by scalars, matrices and vectors, with
  `transpose`, `identity` and `to_strings`. A `Matrix3x3` also transforms a
  `Vector2` as a point, and a `Matrix4x4` a `Vector3`.
- `softraster.screenpoint`: `ScreenPoint`, an integer pixel position with
  the origin at the top left, and conversions to and from Cartesian
  positions centred on the screen.
- `softraster.color`: `Color32` (8-bit channels, packed with `color_value`
  and unpacked with `from_value`; adding saturates at 255), `LinearColor`
  (float channels and named colours such as `LinearColor.RED`) and
  `HSVColor` with `to_linear_color`.
- `softraster.rotator`: `Rotator`, yaw/roll/pitch in degrees, with
  `clamped` and `local_axes`.
- `softraster.quaternion`: `Quaternion`, built `from_matrix`,
  `from_vector`, `from_axis_angle` or `from_rotator`, with composition,
  `rotate_vector`, `slerp`, `inverse`, `normalized` and `to_rotator`.
- `softraster.transform`: `Transform`, a mutable position, rotation and
  scale, with `matrix`, `inverse`, `local_to_world`, `world_to_local` and
  `from_matrix`.
- `softraster.plane`: `Plane`, built from a normal and a point, from three
  points, or from four coefficients, with signed `distance`.
- `softraster.bounds`: `Circle`, `Rectangle`, `Sphere` and `Box` with
  containment and intersection tests; `Rectangle` and `Box` grow with `+=`.
- `softraster.frustum`: `Frustum` of exactly six planes, classifying a
  point, sphere or box with `check_bound`.
- `softraster.vertex`: `Vertex2D` and `Vertex3D` carrying a position, a
  colour and texture coordinates, scalable and addable for interpolation.
- `softraster.shader`: `vertex_shader_2d` / `vertex_shader_3d` return new
  vertex lists with transformed positions; `fragment_shader_2d` /
  `fragment_shader_3d` modulate a colour.
- `softraster.clipping`: `PerspectiveTest`, which clips a triangle list
  against one clip-space plane, the test and edge functions for each plane
  (`test_w0`/`edge_w0`, `test_nx`/`edge_nx`, ... `test_near`/`edge_near`),
  and `standard_tests()` returning all seven.
- `softraster.rasterizer`: the abstract `RendererInterface`, the
  `SoftwareRenderer` that implements it, and the Cohen–Sutherland helpers
  `test_region` and `cohen_sutherland_line_clip`.

## Example

```python
from softraster.color import LinearColor
from softraster.rasterizer import SoftwareRenderer
from softraster.screenpoint import ScreenPoint
from softraster.vector2 import Vector2

renderer = SoftwareRenderer()
renderer.init(ScreenPoint(64, 48))
renderer.clear(LinearColor.WHITE)

renderer.begin_frame()
renderer.draw_line(Vector2(-20.0, -10.0), Vector2(20.0, 15.0), LinearColor.RED)
renderer.draw_point(Vector2(0.0, 0.0), LinearColor.BLUE)
renderer.push_statistic_text("frame 1")
renderer.end_frame()

print(renderer.get_pixel(ScreenPoint(32, 24)))
print(renderer.presented_texts)
```

Positions given as `Vector2` are Cartesian, with the origin at the centre
of the screen and Y pointing up; `ScreenPoint` positions are pixel
coordinates with the origin in the top-left corner. Lines are clipped to
the screen and drawn with Bresenham's algorithm. Pixels and depths outside
the screen are ignored on write; reading them gives `LinearColor.ERROR` and
infinity.

## What it does not do

`SoftwareRenderer` only draws into memory. It does not open a window,
display the frame or write image files: `end_frame` moves the queued
statistic texts into `presented_texts`, and the pixels are read back with
`get_pixel` or the `screen_buffer` property. There is no triangle
rasterisation or command-line program.

## Running the tests

```
pip install softraster[test]
pytest
```