# virtualrig

Pure-Python building blocks for skeletal animation and character rigging.
It has no dependencies outside the standard library.

## What is inside

- `virtualrig.bvh` – parse Biovision Hierarchy (BVH) motion capture files
  (`Bvh.load`, `Bvh.parse`) into a joint hierarchy (`Joint`, `Channel`,
  `ChannelType`). Look joints up by index or name with `Bvh.joint`, read and
  edit per-frame channel values with `Bvh.motion` and `Bvh.set_motion`, and
  compute every joint's world position for a frame with `Bvh.pose`.
  Malformed input raises `BvhError`. `motion_name_from_path` gives a file's
  base name without directory or extension.
- `virtualrig.vector3` – `Vector3`, a mutable 3D vector: `*` is the dot
  product with a vector and scaling with a number, `^` is the cross product.
- `virtualrig.matrix4` – `Matrix4`, a 4×4 matrix with translation, scaling,
  axis rotations, `inverse` (raising `SingularMatrixError`), point and
  direction transforms, OpenGL column-major export (`to_gl`) and text
  `write`/`read`; plus the `det2x2`, `det3x3`, `det4x4` helpers.
- `virtualrig.transforms` – `cross`, `dot`, `angle` and
  `inverse_of_isometry` for rotation-plus-translation matrices.
- `virtualrig.dual_quaternion` – `Quaternion` and `DualQuaternion`, with
  construction from a matrix, point transformation, normalisation and
  weighted accumulation for blending.
- `virtualrig.grid` – `Grid`, a resizable rows-by-columns numeric matrix with
  identity, trace, in-place transpose and product.
- `virtualrig.containers` – `Array`, a growable array whose removal moves the
  last element into the gap, and `Bag`, a collection keyed by integer
  triples through an extract function (`extract_int` for integers).
- `virtualrig.halfedge` – half-edge mesh pieces: `EdgeVertex`,
  `ParticleEdge`, `PEdge` and `VertexParent`.
- `virtualrig.bounding_box` – `BoundingBox`, an axis-aligned box that can be
  extended by points or other boxes and lists its twelve edges.
- `virtualrig.image` – `load_bitmap` reads an uncompressed 24-bit, one-plane
  bitmap into an `Image` of RGB bytes, raising `BitmapError` otherwise.
- `virtualrig.utils` – small numeric helpers (`mid3`, `max3`, …) and
  `next_largest_prime` for sizing hash tables.

## Installation

```
pip install .
```

## Example

```python
from virtualrig.bvh import Bvh

bvh = Bvh.load("walk.bvh")
print(bvh.motion_name, len(bvh.joints), bvh.num_frames, bvh.interval)
hips = bvh.joint("Hips")
print(bvh.motion(0, 0))
positions = bvh.pose(0)
```

```python
from virtualrig.matrix4 import Matrix4

m = Matrix4.translation((1.0, 2.0, 3.0))
print(m.transform((0.0, 0.0, 0.0)))  # (1.0, 2.0, 3.0)
```

## What it does not do

The package computes poses and transforms but draws nothing: there is no
viewer, window or rendering. It has no mesh skinning, physics or
constraint solving, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```