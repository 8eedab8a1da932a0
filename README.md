# patiengine

Pure-Python building blocks for a small 3D renderer. It uses only the standard library.

## Modules

- `patiengine.vector` provides the frozen dataclasses `Vector2`, `Vector3` and `Vector4`.
  - `Vector3` supports `+`, `-`, unary `-` and iteration.
  - For `Vector3`, `*` and `/` work component-wise with another `Vector3`, or as scaling with a number.
  - `Vector2` supports `-`.
- `patiengine.matrix` provides `Matrix4x4`, an immutable matrix in row-vector convention where the entry is `m[row][column]`. It supports `+`, `-` and `*`, and comes with these functions:
  - `add`, `subtract`, `multiply`, `inverse` and `transpose`. `inverse` raises `ZeroDivisionError` for a singular matrix.
  - `make_identity`, `make_rotate_x`, `make_rotate_y`, `make_rotate_z`, `make_translate`, `make_scale` and `make_affine`. `make_affine` scales, then rotates about X, Y and Z, then translates.
  - `make_perspective_fov`, `make_orthographic` and `make_viewport`.
  - `transform`, which applies a matrix to a point and divides by w. It raises `ValueError` when w is 0.
- `patiengine.curves` provides vector helpers and interpolation:
  - `transform_normal`, `length` (for `Vector2` or `Vector3`), `normalize`, `dot` and `cross`.
  - `lerp`, which works for numbers or vectors, and `slerp`.
  - `catmull_rom_interpolation`, which evaluates one spline segment.
  - `catmull_rom_position`, which takes at least four control points and evaluates `t` in [0, 1] along the whole spline.
- `patiengine.text` provides two conversions:
  - `to_wide` decodes UTF-8 bytes. Invalid sequences become U+FFFD.
  - `to_utf8` encodes text as UTF-8. Unpaired surrogates become U+FFFD.
- `patiengine.global_variables` provides `GlobalVariables`, which stores int, float, `Vector3` and bool items in named groups.
  - Write values with `add_item` (it sets a value only if the key is new) and `set_value`.
  - Read them with `get_int_value`, `get_float_value`, `get_vector3_value` and `get_bool_value`. These raise `KeyError` for a missing group or key, and `TypeError` for a value of the wrong type.
  - `save_file` writes a group to `<directory>/<group>.json`.
  - `load_file` reads one group back, and `load_files` loads every `.json` file in the directory.
  - `GlobalVariables.get_instance()` returns a shared instance that uses `Resources/GlobalVariables`.
- `patiengine.transform` provides `Transform`, `TransformationMatrix` and `WorldTransform`.
  - `WorldTransform.initialize()` computes the world matrix and fills a `TransformationMatrix`.
  - `transfer_matrix()` recomputes the world matrix. It multiplies by the parent's world matrix when a parent is set and a buffer exists.
- `patiengine.sound` provides `load_wave`, which reads a RIFF/WAVE file. It expects a `fmt ` chunk, an optional `JUNK` chunk and then a `data` chunk.
  - The result is a `SoundData` holding a `WaveFormat`, the sample bytes and `play_sound_length`, the number of blocks. `SoundData.unload()` clears it.
  - Malformed files raise `WaveFormatError`.
- `patiengine.model` provides `load_obj_file` and `load_material_template_file` for triangulated Wavefront OBJ files (with `v/vt/vn` face indices) and their MTL files.
  - The loader mirrors X on positions and normals, flips V, and reverses each triangle's winding.
  - Bad input raises `ObjFormatError`.
  - The module also defines `VertexData`, `ModelData`, `MaterialData`, `Material` and `DirectionalLight`.
- `patiengine.particles` provides `Emitter`, `Particle`, `ParticleForGPU`, `AABB`, `AccelerationField`, `make_new_particle`, `emit`, `is_collision` and `ParticleSystem`.
  - `ParticleSystem.update(view, projection, camera_matrix)` advances one frame of 1/60 s. It spawns particles on the emitter's schedule and retires expired ones.
  - When `is_accel` is set, it applies the acceleration field.
  - It returns per-instance matrices and colours, at most `max_instances` of them. Alpha fades over each particle's life, and `use_billboard` turns on billboarding.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
import math
from patiengine.vector import Vector3
from patiengine.matrix import make_affine, make_perspective_fov, transform

world = make_affine(Vector3(1, 1, 1), Vector3(0, math.pi / 4, 0), Vector3(0, 0, 5))
projection = make_perspective_fov(0.45, 1280 / 720, 0.1, 100.0)
clip = transform(Vector3(0, 0, 0), world * projection)
```

Loading a model:

```python
from patiengine.model import load_obj_file

model = load_obj_file("resources", "plane.obj")
print(len(model.vertices), model.material.texture_file_path)
```

Tunable values:

```python
from patiengine.global_variables import GlobalVariables

gv = GlobalVariables("Resources/GlobalVariables/")
gv.add_item("Player", "speed", 2.5)
gv.save_file("Player")
print(gv.get_float_value("Player", "speed"))
```

Particles:

```python
import random
from patiengine.matrix import make_identity
from patiengine.particles import ParticleSystem

system = ParticleSystem(rng=random.Random(0))
system.add_particles()
instances = system.update(make_identity(), make_identity(), make_identity())
```

## What it does not do

This package computes data. It does not:

- draw anything or open a window;
- talk to a GPU;
- play sound;
- read keyboard, mouse or gamepad input;
- provide an on-screen editor for `GlobalVariables`.

`WorldTransform` and `ParticleSystem` produce matrices and colours as Python objects. You hand those to a renderer of your own. Likewise, `load_wave` returns sample bytes for an audio library of your choice to play.