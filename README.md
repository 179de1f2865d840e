# gamemath

Small, dependency-free building blocks for a 2D/3D game:

- `gamemath.vector`: `Vector2`, `Vector3` and `Vector4` dataclasses with
  arithmetic operators. `Vector2` supports component-wise and scalar `+ - * /`,
  `length()`, `normalized()` (the zero vector stays zero) and an unclamped
  `Vector2.lerp`. `Vector3` has `length()`, `normalize()` (raises `ValueError`
  for the zero vector), `dot`, `cross`, a `lerp` with `t` clamped to [0, 1],
  `transform(matrix)` (point transform with perspective divide) and the
  constants `UNIT_X`, `UNIT_Y`, `UNIT_Z` and `ZERO`.
- `gamemath.matrix`: a row-major `Matrix4x4` (row vectors, `v * M`) with
  `identity`, `scale`, `rotate_x/y/z`, `rotate`, `translate`, `affine`,
  `inverse` (raises `ValueError` when singular), `transpose`, `look_at`,
  `perspective_fov`, `orthographic`, `make_rotate_axis_angle`,
  `direction_to_direction` and `normalize_rotation`; plus a plain `Matrix3x3`.
- `gamemath.quaternion`: `Quaternion` with `conjugate`, `norm`, `dot`,
  `normalize`, `inverse`, `from_axis_angle`, `rotate_vector`,
  `make_rotate_matrix` / `to_matrix`, `from_rotation_matrix`, `extract_yaw`,
  `lerp`, `slerp`, and the in-place `add_rotation` and `slerp_toward`.
- `gamemath.structures`: dataclasses for transforms (`Transform2D`,
  `EulerTransform`, `Transform3D`), keyframe animation (`KeyFrame`,
  `AnimationCurve`, `NodeAnimation`, `AnimationData`), skeletons (`Joint`,
  `Skeleton`) and model data (`VertexData`, `Material`, `MaterialData`,
  `Node`, `VertexWeightData`, `JointWeightData`, `ModelData`,
  `VertexInfluence`, `WellForGPU`).
- `gamemath.global_variables`: `GlobalVariables`, ordered groups of tunable
  values (`int`, `float`, `Vector3`, `bool`) saved to and loaded from JSON
  files, one file per group.
- `gamemath.input_state`: `InputState`, which keeps the current and previous
  keyboard, mouse and gamepad readings and answers "held" and "just pressed"
  questions.

## Installation

```
pip install .
```

## Examples

```python
import math
from gamemath.vector import Vector3
from gamemath.matrix import Matrix4x4
from gamemath.quaternion import Quaternion

world = Matrix4x4.affine(Vector3(1, 1, 1), Vector3(0, math.pi / 2, 0), Vector3(0, 0, 5))
point = Vector3(1, 0, 0).transform(world)

q = Quaternion.from_axis_angle(Vector3(0, 1, 0), math.pi / 2)
rotated = Quaternion.rotate_vector(Vector3(1, 0, 0), q)
halfway = Quaternion.slerp(Quaternion.identity(), q, 0.5)

# affine also accepts a quaternion as the rotation
world_q = Matrix4x4.affine(Vector3(1, 1, 1), q, Vector3(0, 0, 5))
```

### Tunable values

```python
from gamemath.global_variables import GlobalVariables

tuning = GlobalVariables("resources/globalVariables/")
tuning.add_value("Enemy", "thetaSpeed", 60.0)   # only added if missing; creates the group
tuning.set_value("Enemy", "thetaSpeed", 45.0)   # overwrites; the group must exist
speed = tuning.get_value("Enemy", "thetaSpeed", float)
path = tuning.save_file("Enemy")                 # writes Enemy.json, returns its path
tuning.load_files()                              # merges every *.json group in the directory
list(tuning.groups_matching("En"))               # ["Enemy"]
```

A group is saved as `{"Enemy": [{"thetaSpeed": 45.0}, ...]}`, a list of
one-key objects that keeps item order; `Vector3` values are written as
three-element lists. Loading adds only keys that are not already present.
`GlobalVariables.get_instance()` returns a shared store using the default
directory `resources/globalVariables/`.

Missing groups or keys, reads with the wrong type, unreadable files and
unsupported JSON values raise `GlobalVariablesError`; setting a value of an
unsupported type raises `TypeError`.

### Input tracking

```python
from gamemath.input_state import InputState, GamepadState, GamepadButton

keys = [0] * 256
keys[57] = 0x80

state = InputState()
state.update(keys=keys, mouse_buttons=(0x80, 0, 0, 0),
             mouse_delta=(3, -2), mouse_position=(640, 360),
             gamepad=GamepadState(buttons=GamepadButton.A, thumb_lx=20000))
state.trigger_key(57)                 # True on the first frame it is held
state.push_mouse_button(0)            # True while bit 0x80 is set
state.push_gamepad_button(GamepadButton.A)
state.left_stick_x()                  # 0.0 inside the dead zone, else value / 32767
state.left_trigger()                  # 0.0 .. 1.0
```

`keys` must hold exactly 256 values and `mouse_buttons` exactly 4; omitted
readings count as nothing pressed, an omitted gamepad as disconnected, and an
omitted cursor position keeps the last one.

## What this package does not do

It does not read keyboards, mice or gamepads itself: `InputState` only
interprets readings you pass to `update`. It does not render anything, load
model or animation files, or provide an editor window for the tunable values;
the structures in `gamemath.structures` are plain data containers.

## Running the tests

```
pip install .[test]
pytest
```