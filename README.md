# bossarena

The simulation core of a small 3D boss-fight game. It is plain Python
logic with no rendering and no window. You step it one frame at a time
and you can test it.

## Modules

- `bossarena.transform`
  - `Vec3` is an immutable vector. It supports `+`, `-`, scalar `*`,
    unary `-` and `length()`.
  - `Matrix` is an immutable 4×4 matrix in the row-vector convention, so
    `A @ B` applies `A` first. It has the constructors `identity()`,
    `translation()`, `scaling()`, `rotation_x()`, `rotation_y()` and
    `rotation_z()`, and the method `transform_coord(vector)`.
  - `world_matrix(position, rotation, scale)` builds
    scale @ rotation (Y, then X, then Z) @ translation.
- `bossarena.game_object`: `GameObject` is an abstract base with
  `position`, `rotation` and `scale`, plus `set_uniform_scale(value)`.
- `bossarena.collision`
  - `BoundingBox.is_hit(other)` tests one box against another and counts
    touching as a hit. The box also has `center()`, `size()` and
    `set_original_local(min_position, max_position)`.
  - `BoundingBox.create_for_points(points)` fits the box in x and z. It
    places the top of the box at the height of its bottom, so
    `max_position.y` equals `min_position.y`.
  - `BoundingSphere.create_for_points(points)` centres the sphere on the
    mean of the points and sets the radius to reach the farthest point.
  - `BoundingSphere.is_hit(other)` also counts touching as a hit.
  - Both `create_for_points` methods raise `ValueError` for an empty
    point set.
- `bossarena.mesh_object`: `StaticMeshObject` holds its mesh as a tuple
  of local-space vertices, set with `attach_mesh` and cleared with
  `detach_mesh`. It also holds a `bsphere` and a `bbox`.
  - `update_bbox()` refits the world-space box to the eight transformed
    corners of the mesh's local bounds.
  - `update_bbox(min_position, max_position)` does the same from the
    corners you pass. Pass both corners or neither.
  - Neither form does anything while no mesh is attached.
- `bossarena.attacks`: `BossAttack` is the abstract base. The attacks
  are:
  - `BossAttackJump`: starts with an upward speed of 0.5 and loses 0.02
    per frame to gravity. It ends when it lands at y = 0.
  - `BossAttackSlash`: moves −1.0 along z over 0.5 s.
  - `BossAttackSlashCharge`: stands still for 3.0 s (`AttackPhase.CHARGING`),
    then moves +1.0 along x over 2.0 s (`AttackPhase.SLASHING`).
- `bossarena.attack_manager`: `BossAttackManager` holds at most one
  attack. `create_boss_attack(kind, boss_position)` replaces any current
  attack with a new one of the given `BossAttackKind`.
  `BossAttackKind.MAX` starts nothing. When an attack finishes, `update()`
  drops it.
- `bossarena.characters`: `Ground`, `Player` and `Boss`. Their `update`
  methods take the set of held `Key`s for that frame.
  - `Player` turns with `LEFT`/`RIGHT`, drives along its facing
    direction with `UP`/`DOWN`, and climbs and sinks with `W`/`S`.
    Holding `Z` sets `shot`.
  - `Boss` only attacks while its `player` attribute is set. With
    `JUMP` as its starting `AttackSequenceState`, it repeats the jump
    attack after each 2 s cooldown. While no attack is running it slides
    along x with `LEFT`/`RIGHT`, and it never goes below y = 0.
  - `Player.handle_ground_collision(ground)` and
    `Boss.handle_ground_collision(ground)` lift the character onto the
    top of the ground's box.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from bossarena.transform import Vec3
from bossarena.attack_manager import BossAttackManager, BossAttackKind

manager = BossAttackManager()
manager.create_boss_attack(BossAttackKind.SLASH, Vec3(0.0, 0.0, 5.0))
while manager.has_active_attack():
    manager.update()
print(manager.active_attack())  # None: the finished attack was dropped
```

Each `update()` call advances an attack by one frame. Slash and charge
use a fixed step of 1/60 s. The jump uses a step of one unit per frame.

## What it does not do

This package has no renderer, window, game loop or command to run. It
does not read keyboard input, so you pass in the held keys yourself. It
does not load meshes from files, so you give a mesh as a list of `Vec3`
vertices. It has no sound and no scenes.