# spacefighter

Building blocks for the game logic of a small vertical space shooter.
The package has no dependencies and no rendering or audio backend. It
covers vectors, bit-mask collision and trigger types, game objects,
projectiles, weapons, particles, explosions and the rules that decide
which objects collide. You supply the timing, the input and the drawing.

## Contents

- `spacefighter.geometry`: `Vector2` and `Region`. `Vector2` is a mutable
  2D vector with arithmetic, `length`, `dot`, `cross`, `normalize`,
  `lerp` (clamped to its ends), `distance` and `random`, and the
  constants `ZERO`, `ONE`, `UNIT_X` and `UNIT_Y`. `Region` is an integer
  rectangle with edge, corner and `center` properties and `translate`.
- `spacefighter.flags`: `CollisionType` (`NONE`, `PLAYER`, `ENEMY`,
  `SHIP`, `PROJECTILE`) and `TriggerType` (`NONE`, `PRIMARY`,
  `SECONDARY`, `SPECIAL`, `ALL`). Both are `IntFlag`s. Combine them with
  `|`, `&` and `^`, and test them with `contains`, which is true when the
  two masks share a bit.
- `spacefighter.controls`: the keyboard `Key` and `MouseButton` codes,
  and the game pad types `Button`, `ButtonState`, `GamePadButtons`,
  `GamePadDPad`, `GamePadTriggers`, `GamePadThumbSticks` and
  `GamePadState`, which has `is_button_down`, `is_button_up` and
  `reset`.
- `spacefighter.particles`: the frame clock `GameTime`
  (`elapsed_time`, `total_time`), plus `Particle`, `ParticleInitializer`,
  `ParticleUpdater` and `ParticleEmitter`. The emitter takes inactive
  particles from a pool you give it; the pool must have
  `get_inactive_particle()`.
- `spacefighter.attachments`: the abstract `Attachable` and `Attachment`
  interfaces.
- `spacefighter.resources`: the abstract `Resource` and the
  `ResourceManager`. `ResourceManager.load` caches what it loads, hands
  out clones of cloneable cached resources, and raises `ValueError` when
  a load fails. Subclass `Resource` and implement `load` to read your
  files.
- `spacefighter.gameobject`: `GameObject`, the abstract base of
  everything that moves and collides, and `Screen`, which holds the
  screen size (1600 × 900 by default) that `is_on_screen` tests against.
  If `GameObject.current_level` is set to an object with
  `update_sector_position(obj)`, active objects report to it on every
  update.
- `spacefighter.collisions`: `CollisionManager`. It pairs collision
  types with callbacks, checks circle overlap by collision radius, and
  passes the object with the lower type value to the callback first.
- `spacefighter.projectile`: `Projectile`, which flies in a straight line
  and deactivates itself once it leaves the screen.
- `spacefighter.weapons`: the abstract `Weapon` and `Blaster`, which
  fires one projectile from a shared pool per trigger, then waits out a
  cooldown of 0.35 s by default.
- `spacefighter.explosion`: `Explosion`, which plays any animation object
  that has `update`, `set_loop_count`, `play` and `is_playing`, and an
  optional sound that has `play`.

## Example

```python
from spacefighter.flags import CollisionType, TriggerType
from spacefighter.gameobject import GameObject
from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime
from spacefighter.projectile import Projectile
from spacefighter.weapons import Blaster

a = Vector2(3, 4)
print(a.length())                         # 5.0
print(Vector2.lerp(Vector2(), a, 0.5))    # { 1.5, 2 }


class Carrier(GameObject):
    def collision_type(self):
        return CollisionType.PLAYER | CollisionType.SHIP


carrier = Carrier()
carrier.activate()
carrier.set_position(100, 200)

pool = [Projectile() for _ in range(5)]
blaster = Blaster("Main Blaster")
blaster.projectile_pool = pool
blaster.attach_to(carrier, Vector2(0, -20))

blaster.fire(TriggerType.PRIMARY)
print(pool[0].position)                   # { 100, 180 }
pool[0].update(GameTime(elapsed_time=0.1))
print(pool[0].position)                   # { 100, 130 }
```

## What the package does not do

The package has no ship classes, no player movement or input handling,
and no level that sets up enemies, projectile pools and collision
sectors. Build those from `GameObject`, `Weapon` and `CollisionManager`.
It also does not draw, play audio, open a window or read devices. There
is no command to run.

## Tests

```
pip install -e .[test]
pytest
```