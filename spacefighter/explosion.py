"""Explosion animations spawned when objects are destroyed."""

from __future__ import annotations

import math
import random
from typing import Optional, Protocol

from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime


class Animation(Protocol):
    def update(self, game_time: GameTime) -> None: ...

    def set_loop_count(self, count: int) -> None: ...

    def play(self) -> None: ...

    def is_playing(self) -> bool: ...


class Sound(Protocol):
    def play(self) -> None: ...


class Explosion:
    """An animation played once at a position, with an optional sound."""

    def __init__(self, animation: Animation, sound: Optional[Sound] = None) -> None:
        self.animation = animation
        self.sound = sound
        self.position = Vector2()
        self.rotation = 0.0
        self.scale = 1.0

    def update(self, game_time: GameTime) -> None:
        """Advance the animation."""
        self.animation.update(game_time)

    def activate(self, position: Vector2, scale: float = 1.0) -> None:
        """Start the explosion at a position with a random rotation."""
        self.position = position.copy()
        self.scale = scale
        self.rotation = random.random() * 2 * math.pi
        self.animation.set_loop_count(0)
        self.animation.play()
        if self.sound is not None:
            self.sound.play()

    def is_active(self) -> bool:
        """Return True while the animation is playing."""
        return self.animation.is_playing()