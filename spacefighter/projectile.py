"""Projectiles fired by weapons."""

from __future__ import annotations

from typing import ClassVar

from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject
from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime


class Projectile(GameObject):
    """A shot that travels in a straight line until it leaves the screen."""

    texture_size: ClassVar[Vector2] = Vector2()

    def __init__(self) -> None:
        super().__init__()
        self.speed: float = 500.0
        self.damage: float = 1.0
        self.direction: Vector2 = -Vector2.UNIT_Y
        self.was_shot_by_player: bool = True
        self.collision_radius = 9

    def update(self, game_time: GameTime) -> None:
        """Move the projectile and deactivate it once it is off the screen."""
        if self.is_active():
            self.translate_position(
                self.direction * self.speed * game_time.elapsed_time
            )

            position = self.position
            size = type(self).texture_size
            screen = GameObject.screen
            if (
                position.y < -size.y
                or position.x < -size.x
                or position.y > screen.height + size.y
                or position.x > screen.width + size.x
            ):
                self.deactivate()

        super().update(game_time)

    def activate(self, position: Vector2, was_shot_by_player: bool = True) -> None:
        """Place the projectile and make it active."""
        self.was_shot_by_player = was_shot_by_player
        self.set_position(position)
        super().activate()

    def projectile_type(self) -> CollisionType:
        """Return the collision category that marks this as a projectile."""
        return CollisionType.PROJECTILE

    def collision_type(self) -> CollisionType:
        """Return the shooter's side combined with the projectile category."""
        side = CollisionType.PLAYER if self.was_shot_by_player else CollisionType.ENEMY
        return side | self.projectile_type()

    def __str__(self) -> str:
        side = "Player" if self.was_shot_by_player else "Enemy"
        return f"{side} Projectile"