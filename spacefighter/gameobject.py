"""The base class for everything that is updated and checked for collisions."""

from __future__ import annotations

import abc
import itertools
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Optional, Union

from spacefighter.flags import CollisionType
from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime


@dataclass
class Screen:
    """The dimensions of the game's drawing area, in pixels."""

    width: int = 1600
    height: int = 900

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)


class GameObject(abc.ABC):
    """An object that can be updated, positioned and checked for collisions."""

    screen: ClassVar[Screen] = Screen()
    current_level: ClassVar[Optional[Any]] = None
    _indices: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self) -> None:
        self.index: int = next(GameObject._indices)
        self._active = False
        self._position = Vector2()
        self._previous_position = Vector2()
        self.collision_radius: float = 0.0

    @staticmethod
    def set_current_level(level: Optional[Any]) -> None:
        """Set the level that every game object reports its position to."""
        GameObject.current_level = level

    @property
    def position(self) -> Vector2:
        """The current position; the same vector object for the object's life."""
        return self._position

    @property
    def previous_position(self) -> Vector2:
        """The position before the most recent move."""
        return self._previous_position

    def update(self, game_time: GameTime) -> None:
        """Report the object's position to the current level while active."""
        if not self.is_active():
            return
        level = GameObject.current_level
        if level is None:
            return
        level.update_sector_position(self)

    def is_active(self) -> bool:
        """Return True if the object is active."""
        return self._active

    def activate(self) -> None:
        """Mark the object active."""
        self._active = True

    def deactivate(self) -> None:
        """Mark the object inactive."""
        self._active = False

    def half_dimensions(self) -> Vector2:
        """Return half the object's size; by default the collision radius both ways."""
        return Vector2(self.collision_radius, self.collision_radius)

    @abc.abstractmethod
    def collision_type(self) -> CollisionType:
        """Return the collision categories the object belongs to."""

    def hit(self, damage: float) -> None:
        """Apply damage to the object; ignored unless overridden."""

    def has_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type shares a bit with mask."""
        return mask.contains(self.collision_type())

    def is_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type is exactly mask."""
        return self.collision_type() == mask

    def is_drawn_by_level(self) -> bool:
        """Return True if the level is responsible for drawing the object."""
        return True

    def set_position(self, x: Union[float, Vector2], y: Optional[float] = None) -> None:
        """Move to (x, y), or to a vector given as one argument."""
        if isinstance(x, Vector2):
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("set_position() needs a vector or both coordinates")
        self._previous_position = self._position.copy()
        self._position.set(x, y)

    def translate_position(
        self, dx: Union[float, Vector2], dy: Optional[float] = None
    ) -> None:
        """Move by (dx, dy), or by a vector given as one argument."""
        if isinstance(dx, Vector2):
            dx, dy = dx.x, dx.y
        elif dy is None:
            raise TypeError("translate_position() needs a vector or both offsets")
        self.set_position(self._position.x + dx, self._position.y + dy)

    def is_on_screen(self) -> bool:
        """Return True if any part of the object overlaps the screen."""
        half = self.half_dimensions()
        screen = GameObject.screen
        position = self._position
        if position.y - half.y >= screen.height:
            return False
        if position.y + half.y <= 0:
            return False
        if position.x - half.x >= screen.width:
            return False
        if position.x + half.x <= 0:
            return False
        return True