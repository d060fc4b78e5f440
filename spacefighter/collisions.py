"""Decides which pairs of game objects collide and dispatches callbacks."""

from __future__ import annotations

from typing import Callable, Dict, Set, Tuple

from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject

OnCollision = Callable[[GameObject, GameObject], None]

_Pair = Tuple[CollisionType, CollisionType]


def _ordered(type1: CollisionType, type2: CollisionType) -> _Pair:
    return (type1, type2) if type1 < type2 else (type2, type1)


class CollisionManager:
    """Holds the collision rules between pairs of collision types."""

    def __init__(self) -> None:
        self._collisions: Dict[_Pair, OnCollision] = {}
        self._non_collisions: Set[_Pair] = set()

    def add_collision_type(
        self, type1: CollisionType, type2: CollisionType, callback: OnCollision
    ) -> None:
        """Check objects of these two types and call callback when they touch.

        The callback receives the object with the lower type value first.
        """
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Never check objects of these two types against each other."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: GameObject, second: GameObject) -> None:
        """Test two objects and run the matching callback if they overlap."""
        t1 = first.collision_type()
        t2 = second.collision_type()

        if t1 == t2 or t1 == CollisionType.NONE or t2 == CollisionType.NONE:
            return

        if t1 > t2:
            t1, t2 = t2, t1
            first, second = second, first

        pair = (t1, t2)
        if pair in self._non_collisions:
            return

        callback = self._collisions.get(pair)
        if callback is None:
            self._non_collisions.add(pair)
            return

        difference = first.position - second.position
        radii_sum = first.collision_radius + second.collision_radius
        if difference.length_squared() <= radii_sum * radii_sum:
            callback(first, second)