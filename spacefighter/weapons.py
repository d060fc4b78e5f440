"""Weapons that ships carry and fire projectiles from."""

from __future__ import annotations

import abc
from typing import List, Optional, Protocol

from spacefighter.attachments import Attachable, Attachment
from spacefighter.flags import TriggerType
from spacefighter.gameobject import GameObject
from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime
from spacefighter.projectile import Projectile


class Sound(Protocol):
    def play(self) -> None: ...


class Weapon(Attachment):
    """An attachment that fires projectiles taken from a shared pool."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        is_active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        self._key = key
        self.is_attached_to_player = is_attached_to_player
        self._active = is_active
        self.trigger_type = trigger_type
        self.projectile_pool: Optional[List[Projectile]] = None
        self.fire_sound: Optional[Sound] = None
        self._game_object: Optional[GameObject] = None
        self._offset = Vector2()

    @property
    def key(self) -> str:
        return self._key

    @property
    def attachment_type(self) -> str:
        return "Weapon"

    @property
    def game_object(self) -> Optional[GameObject]:
        """The game object the weapon is attached to, if any."""
        return self._game_object

    def attach_to(self, attachable: Attachable, position: Vector2) -> None:
        """Attach to an object, offset from its position."""
        self._game_object = attachable if isinstance(attachable, GameObject) else None
        self._offset = position.copy()

    def update(self, game_time: GameTime) -> None:
        """Advance the weapon by one frame."""

    @abc.abstractmethod
    def fire(self, trigger_type: TriggerType) -> None:
        """Try to fire the weapon with the given trigger."""

    def is_active(self) -> bool:
        """Return True if the weapon and the object carrying it are active."""
        if self._game_object is None:
            return False
        return self._active and self._game_object.is_active()

    def activate(self) -> None:
        """Enable the weapon."""
        self._active = True

    def deactivate(self) -> None:
        """Disable the weapon."""
        self._active = False

    @property
    def position(self) -> Vector2:
        """The weapon's position on screen."""
        if self._game_object is None:
            raise RuntimeError(f"weapon {self._key!r} is not attached")
        return self._game_object.position + self._offset

    def get_projectile(self) -> Optional[Projectile]:
        """Return the first inactive projectile in the pool, or None."""
        return next(
            (p for p in self.projectile_pool or () if not p.is_active()), None
        )


class Blaster(Weapon):
    """A weapon that fires one projectile per trigger, with a cooldown."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        is_active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        super().__init__(key, is_attached_to_player, is_active, trigger_type)
        self.cooldown: float = 0.0
        self.cooldown_seconds: float = 0.35

    def update(self, game_time: GameTime) -> None:
        """Count the cooldown down."""
        if self.cooldown > 0:
            self.cooldown -= game_time.elapsed_time

    def can_fire(self) -> bool:
        """Return True once the cooldown has run out."""
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        """Make the blaster ready to fire at once."""
        self.cooldown = 0.0

    def fire(self, trigger_type: TriggerType) -> None:
        """Fire a projectile if active, ready and the trigger matches."""
        if not self.is_active():
            return
        if not self.can_fire():
            return
        if not trigger_type.contains(self.trigger_type):
            return

        projectile = self.get_projectile()
        if projectile is None:
            return

        if self.fire_sound is not None:
            self.fire_sound.play()

        projectile.activate(self.position, self.is_attached_to_player)
        self.cooldown = self.cooldown_seconds