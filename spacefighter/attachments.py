"""Interfaces for objects that carry attachments and for the attachments."""

from __future__ import annotations

import abc
from typing import Optional, Union

from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime


class Attachable(abc.ABC):
    """An object that items can be attached to."""

    @abc.abstractmethod
    def get_attachment(self, key: Union[str, int]) -> Optional["Attachment"]:
        """Return the attachment with the given key or index, or None."""


class Attachment(abc.ABC):
    """An item that can be attached to an Attachable."""

    @abc.abstractmethod
    def attach_to(self, attachable: Attachable, position: Vector2) -> None:
        """Attach the item to an object at an offset from its position."""

    @abc.abstractmethod
    def update(self, game_time: GameTime) -> None:
        """Advance the attachment by one frame."""

    @property
    @abc.abstractmethod
    def key(self) -> str:
        """The key used to look the attachment up."""

    @property
    @abc.abstractmethod
    def attachment_type(self) -> str:
        """The kind of attachment, such as "Weapon"."""