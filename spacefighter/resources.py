"""Loading and caching of game resources."""

from __future__ import annotations

import abc
import copy
from typing import Dict, List, Optional, Type, TypeVar

T = TypeVar("T", bound="Resource")

_ID_LIMIT = 1 << 16


class Resource(abc.ABC):
    """Something loaded from an external file and managed by a ResourceManager."""

    def __init__(self) -> None:
        self.id = 0
        self.manager: Optional["ResourceManager"] = None

    @abc.abstractmethod
    def load(self, path: str, manager: "ResourceManager") -> bool:
        """Load the resource from a path; return True on success."""

    def is_cloneable(self) -> bool:
        """Return True if cached loads should hand out clones."""
        return False

    def clone(self) -> "Resource":
        """Return a shallow copy of the resource."""
        return copy.copy(self)


class ResourceManager:
    """Loads resources and keeps the cached ones alive until unloaded."""

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: Dict[str, Resource] = {}
        self._clones: List[Resource] = []
        self._next_id = 0

    def _assign_id(self, resource: Resource) -> None:
        resource.id = self._next_id
        self._next_id = (self._next_id + 1) % _ID_LIMIT

    def load(
        self,
        resource_type: Type[T],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> T:
        """Load a resource, or return the cached one (or a clone of it)."""
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, resource_type):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, "
                    f"not a {resource_type.__name__}"
                )
            if cached.is_cloneable():
                clone = cached.clone()
                self._assign_id(clone)
                self._clones.append(clone)
                return clone  # type: ignore[return-value]
            return cached

        resource = resource_type()
        resource.manager = self
        full_path = self.content_path + path if append_content_path else path

        if not resource.load(full_path, self):
            raise ValueError(f"could not load resource {full_path!r}")

        if cache:
            self._resources[path] = resource
        self._assign_id(resource)
        return resource

    def unload_all(self) -> None:
        """Forget every cached resource and every clone handed out."""
        self._resources.clear()
        self._clones.clear()