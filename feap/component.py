"""Component and resource metadata and their registration."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional


class StorageType(Enum):
    """The storage used for a specific component type."""

    TABLE = "Table"
    """Fast, cache-friendly iteration; slower addition and removal."""
    SPARSE_SET = "SparseSet"
    """Fast addition and removal; slower iteration."""


class CloneBehaviorKind(Enum):
    """How a component is handled when its entity is cloned or moved."""

    DEFAULT = auto()
    IGNORE = auto()
    CUSTOM = auto()


ComponentCloneFn = Callable[[Any, Any], None]
"""Function that clones a component: called with the source and a context."""


@dataclass(frozen=True)
class ComponentCloneBehavior:
    """The clone behavior to use when cloning or moving a component."""

    kind: CloneBehaviorKind = CloneBehaviorKind.DEFAULT
    clone_fn: Optional[ComponentCloneFn] = None

    def __post_init__(self) -> None:
        if self.kind is CloneBehaviorKind.CUSTOM and self.clone_fn is None:
            raise ValueError("a custom clone behavior needs a clone function")
        if self.kind is not CloneBehaviorKind.CUSTOM and self.clone_fn is not None:
            raise ValueError("only a custom clone behavior takes a clone function")


@dataclass(frozen=True, order=True)
class ComponentId:
    """Uniquely identifies a component or resource type within a world."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"component id {self.index} is negative")


def _type_name(value_type: type) -> str:
    return f"{value_type.__module__}.{value_type.__qualname__}"


@dataclass(frozen=True)
class ComponentDescriptor:
    """Describes a component or resource, which need not correspond to a type."""

    name: str
    storage_type: StorageType = StorageType.TABLE
    is_send_and_sync: bool = True
    type_id: Optional[type] = None
    mutable: bool = True
    clone_behavior: ComponentCloneBehavior = field(default_factory=ComponentCloneBehavior)

    @staticmethod
    def new_resource(resource_type: type) -> ComponentDescriptor:
        """Describe a resource type; resources are always stored in tables."""
        return ComponentDescriptor(
            name=_type_name(resource_type),
            storage_type=StorageType.TABLE,
            is_send_and_sync=True,
            type_id=resource_type,
            mutable=True,
            clone_behavior=ComponentCloneBehavior(),
        )


@dataclass(frozen=True)
class ComponentInfo:
    """Metadata for a registered component or resource."""

    id: ComponentId
    descriptor: ComponentDescriptor

    def name(self) -> str:
        """Return the name of the component."""
        return self.descriptor.name

    @property
    def storage_type(self) -> StorageType:
        return self.descriptor.storage_type

    @property
    def is_send_and_sync(self) -> bool:
        return self.descriptor.is_send_and_sync


@dataclass
class _QueuedRegistration:
    id: ComponentId
    descriptor: ComponentDescriptor


class Components:
    """Stores the metadata of every component and resource in a world."""

    def __init__(self) -> None:
        self._infos: list[Optional[ComponentInfo]] = []
        self._resource_indices: dict[type, ComponentId] = {}
        self._queued_resources: dict[type, _QueuedRegistration] = {}
        self._queue_lock = threading.Lock()

    def _register_inner(self, component_id: ComponentId, descriptor: ComponentDescriptor) -> None:
        missing = component_id.index + 1 - len(self._infos)
        if missing > 0:
            self._infos.extend([None] * missing)
        if self._infos[component_id.index] is not None:
            raise ValueError(f"{component_id} is already registered")
        self._infos[component_id.index] = ComponentInfo(component_id, descriptor)

    def _register_resource_unchecked(
        self,
        resource_type: type,
        component_id: ComponentId,
        descriptor: ComponentDescriptor,
    ) -> None:
        if resource_type in self._resource_indices:
            raise ValueError(f"resource {_type_name(resource_type)} is already registered")
        self._register_inner(component_id, descriptor)
        self._resource_indices[resource_type] = component_id

    def _queue_resource(
        self,
        resource_type: type,
        component_id: ComponentId,
        descriptor: Optional[ComponentDescriptor] = None,
    ) -> None:
        if descriptor is None:
            descriptor = ComponentDescriptor.new_resource(resource_type)
        with self._queue_lock:
            self._queued_resources.setdefault(
                resource_type, _QueuedRegistration(component_id, descriptor)
            )

    def _take_queued_resource(self, resource_type: type) -> Optional[_QueuedRegistration]:
        with self._queue_lock:
            return self._queued_resources.pop(resource_type, None)

    def _take_all_queued(self) -> list[tuple[type, _QueuedRegistration]]:
        with self._queue_lock:
            queued = list(self._queued_resources.items())
            self._queued_resources.clear()
        return queued

    def get_info(self, component_id: ComponentId) -> Optional[ComponentInfo]:
        """Return the metadata for ``component_id`` if it is registered."""
        if component_id.index >= len(self._infos):
            return None
        return self._infos[component_id.index]

    def get_valid_resource_id(self, resource_type: type) -> Optional[ComponentId]:
        """Return the id of a registered resource type, or ``None``."""
        return self._resource_indices.get(resource_type)

    def num_queued(self) -> int:
        """Return how many registrations are waiting to be applied."""
        with self._queue_lock:
            return len(self._queued_resources)

    def any_queued(self) -> bool:
        """Return whether any registration is waiting to be applied."""
        return self.num_queued() > 0

    def __len__(self) -> int:
        return sum(info is not None for info in self._infos)


class ComponentIds:
    """Hands out consecutive :class:`ComponentId` values."""

    def __init__(self) -> None:
        self._next = 0
        self._lock = threading.Lock()

    def next(self) -> ComponentId:
        """Return the next unused id."""
        with self._lock:
            result = ComponentId(self._next)
            self._next += 1
        return result


class ComponentsRegistrator:
    """Registers components and resources into a :class:`Components` store."""

    def __init__(self, components: Components, ids: ComponentIds) -> None:
        self.components = components
        self.ids = ids

    def register_resource(self, resource_type: type) -> ComponentId:
        """Register ``resource_type``, returning the existing id if already known."""
        existing = self.components.get_valid_resource_id(resource_type)
        if existing is not None:
            return existing

        queued = self.components._take_queued_resource(resource_type)
        if queued is not None:
            self.components._register_resource_unchecked(
                resource_type, queued.id, queued.descriptor
            )
            return queued.id

        component_id = self.ids.next()
        self.components._register_resource_unchecked(
            resource_type, component_id, ComponentDescriptor.new_resource(resource_type)
        )
        return component_id

    def apply_queued_registrations(self) -> None:
        """Register everything that was queued."""
        if not self.components.any_queued():
            return
        for resource_type, queued in self.components._take_all_queued():
            if self.components.get_valid_resource_id(resource_type) is None:
                self.components._register_resource_unchecked(
                    resource_type, queued.id, queued.descriptor
                )

    def any_queued(self) -> bool:
        """Return whether the underlying store has queued registrations."""
        return self.components.any_queued()