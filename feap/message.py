"""Buffered messages for pull-based event handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, TypeVar

from feap.entity import Entity

M = TypeVar("M")


@dataclass(frozen=True)
class MessageId(Generic[M]):
    """Identifies a message of a particular type by a running number."""

    id: int
    message_type: type

    def __str__(self) -> str:
        return f"message<{self.message_type.__name__}>#{self.id}"

    __repr__ = __str__


@dataclass
class MessageInstance(Generic[M]):
    """A message together with its id."""

    message_id: MessageId[M]
    message: M


@dataclass
class MessageSequence(Generic[M]):
    """A run of messages and the message count at which it began."""

    messages: list[MessageInstance[M]] = field(default_factory=list)
    start_message_count: int = 0

    def __len__(self) -> int:
        return len(self.messages)


@dataclass
class Messages(Generic[M]):
    """The messages that occurred within the last two updates.

    ``messages_a`` holds the oldest still active messages and ``messages_b``
    the newer ones.
    """

    messages_a: MessageSequence[M] = field(default_factory=MessageSequence)
    messages_b: MessageSequence[M] = field(default_factory=MessageSequence)
    message_count: int = 0

    def __len__(self) -> int:
        return len(self.messages_a) + len(self.messages_b)

    def __iter__(self) -> Iterator[Any]:
        for sequence in (self.messages_a, self.messages_b):
            for instance in sequence.messages:
                yield instance.message


@dataclass(frozen=True)
class RemovedComponentEntity:
    """An entity whose component was removed."""

    entity: Entity