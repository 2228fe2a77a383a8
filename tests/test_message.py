from feap.entity import Entity, EntityRow
from feap.message import (
    MessageId,
    MessageInstance,
    MessageSequence,
    Messages,
    RemovedComponentEntity,
)


class Ping:
    pass


def test_message_id_display():
    assert str(MessageId(3, Ping)) == "message<Ping>#3"
    assert repr(MessageId(7, Ping)) == "message<Ping>#7"


def test_message_id_equality():
    assert MessageId(1, Ping) == MessageId(1, Ping)
    assert MessageId(1, Ping) != MessageId(2, Ping)


def test_empty_messages():
    messages = Messages()
    assert len(messages) == 0
    assert list(messages) == []
    assert messages.message_count == 0


def test_messages_iterate_oldest_first():
    old = MessageInstance(MessageId(0, str), "old")
    new = MessageInstance(MessageId(1, str), "new")
    messages = Messages(
        messages_a=MessageSequence([old], 0),
        messages_b=MessageSequence([new], 1),
        message_count=2,
    )
    assert list(messages) == ["old", "new"]
    assert len(messages) == 2


def test_sequences_are_independent():
    first = Messages()
    second = Messages()
    first.messages_a.messages.append(MessageInstance(MessageId(0, str), "x"))
    assert len(second) == 0
    assert len(first) == 1


def test_removed_component_entity_wraps_entity():
    entity = Entity.from_row(EntityRow(4))
    removed = RemovedComponentEntity(entity)
    assert removed.entity == entity
    assert removed == RemovedComponentEntity(Entity.from_row(EntityRow(4)))