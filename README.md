# feap

feap holds the core building blocks of an entity-component-system: value
interning, wrapping change ticks, generational entity identifiers,
component and resource metadata, message containers and error handling.
It has no dependencies outside the standard library.

## Modules

- `feap.hashing`: `NoOpHasher`, a hasher for values that already carry a
  64-bit hash. `write_u64()` stores the hash unchanged, `write()` mixes in
  bytes, `finish()` returns the state.
- `feap.intern`: `Interner` and `Interned`. `Interner.intern(value)` stores
  a value the first time it is seen and returns an `Interned` handle; two
  handles are equal only when they refer to the same stored object.
  `len(interner)` counts the stored values.
- `feap.tick`: `Tick`, a wrapping 32-bit counter with `relative_to()` and
  `check_tick()`; `Tick.MAX`, `CHECK_TICK_THRESHOLD` and `MAX_CHANGE_AGE`;
  `CheckChangeTicks` with `present_tick()`; and `ComponentTicks`.
- `feap.entity`: `EntityRow`, `EntityGeneration` and `Entity`. Entities
  are built with `Entity.from_row()` or `Entity.from_row_and_generation()`,
  pack into 64 bits with `to_bits()`, and compare, order and hash by that
  value. `Entity.PLACEHOLDER` prints as `PLACEHOLDER`; others print as
  `<index>v<generation>`.
- `feap.change_detection`: `TicksMut`, `Res`, `Mut` and `ResMut`. Reading
  `Mut.value` leaves the ticks alone; assigning to it, calling `as_mut()`
  or `set_changed()` stamps the changed tick with the running system's
  tick. `is_changed()` reports a change since the system last ran.
- `feap.component`: `StorageType`, `CloneBehaviorKind`,
  `ComponentCloneBehavior`, `ComponentId`, `ComponentDescriptor`,
  `ComponentInfo`, `Components`, `ComponentIds` and
  `ComponentsRegistrator`, which registers resource types and hands out
  consecutive ids.
- `feap.message`: `MessageId`, `MessageInstance`, `MessageSequence`,
  `Messages` and `RemovedComponentEntity`. `Messages` holds two sequences,
  the older `messages_a` and the newer `messages_b`; `len()` counts both
  and iterating yields the messages, oldest first.
- `feap.errors`: `FeapError` wraps any exception or message;
  `ErrorContext` names the failing system; `panic()` raises a
  `RuntimeError` describing the error; `DefaultErrorHandler` calls
  `panic()` unless given another handler.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

Interning:

```python
from feap.intern import Interner

interner = Interner()
first = interner.intern("update")
second = interner.intern("upd" + "ate")
assert first == second
assert len(interner) == 1
```

Entities:

```python
from feap.entity import Entity, EntityRow

entity = Entity.from_row(EntityRow(3))
assert str(entity) == "3v0"
assert entity.index() == 3
```

Change detection:

```python
from feap.change_detection import Mut, TicksMut
from feap.tick import Tick

ticks = TicksMut(added=Tick(0), changed=Tick(0), last_run=Tick(1), this_run=Tick(2))
items = Mut([1], ticks)
assert not items.is_changed()
items.as_mut().append(2)
assert items.is_changed()
assert ticks.changed == Tick(2)
```

Registering resources:

```python
from feap.component import ComponentIds, Components, ComponentsRegistrator


class Score:
    pass


components = Components()
registrator = ComponentsRegistrator(components, ComponentIds())
score_id = registrator.register_resource(Score)
assert registrator.register_resource(Score) == score_id
assert components.get_info(score_id).name().endswith("Score")
```

## What this package does not do

feap provides data types and bookkeeping only. It has no application
object, no plugin system, no schedules or labels, no world that stores
entities or resource values, and no systems to run. `Messages` is a
container: it has no methods to send messages or to swap its buffers.

## Running the tests

```
pytest
```