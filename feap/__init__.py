"""Entity-component-system building blocks: interning, ticks, entities, components, messages and errors."""

__version__ = "0.1.0"

__all__ = [
    "change_detection",
    "component",
    "entity",
    "errors",
    "hashing",
    "intern",
    "message",
    "tick",
]