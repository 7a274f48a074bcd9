"""Shared building blocks for pool objects.

Every object kind is a frozen dataclass deriving from :class:`VTObject`. The
kind of an instance is carried by the class-level ``object_type`` tag, which
the renderer and the reference resolver dispatch on.

References between objects are plain :data:`~vt_renderer.types.ObjectID`
values. Optional references use ``None`` for "unset"; they are looked up in
the pool when needed and may dangle.
"""

from dataclasses import dataclass
from typing import ClassVar

from vt_renderer.types import NULL_OBJECT_ID, ObjectID, ObjectType


def check_range(name: str, value: int, low: int, high: int) -> None:
    """Raise ``ValueError`` unless ``low <= value <= high``."""
    if not low <= value <= high:
        raise ValueError(f"{name} must be within [{low}, {high}], got {value}")


@dataclass(frozen=True)
class Point:
    """Signed pixel offset.

    Attributes:
        x: Horizontal offset, growing to the right.
        y: Vertical offset, growing downwards.
    """

    x: int = 0
    y: int = 0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class ObjectRef:
    """Edge of the scene graph: a child id placed at an offset in its parent."""

    id: ObjectID
    offset: Point = Point()


@dataclass(frozen=True)
class MacroRef:
    """Binding of a macro object to an event."""

    event_id: int
    macro_id: int

    def __post_init__(self) -> None:
        check_range("event_id", self.event_id, 0, 0xFF)
        check_range("macro_id", self.macro_id, 0, 0xFF)


@dataclass(frozen=True)
class VTObject:
    """Base class of all pool objects.

    Attributes:
        id: Identifier of the object, unique within its pool.
    """

    object_type: ClassVar[ObjectType]

    id: ObjectID

    def __post_init__(self) -> None:
        check_range("id", self.id, 0, NULL_OBJECT_ID - 1)
