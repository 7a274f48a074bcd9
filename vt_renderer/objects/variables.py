"""Variables, pointers and macros."""

from dataclasses import dataclass
from typing import Optional

from vt_renderer.objects.base import VTObject
from vt_renderer.types import ObjectID, ObjectType


@dataclass(frozen=True)
class NumberVariable(VTObject):
    object_type = ObjectType.NUMBER_VARIABLE

    value: int = 0


@dataclass(frozen=True)
class StringVariable(VTObject):
    object_type = ObjectType.STRING_VARIABLE

    value: str = ""


@dataclass(frozen=True)
class ObjectPointer(VTObject):
    """Indirection to another object; ``value`` of ``None`` points nowhere."""

    object_type = ObjectType.OBJECT_POINTER

    value: Optional[ObjectID] = None


@dataclass(frozen=True)
class Macro(VTObject):
    object_type = ObjectType.MACRO

    commands: bytes = b""
