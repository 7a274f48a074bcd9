"""Top level and container objects.

Masks fill their area with a background colour and host child objects through
``object_refs``. A :class:`WorkingSet` whose ``selectable`` flag is ``False``
is not shown at all, which hides the whole screen below it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from vt_renderer.objects.base import MacroRef, ObjectRef, VTObject, check_range
from vt_renderer.types import ObjectID, ObjectType


@dataclass(frozen=True)
class WorkingSet(VTObject):
    object_type = ObjectType.WORKING_SET

    background_colour: int = 0
    selectable: bool = True
    active_mask: Optional[ObjectID] = None
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()
    language_codes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DataMask(VTObject):
    object_type = ObjectType.DATA_MASK

    background_colour: int = 0
    soft_key_mask: Optional[ObjectID] = None
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class AlarmMask(VTObject):
    object_type = ObjectType.ALARM_MASK

    background_colour: int = 0
    soft_key_mask: Optional[ObjectID] = None
    priority: int = 0
    acoustic_signal: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class SoftKeyMask(VTObject):
    object_type = ObjectType.SOFT_KEY_MASK

    background_colour: int = 0
    objects: Tuple[ObjectID, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class WindowMask(VTObject):
    object_type = ObjectType.WINDOW_MASK

    width: int = 1
    height: int = 1
    window_type: int = 0
    background_colour: int = 0
    options: int = 0
    name: Optional[ObjectID] = None
    window_title: Optional[ObjectID] = None
    window_icon: Optional[ObjectID] = None
    objects: Tuple[Optional[ObjectID], ...] = ()
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class KeyGroup(VTObject):
    object_type = ObjectType.KEY_GROUP

    options: int = 0
    name: Optional[ObjectID] = None
    key_group_icon: Optional[ObjectID] = None
    objects: Tuple[ObjectID, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class Key(VTObject):
    """Soft key. Its on-screen size is decided by the terminal, not the pool."""

    object_type = ObjectType.KEY

    background_colour: int = 0
    key_code: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class Container(VTObject):
    """Groups children into a ``width`` x ``height`` region.

    Attributes:
        width: Width of the region in pixels.
        height: Height of the region in pixels.
        hidden: If True neither the container nor its children are drawn.
        object_refs: Children with offsets relative to the container origin.
        macro_refs: Event bindings.
    """

    object_type = ObjectType.CONTAINER

    width: int = 0
    height: int = 0
    hidden: bool = False
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("width", self.width, 0, 0xFFFF)
        check_range("height", self.height, 0, 0xFFFF)


@dataclass(frozen=True)
class ButtonOptions:
    latchable: bool = False
    state: bool = False
    suppress_border: bool = False
    transparent_background: bool = False
    disabled: bool = False
    no_border: bool = False


@dataclass(frozen=True)
class Button(VTObject):
    """Selectable button with a border around its face."""

    object_type = ObjectType.BUTTON

    width: int = 0
    height: int = 0
    background_colour: int = 0
    border_colour: int = 0
    key_code: int = 0
    options: ButtonOptions = ButtonOptions()
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("width", self.width, 0, 0xFFFF)
        check_range("height", self.height, 0, 0xFFFF)
