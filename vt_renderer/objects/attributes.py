"""Attribute objects.

Attribute objects are never drawn on their own; other objects reference them
to pick up colours, widths and styles.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from vt_renderer.objects.base import MacroRef, VTObject, check_range
from vt_renderer.types import RGB, FillType, ObjectID, ObjectType


@dataclass(frozen=True)
class FontAttributes(VTObject):
    object_type = ObjectType.FONT_ATTRIBUTES

    font_colour: int = 0
    font_size: int = 0
    font_type: int = 0
    font_style: int = 0
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("font_colour", self.font_colour, 0, 0xFF)


@dataclass(frozen=True)
class LineAttributes(VTObject):
    """Stroke style.

    Attributes:
        line_colour: Palette index of the stroke.
        line_width: Stroke width in pixels.
        line_art: 16-bit on/off pattern of the stroke.
        macro_refs: Event bindings.
    """

    object_type = ObjectType.LINE_ATTRIBUTES

    line_colour: int = 0
    line_width: int = 1
    line_art: int = 0xFFFF
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("line_colour", self.line_colour, 0, 0xFF)
        check_range("line_width", self.line_width, 0, 0xFF)


@dataclass(frozen=True)
class FillAttributes(VTObject):
    object_type = ObjectType.FILL_ATTRIBUTES

    fill_type: FillType = FillType.FILL_COLOUR
    fill_colour: int = 0
    fill_pattern: Optional[ObjectID] = None
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("fill_colour", self.fill_colour, 0, 0xFF)


@dataclass(frozen=True)
class InputAttributes(VTObject):
    object_type = ObjectType.INPUT_ATTRIBUTES

    validation_type: int = 0
    validation_string: str = ""
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class ExtendedInputAttributes(VTObject):
    object_type = ObjectType.EXTENDED_INPUT_ATTRIBUTES

    validation_type: int = 0
    code_planes: Tuple[bytes, ...] = ()


@dataclass(frozen=True)
class ColourMap(VTObject):
    object_type = ObjectType.COLOUR_MAP

    colour_map: Tuple[int, ...] = ()


@dataclass(frozen=True)
class ColourPalette(VTObject):
    object_type = ObjectType.COLOUR_PALETTE

    options: int = 0
    colours: Tuple[RGB, ...] = ()
