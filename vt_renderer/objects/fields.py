"""Input and output field objects.

Output strings display either their own literal ``value`` or, when
``variable_reference`` is set, the value of a linked string variable. The text
style comes from a mandatory font attributes object.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from vt_renderer.objects.base import MacroRef, VTObject, check_range
from vt_renderer.types import (
    NULL_OBJECT_ID,
    HorizontalJustification,
    ObjectID,
    ObjectType,
    VerticalJustification,
)


@dataclass(frozen=True)
class Alignment:
    horizontal: HorizontalJustification = HorizontalJustification.LEFT
    vertical: VerticalJustification = VerticalJustification.TOP


@dataclass(frozen=True)
class StringOptions:
    transparent: bool = False
    auto_wrap: bool = False
    wrap_on_hyphen: bool = False


@dataclass(frozen=True)
class NumberOptions:
    transparent: bool = False
    display_leading_zeros: bool = False
    display_zero_as_blank: bool = False
    truncate: bool = False


@dataclass(frozen=True)
class OutputString(VTObject):
    """Text field.

    Attributes:
        width: Width of the field in pixels.
        height: Height of the field in pixels.
        background_colour: Palette index used when not transparent.
        font_attributes: Mandatory reference to a ``FontAttributes`` object.
        options: Transparency and wrapping flags.
        variable_reference: Optional ``StringVariable`` holding the text.
        justification: Horizontal and vertical text alignment.
        value: Literal text, used when no variable is linked.
        macro_refs: Event bindings.
    """

    object_type = ObjectType.OUTPUT_STRING

    width: int = 0
    height: int = 0
    background_colour: int = 0
    font_attributes: ObjectID = NULL_OBJECT_ID
    options: StringOptions = StringOptions()
    variable_reference: Optional[ObjectID] = None
    justification: Alignment = Alignment()
    value: str = ""
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("width", self.width, 0, 0xFFFF)
        check_range("height", self.height, 0, 0xFFFF)


@dataclass(frozen=True)
class OutputNumber(VTObject):
    object_type = ObjectType.OUTPUT_NUMBER

    width: int = 0
    height: int = 0
    background_colour: int = 0
    font_attributes: ObjectID = NULL_OBJECT_ID
    options: NumberOptions = NumberOptions()
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    offset: int = 0
    scale: float = 1.0
    number_of_decimals: int = 0
    exponential_format: bool = False
    justification: Alignment = Alignment()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class OutputList(VTObject):
    object_type = ObjectType.OUTPUT_LIST

    width: int = 0
    height: int = 0
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    list_items: Tuple[Optional[ObjectID], ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class InputBoolean(VTObject):
    object_type = ObjectType.INPUT_BOOLEAN

    background_colour: int = 0
    width: int = 0
    foreground_colour: Optional[ObjectID] = None
    variable_reference: Optional[ObjectID] = None
    value: bool = False
    enabled: bool = True
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class InputString(VTObject):
    object_type = ObjectType.INPUT_STRING

    width: int = 0
    height: int = 0
    background_colour: int = 0
    font_attributes: ObjectID = NULL_OBJECT_ID
    input_attributes: Optional[ObjectID] = None
    options: StringOptions = StringOptions()
    variable_reference: Optional[ObjectID] = None
    justification: Alignment = Alignment()
    value: str = ""
    enabled: bool = True
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class InputNumber(VTObject):
    object_type = ObjectType.INPUT_NUMBER

    width: int = 0
    height: int = 0
    background_colour: int = 0
    font_attributes: ObjectID = NULL_OBJECT_ID
    options: NumberOptions = NumberOptions()
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    min_value: int = 0
    max_value: int = 0
    offset: int = 0
    scale: float = 1.0
    number_of_decimals: int = 0
    exponential_format: bool = False
    justification: Alignment = Alignment()
    enabled: bool = True
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class InputList(VTObject):
    object_type = ObjectType.INPUT_LIST

    width: int = 0
    height: int = 0
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    enabled: bool = True
    list_items: Tuple[Optional[ObjectID], ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()
