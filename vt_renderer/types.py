"""Common type aliases and enumerations.

``ObjectID`` is the integer key every object in a pool is addressed by; all
references between objects are plain ``ObjectID`` values resolved through the
pool at render time.
"""

from enum import IntEnum, StrEnum, auto
from typing import Tuple


ObjectID = int

# Wire value of an unset reference. In memory an unset reference is ``None``.
NULL_OBJECT_ID: ObjectID = 0xFFFF

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)


class ObjectType(IntEnum):
    """Object type codes as assigned by ISO 11783-6."""

    WORKING_SET = 0
    DATA_MASK = 1
    ALARM_MASK = 2
    CONTAINER = 3
    SOFT_KEY_MASK = 4
    KEY = 5
    BUTTON = 6
    INPUT_BOOLEAN = 7
    INPUT_STRING = 8
    INPUT_NUMBER = 9
    INPUT_LIST = 10
    OUTPUT_STRING = 11
    OUTPUT_NUMBER = 12
    OUTPUT_LINE = 13
    OUTPUT_RECTANGLE = 14
    OUTPUT_ELLIPSE = 15
    OUTPUT_POLYGON = 16
    OUTPUT_METER = 17
    OUTPUT_LINEAR_BAR_GRAPH = 18
    OUTPUT_ARCHED_BAR_GRAPH = 19
    PICTURE_GRAPHIC = 20
    NUMBER_VARIABLE = 21
    STRING_VARIABLE = 22
    FONT_ATTRIBUTES = 23
    LINE_ATTRIBUTES = 24
    FILL_ATTRIBUTES = 25
    INPUT_ATTRIBUTES = 26
    OBJECT_POINTER = 27
    MACRO = 28
    AUXILIARY_FUNCTION_TYPE1 = 29
    AUXILIARY_INPUT_TYPE1 = 30
    AUXILIARY_FUNCTION_TYPE2 = 31
    AUXILIARY_INPUT_TYPE2 = 32
    AUXILIARY_CONTROL_DESIGNATOR_TYPE2 = 33
    WINDOW_MASK = 34
    KEY_GROUP = 35
    GRAPHICS_CONTEXT = 36
    OUTPUT_LIST = 37
    EXTENDED_INPUT_ATTRIBUTES = 38
    COLOUR_MAP = 39
    OBJECT_LABEL_REFERENCE_LIST = 40
    EXTERNAL_OBJECT_DEFINITION = 41
    EXTERNAL_REFERENCE_NAME = 42
    EXTERNAL_OBJECT_POINTER = 43
    ANIMATION = 44
    COLOUR_PALETTE = 45
    GRAPHIC_DATA = 46
    WORKING_SET_SPECIAL_CONTROLS = 47
    SCALED_GRAPHIC = 48


class PictureGraphicFormat(IntEnum):
    """Pixel packing of picture graphic raw data."""

    MONOCHROME = 0
    FOUR_BIT = 1
    EIGHT_BIT = 2


class FillType(IntEnum):
    NO_FILL = 0
    LINE_COLOUR = 1
    FILL_COLOUR = 2
    PATTERN = 3


class HorizontalJustification(StrEnum):
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


class VerticalJustification(StrEnum):
    TOP = auto()
    MIDDLE = auto()
    BOTTOM = auto()
