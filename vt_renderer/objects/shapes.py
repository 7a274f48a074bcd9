"""Output shape and graph objects.

Shapes take their stroke from a mandatory line attributes object and, where
supported, their interior from an optional fill attributes object.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from vt_renderer.objects.base import MacroRef, Point, VTObject, check_range
from vt_renderer.types import NULL_OBJECT_ID, ObjectID, ObjectType


@dataclass(frozen=True)
class OutputLine(VTObject):
    object_type = ObjectType.OUTPUT_LINE

    line_attributes: ObjectID = NULL_OBJECT_ID
    width: int = 0
    height: int = 0
    line_direction: int = 0
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class OutputRectangle(VTObject):
    """Rectangle stroked with ``line_attributes`` and optionally filled.

    Attributes:
        line_attributes: Mandatory reference to a ``LineAttributes`` object.
        width: Outer width in pixels.
        height: Outer height in pixels.
        line_suppression: Bit mask of suppressed edges (top, right, bottom, left).
        fill_attributes: Optional reference to a ``FillAttributes`` object.
        macro_refs: Event bindings.
    """

    object_type = ObjectType.OUTPUT_RECTANGLE

    line_attributes: ObjectID = NULL_OBJECT_ID
    width: int = 0
    height: int = 0
    line_suppression: int = 0
    fill_attributes: Optional[ObjectID] = None
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("width", self.width, 0, 0xFFFF)
        check_range("height", self.height, 0, 0xFFFF)


@dataclass(frozen=True)
class OutputEllipse(VTObject):
    object_type = ObjectType.OUTPUT_ELLIPSE

    line_attributes: ObjectID = NULL_OBJECT_ID
    width: int = 0
    height: int = 0
    ellipse_type: int = 0
    start_angle: int = 0
    end_angle: int = 0
    fill_attributes: Optional[ObjectID] = None
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class OutputPolygon(VTObject):
    object_type = ObjectType.OUTPUT_POLYGON

    width: int = 0
    height: int = 0
    line_attributes: ObjectID = NULL_OBJECT_ID
    fill_attributes: Optional[ObjectID] = None
    polygon_type: int = 0
    points: Tuple[Point, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class OutputMeter(VTObject):
    object_type = ObjectType.OUTPUT_METER

    width: int = 0
    needle_colour: int = 0
    border_colour: int = 0
    arc_and_tick_colour: int = 0
    options: int = 0
    nr_of_ticks: int = 0
    start_angle: int = 0
    end_angle: int = 0
    min_value: int = 0
    max_value: int = 0
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class OutputLinearBarGraph(VTObject):
    object_type = ObjectType.OUTPUT_LINEAR_BAR_GRAPH

    width: int = 0
    height: int = 0
    colour: int = 0
    target_line_colour: int = 0
    options: int = 0
    nr_of_ticks: int = 0
    min_value: int = 0
    max_value: int = 0
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    target_value_variable_reference: Optional[ObjectID] = None
    target_value: int = 0
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class OutputArchedBarGraph(VTObject):
    object_type = ObjectType.OUTPUT_ARCHED_BAR_GRAPH

    width: int = 0
    height: int = 0
    colour: int = 0
    target_line_colour: int = 0
    options: int = 0
    start_angle: int = 0
    end_angle: int = 0
    bar_graph_width: int = 0
    min_value: int = 0
    max_value: int = 0
    variable_reference: Optional[ObjectID] = None
    value: int = 0
    target_value_variable_reference: Optional[ObjectID] = None
    target_value: int = 0
    macro_refs: Tuple[MacroRef, ...] = ()
