"""vt_renderer.objects
=================================

Aggregate import surface for all pool object dataclasses.

Objects are grouped the way ISO 11783-6 groups them: masks and containers,
input/output fields, shapes, graphics, attributes, variables and auxiliary /
external reference objects. Every class derives from :class:`VTObject` and
declares its kind in the class-level ``object_type`` tag, so downstream code
can import everything from one place::

    from vt_renderer.objects import Container, ObjectRef, Point

All object classes are frozen ``@dataclass`` value objects; they carry no
rendering behavior. See :mod:`vt_renderer.renderer` for how they are drawn.
"""

from typing import Union

# Base
from .base import MacroRef, ObjectRef, Point, VTObject

# Masks and containers
from .masks import AlarmMask
from .masks import Button, ButtonOptions
from .masks import Container
from .masks import DataMask
from .masks import Key
from .masks import KeyGroup
from .masks import SoftKeyMask
from .masks import WindowMask
from .masks import WorkingSet

# Fields
from .fields import Alignment, NumberOptions, StringOptions
from .fields import InputBoolean
from .fields import InputList
from .fields import InputNumber
from .fields import InputString
from .fields import OutputList
from .fields import OutputNumber
from .fields import OutputString

# Shapes
from .shapes import OutputArchedBarGraph
from .shapes import OutputEllipse
from .shapes import OutputLine
from .shapes import OutputLinearBarGraph
from .shapes import OutputMeter
from .shapes import OutputPolygon
from .shapes import OutputRectangle

# Graphics
from .graphics import Animation
from .graphics import GraphicData
from .graphics import GraphicsContext
from .graphics import PictureGraphic, PictureGraphicOptions
from .graphics import ScaledGraphic

# Attributes
from .attributes import ColourMap
from .attributes import ColourPalette
from .attributes import ExtendedInputAttributes
from .attributes import FillAttributes
from .attributes import FontAttributes
from .attributes import InputAttributes
from .attributes import LineAttributes

# Variables
from .variables import Macro
from .variables import NumberVariable
from .variables import ObjectPointer
from .variables import StringVariable

# Auxiliary and external
from .auxiliary import AuxiliaryControlDesignatorType2
from .auxiliary import AuxiliaryFunctionType1
from .auxiliary import AuxiliaryFunctionType2
from .auxiliary import AuxiliaryInputType1
from .auxiliary import AuxiliaryInputType2
from .auxiliary import ExternalObjectDefinition
from .auxiliary import ExternalObjectPointer
from .auxiliary import ExternalReferenceName
from .auxiliary import ObjectLabel, ObjectLabelReferenceList
from .auxiliary import WorkingSetSpecialControls

Object = Union[
    WorkingSet,
    DataMask,
    AlarmMask,
    Container,
    SoftKeyMask,
    Key,
    Button,
    InputBoolean,
    InputString,
    InputNumber,
    InputList,
    OutputString,
    OutputNumber,
    OutputLine,
    OutputRectangle,
    OutputEllipse,
    OutputPolygon,
    OutputMeter,
    OutputLinearBarGraph,
    OutputArchedBarGraph,
    PictureGraphic,
    NumberVariable,
    StringVariable,
    FontAttributes,
    LineAttributes,
    FillAttributes,
    InputAttributes,
    ObjectPointer,
    Macro,
    AuxiliaryFunctionType1,
    AuxiliaryInputType1,
    AuxiliaryFunctionType2,
    AuxiliaryInputType2,
    AuxiliaryControlDesignatorType2,
    WindowMask,
    KeyGroup,
    GraphicsContext,
    OutputList,
    ExtendedInputAttributes,
    ColourMap,
    ObjectLabelReferenceList,
    ExternalObjectDefinition,
    ExternalReferenceName,
    ExternalObjectPointer,
    Animation,
    ColourPalette,
    GraphicData,
    WorkingSetSpecialControls,
    ScaledGraphic,
]

__all__ = [
    # Base
    "MacroRef",
    "Object",
    "ObjectRef",
    "Point",
    "VTObject",
    # Masks and containers
    "AlarmMask",
    "Button",
    "ButtonOptions",
    "Container",
    "DataMask",
    "Key",
    "KeyGroup",
    "SoftKeyMask",
    "WindowMask",
    "WorkingSet",
    # Fields
    "Alignment",
    "InputBoolean",
    "InputList",
    "InputNumber",
    "InputString",
    "NumberOptions",
    "OutputList",
    "OutputNumber",
    "OutputString",
    "StringOptions",
    # Shapes
    "OutputArchedBarGraph",
    "OutputEllipse",
    "OutputLine",
    "OutputLinearBarGraph",
    "OutputMeter",
    "OutputPolygon",
    "OutputRectangle",
    # Graphics
    "Animation",
    "GraphicData",
    "GraphicsContext",
    "PictureGraphic",
    "PictureGraphicOptions",
    "ScaledGraphic",
    # Attributes
    "ColourMap",
    "ColourPalette",
    "ExtendedInputAttributes",
    "FillAttributes",
    "FontAttributes",
    "InputAttributes",
    "LineAttributes",
    # Variables
    "Macro",
    "NumberVariable",
    "ObjectPointer",
    "StringVariable",
    # Auxiliary and external
    "AuxiliaryControlDesignatorType2",
    "AuxiliaryFunctionType1",
    "AuxiliaryFunctionType2",
    "AuxiliaryInputType1",
    "AuxiliaryInputType2",
    "ExternalObjectDefinition",
    "ExternalObjectPointer",
    "ExternalReferenceName",
    "ObjectLabel",
    "ObjectLabelReferenceList",
    "WorkingSetSpecialControls",
]
