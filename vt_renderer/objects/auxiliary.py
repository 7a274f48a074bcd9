"""Auxiliary control, labelling and external reference objects.

None of these have a visual representation on a data mask.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from vt_renderer.objects.base import ObjectRef, VTObject
from vt_renderer.types import ObjectID, ObjectType


@dataclass(frozen=True)
class AuxiliaryFunctionType1(VTObject):
    object_type = ObjectType.AUXILIARY_FUNCTION_TYPE1

    background_colour: int = 0
    function_type: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()


@dataclass(frozen=True)
class AuxiliaryInputType1(VTObject):
    object_type = ObjectType.AUXILIARY_INPUT_TYPE1

    background_colour: int = 0
    function_type: int = 0
    input_id: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()


@dataclass(frozen=True)
class AuxiliaryFunctionType2(VTObject):
    object_type = ObjectType.AUXILIARY_FUNCTION_TYPE2

    background_colour: int = 0
    function_attributes: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()


@dataclass(frozen=True)
class AuxiliaryInputType2(VTObject):
    object_type = ObjectType.AUXILIARY_INPUT_TYPE2

    background_colour: int = 0
    function_attributes: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()


@dataclass(frozen=True)
class AuxiliaryControlDesignatorType2(VTObject):
    object_type = ObjectType.AUXILIARY_CONTROL_DESIGNATOR_TYPE2

    pointer_type: int = 0
    auxiliary_object_id: Optional[ObjectID] = None


@dataclass(frozen=True)
class ObjectLabel:
    id: ObjectID
    string_variable_reference: Optional[ObjectID] = None
    font_type: int = 0
    graphic_representation: Optional[ObjectID] = None


@dataclass(frozen=True)
class ObjectLabelReferenceList(VTObject):
    object_type = ObjectType.OBJECT_LABEL_REFERENCE_LIST

    object_labels: Tuple[ObjectLabel, ...] = ()


@dataclass(frozen=True)
class ExternalObjectDefinition(VTObject):
    object_type = ObjectType.EXTERNAL_OBJECT_DEFINITION

    options: int = 0
    name: bytes = b""
    objects: Tuple[ObjectID, ...] = ()


@dataclass(frozen=True)
class ExternalReferenceName(VTObject):
    object_type = ObjectType.EXTERNAL_REFERENCE_NAME

    options: int = 0
    name: bytes = b""


@dataclass(frozen=True)
class ExternalObjectPointer(VTObject):
    object_type = ObjectType.EXTERNAL_OBJECT_POINTER

    default_object_id: Optional[ObjectID] = None
    external_reference_name_id: Optional[ObjectID] = None
    external_object_id: Optional[ObjectID] = None


@dataclass(frozen=True)
class WorkingSetSpecialControls(VTObject):
    object_type = ObjectType.WORKING_SET_SPECIAL_CONTROLS

    id_of_colour_map: Optional[ObjectID] = None
    id_of_colour_palette: Optional[ObjectID] = None
    language_pairs: Tuple[Tuple[str, str], ...] = ()
