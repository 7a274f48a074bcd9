"""Picture and graphic objects.

:class:`PictureGraphic` carries a packed pixel stream. Depending on
``format`` every byte holds eight 1-bit, two 4-bit or one 8-bit palette index.
``actual_width`` x ``actual_height`` is the size of the stored bitmap, while
``width`` is the size it is displayed at; the displayed height keeps the
bitmap's aspect ratio.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from vt_renderer.encoding import expand_run_length
from vt_renderer.objects.base import MacroRef, ObjectRef, VTObject, check_range
from vt_renderer.types import ObjectID, ObjectType, PictureGraphicFormat


@dataclass(frozen=True)
class PictureGraphicOptions:
    """Picture graphic option bits.

    Attributes:
        transparent: Pixels matching the transparency colour are not drawn.
        flashing: The picture flashes (not rendered by this engine).
        run_length_encoded: ``data`` holds ``(count, value)`` pairs.
    """

    transparent: bool = False
    flashing: bool = False
    run_length_encoded: bool = False


@dataclass(frozen=True)
class PictureGraphic(VTObject):
    object_type = ObjectType.PICTURE_GRAPHIC

    width: int = 0
    actual_width: int = 0
    actual_height: int = 0
    format: PictureGraphicFormat = PictureGraphicFormat.EIGHT_BIT
    options: PictureGraphicOptions = PictureGraphicOptions()
    transparency_colour: int = 0
    data: bytes = b""
    macro_refs: Tuple[MacroRef, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_range("width", self.width, 0, 0xFFFF)
        check_range("actual_width", self.actual_width, 0, 0xFFFF)
        check_range("actual_height", self.actual_height, 0, 0xFFFF)
        check_range("transparency_colour", self.transparency_colour, 0, 0xFF)
        check_range("macro_refs count", len(self.macro_refs), 0, 0xFF)
        if not isinstance(self.format, PictureGraphicFormat):
            # Raises ValueError for unknown codes.
            object.__setattr__(self, "format", PictureGraphicFormat(self.format))

    @property
    def display_height(self) -> int:
        """Displayed height, scaled from the bitmap by ``width / actual_width``."""
        if self.actual_width == 0:
            return 0
        return self.actual_height * self.width // self.actual_width

    def data_as_raw_encoded(self) -> bytes:
        """Packed pixel bytes with run-length encoding removed."""
        if self.options.run_length_encoded:
            return expand_run_length(self.data)
        return self.data


@dataclass(frozen=True)
class GraphicData(VTObject):
    object_type = ObjectType.GRAPHIC_DATA

    format: int = 0
    data: bytes = b""


@dataclass(frozen=True)
class ScaledGraphic(VTObject):
    object_type = ObjectType.SCALED_GRAPHIC

    width: int = 0
    height: int = 0
    scale_type: int = 0
    options: int = 0
    value: Optional[ObjectID] = None
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class Animation(VTObject):
    object_type = ObjectType.ANIMATION

    width: int = 0
    height: int = 0
    refresh_interval: int = 0
    value: int = 0
    enabled: bool = True
    first_child_index: int = 0
    default_child_index: int = 0
    last_child_index: int = 0
    options: int = 0
    object_refs: Tuple[ObjectRef, ...] = ()
    macro_refs: Tuple[MacroRef, ...] = ()


@dataclass(frozen=True)
class GraphicsContext(VTObject):
    object_type = ObjectType.GRAPHICS_CONTEXT

    viewport_width: int = 0
    viewport_height: int = 0
    canvas_width: int = 0
    canvas_height: int = 0
    foreground_colour: int = 0
    background_colour: int = 0
    font_attributes: Optional[ObjectID] = None
    line_attributes: Optional[ObjectID] = None
    fill_attributes: Optional[ObjectID] = None
    format: int = 0
    options: int = 0
    transparency_colour: int = 0
