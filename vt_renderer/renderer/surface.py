"""Drawing surfaces.

The renderer paints through the :class:`DrawingSurface` protocol only. A
surface exposes a rectangular region with local coordinates (``(0, 0)`` is its
top-left corner), simple paint primitives, raster upload and a scratch store
that persists across render calls for the lifetime of the surface session.

:class:`PillowSurface` is the bundled implementation. It paints into an RGBA
``PIL.Image``; every viewport shares the image, scratch store and textures of
the surface it was opened from, and clips its paint calls to its own region.
"""

import copy
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Protocol, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw, ImageFont

from vt_renderer.config import DEFAULT_CONFIG, DEFAULT_SURFACE_SIZE, RenderConfig
from vt_renderer.objects import Point
from vt_renderer.renderer.geometry import Rect
from vt_renderer.types import RGBA, TRANSPARENT

logger = logging.getLogger(__name__)

UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class TextureHandle:
    """Opaque reference to a raster uploaded to a surface session."""

    name: str
    generation: int


class DrawingSurface(Protocol):
    """Capabilities the renderer needs from its drawing target."""

    @property
    def size(self) -> Tuple[int, int]:
        """Width and height of the region."""
        ...

    @property
    def scratch(self) -> MutableMapping[str, Any]:
        """Session scoped key/value store."""
        ...

    def fill_rect(self, rect: Rect, color: RGBA) -> None: ...

    def stroke_rect(self, rect: Rect, color: RGBA, width: int) -> None: ...

    def text(self, position: Point, text: str, color: RGBA) -> None: ...

    def label(self, position: Point, text: str) -> None:
        """Paint a diagnostic message."""
        ...

    def viewport(self, rect: Rect) -> "Any":
        """Context manager yielding a surface anchored at and clipped to ``rect``."""
        ...

    def upload_raster(self, name: str, pixels: UInt8Array) -> TextureHandle: ...

    def draw_raster(self, handle: TextureHandle, rect: Rect) -> None: ...

    def set_border_emphasis(self, width: int) -> None: ...


@dataclass
class _Session:
    image: Image.Image
    font: Any
    config: RenderConfig
    scratch: Dict[str, Any] = field(default_factory=dict)
    textures: Dict[str, Tuple[TextureHandle, Image.Image]] = field(
        default_factory=dict
    )
    generation: int = 0
    border_emphasis: int = 0


class PillowSurface:
    """:class:`DrawingSurface` painting into a Pillow RGBA image."""

    def __init__(
        self,
        width: int = DEFAULT_SURFACE_SIZE[0],
        height: int = DEFAULT_SURFACE_SIZE[1],
        background: RGBA = TRANSPARENT,
        config: Optional[RenderConfig] = None,
        font: Optional[Any] = None,
    ):
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must not be negative: {width}x{height}")
        self._session = _Session(
            image=Image.new("RGBA", (width, height), background),
            font=font if font is not None else ImageFont.load_default(),
            config=config or DEFAULT_CONFIG,
        )
        self._origin = Point(0, 0)
        self._size = (width, height)
        self._clip = Rect(0, 0, width, height)

    @property
    def image(self) -> Image.Image:
        return self._session.image

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def scratch(self) -> MutableMapping[str, Any]:
        return self._session.scratch

    @property
    def border_emphasis(self) -> int:
        return self._session.border_emphasis

    def clear(self, background: RGBA = TRANSPARENT) -> None:
        """Start a new frame; scratch store and textures are kept."""
        self._session.image = Image.new("RGBA", self._session.image.size, background)

    # -------- Paint primitives --------

    def _paint(self, target: Rect, draw_fn: Any) -> None:
        """Run ``draw_fn(draw, offset)`` on a layer covering ``target``.

        ``target`` is absolute and clipped to this viewport. ``offset`` turns
        local coordinates into layer coordinates.
        """
        area = target.intersect(self._clip)
        if area.is_empty:
            return
        layer = Image.new("RGBA", (area.width, area.height), TRANSPARENT)
        offset = Point(self._origin.x - area.x, self._origin.y - area.y)
        draw_fn(ImageDraw.Draw(layer), offset)
        self._session.image.alpha_composite(layer, dest=(area.x, area.y))

    def fill_rect(self, rect: Rect, color: RGBA) -> None:
        if rect.is_empty or color[3] == 0:
            return

        def draw_fn(draw: ImageDraw.ImageDraw, offset: Point) -> None:
            r = rect.translate(offset)
            draw.rectangle((r.x, r.y, r.right - 1, r.bottom - 1), fill=color)

        self._paint(rect.translate(self._origin), draw_fn)

    def stroke_rect(self, rect: Rect, color: RGBA, width: int) -> None:
        """Stroke the inside edge of ``rect`` with a ``width`` pixel line."""
        if rect.is_empty or width <= 0 or color[3] == 0:
            return

        def draw_fn(draw: ImageDraw.ImageDraw, offset: Point) -> None:
            r = rect.translate(offset)
            draw.rectangle(
                (r.x, r.y, r.right - 1, r.bottom - 1), outline=color, width=width
            )

        self._paint(rect.translate(self._origin), draw_fn)

    def text(self, position: Point, text: str, color: RGBA) -> None:
        if not text:
            return

        def draw_fn(draw: ImageDraw.ImageDraw, offset: Point) -> None:
            at = position + offset
            draw.text((at.x, at.y), text, fill=color, font=self._session.font)

        self._paint(self._clip, draw_fn)

    def label(self, position: Point, text: str) -> None:
        logger.debug("Diagnostic at %s: %s", position + self._origin, text)
        self.text(position, text, self._session.config.diagnostic_color)

    @contextmanager
    def viewport(self, rect: Rect) -> Iterator["PillowSurface"]:
        child = copy.copy(self)
        child._origin = self._origin + rect.min
        child._size = (max(0, rect.width), max(0, rect.height))
        child._clip = self._clip.intersect(rect.translate(self._origin))
        yield child

    def set_border_emphasis(self, width: int) -> None:
        self._session.border_emphasis = width

    # -------- Rasters --------

    def upload_raster(self, name: str, pixels: UInt8Array) -> TextureHandle:
        """Store an ``(H, W, 4)`` uint8 array as texture ``name``.

        Uploading under an existing name replaces the previous texture and
        invalidates its handle.
        """
        height, width = pixels.shape[:2]
        if width == 0 or height == 0:
            texture = Image.new("RGBA", (width, height), TRANSPARENT)
        else:
            texture = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        self._session.generation += 1
        handle = TextureHandle(name, self._session.generation)
        self._session.textures[name] = (handle, texture)
        return handle

    def texture(self, handle: TextureHandle) -> Image.Image:
        current = self._session.textures.get(handle.name)
        if current is None or current[0] != handle:
            raise KeyError(f"Unknown texture handle: {handle}")
        return current[1]

    def draw_raster(self, handle: TextureHandle, rect: Rect) -> None:
        texture = self.texture(handle)
        if rect.is_empty or texture.width == 0 or texture.height == 0:
            return
        target = rect.translate(self._origin)
        area = target.intersect(self._clip)
        if area.is_empty:
            return
        scaled = texture.resize((rect.width, rect.height), Image.Resampling.NEAREST)
        left, top = area.x - target.x, area.y - target.y
        self._session.image.alpha_composite(
            scaled,
            dest=(area.x, area.y),
            source=(left, top, left + area.width, top + area.height),
        )
