"""Rendering subpackage.

Turns an :class:`~vt_renderer.pool.ObjectPool` into pixels. The engine
focuses on:

* A recursive walk over object references with accumulated offsets.
* Attribute resolution (palette colours, font/line/fill attributes, string
  variables) that degrades to visible diagnostics instead of failing.
* Picture graphic decoding with a per-session texture cache.

See :mod:`vt_renderer.renderer.objects` for the per-kind renderers and
:mod:`vt_renderer.renderer.picture` for the packed pixel decoder.
"""

from typing import Optional

from PIL import Image

from vt_renderer.config import DEFAULT_CONFIG, DEFAULT_SURFACE_SIZE, RenderConfig
from vt_renderer.objects import Object, Point
from vt_renderer.pool import ObjectPool
from vt_renderer.renderer.cache import CacheEntry, RenderCache
from vt_renderer.renderer.geometry import Rect, relative_rect
from vt_renderer.renderer.objects import RENDERERS, render, render_object
from vt_renderer.renderer.picture import content_hash, decode_picture_graphic
from vt_renderer.renderer.resolve import resolve_color, resolve_typed
from vt_renderer.renderer.surface import DrawingSurface, PillowSurface, TextureHandle
from vt_renderer.types import RGBA, ObjectID

DEFAULT_BACKGROUND: RGBA = (0, 0, 0, 255)


class PoolRenderer:
    """Renders pools into PIL images, keeping one surface session alive.

    The session (scratch store and textures) survives between calls, so
    unchanged picture graphics are decoded only once.
    """

    width: int
    height: int
    background: RGBA
    config: RenderConfig
    namespace: str

    def __init__(
        self,
        width: int = DEFAULT_SURFACE_SIZE[0],
        height: int = DEFAULT_SURFACE_SIZE[1],
        background: RGBA = DEFAULT_BACKGROUND,
        config: Optional[RenderConfig] = None,
        namespace: str = "",
    ):
        self.width = width
        self.height = height
        self.background = background
        self.config = config or DEFAULT_CONFIG
        self.namespace = namespace
        self.surface = PillowSurface(width, height, background, config=self.config)

    def render(
        self, root: Object, pool: ObjectPool, position: Point = Point(0, 0)
    ) -> Image.Image:
        self.surface.clear(self.background)
        render(root, pool, self.surface, position, self.config, self.namespace)
        return self.surface.image.copy()

    def render_id(self, pool: ObjectPool, object_id: ObjectID) -> Image.Image:
        """Render the pool object ``object_id``; raises ``KeyError`` if absent."""
        root = pool.object_by_id(object_id)
        if root is None:
            raise KeyError(f"Object {object_id} is not in the pool")
        return self.render(root, pool)


__all__ = [
    "CacheEntry",
    "DrawingSurface",
    "PillowSurface",
    "PoolRenderer",
    "RENDERERS",
    "Rect",
    "RenderCache",
    "TextureHandle",
    "content_hash",
    "decode_picture_graphic",
    "relative_rect",
    "render",
    "render_object",
    "resolve_color",
    "resolve_typed",
]
