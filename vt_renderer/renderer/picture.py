"""Picture graphic decoding and caching.

Raw picture data is a stream of palette indices packed 8, 2 or 1 to a byte
(monochrome, four-bit, eight-bit), most significant bits first. Pixels are
laid out row by row. A row always starts on a byte boundary: when a row is
full, the indices left in the current byte are dropped. Data beyond the
bitmap is ignored.

Decoded rasters are uploaded to the surface once and reused on later frames
for as long as the object's content hash stays the same.
"""

import hashlib
import logging

import numpy as np
import numpy.typing as npt

from vt_renderer.encoding import encode_picture_graphic
from vt_renderer.objects import PictureGraphic, Point
from vt_renderer.pool import ObjectPool
from vt_renderer.renderer.context import RenderContext
from vt_renderer.renderer.geometry import relative_rect
from vt_renderer.renderer.surface import DrawingSurface, TextureHandle
from vt_renderer.types import PictureGraphicFormat

logger = logging.getLogger(__name__)

UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]

PIXELS_PER_BYTE = {
    PictureGraphicFormat.MONOCHROME: 8,
    PictureGraphicFormat.FOUR_BIT: 2,
    PictureGraphicFormat.EIGHT_BIT: 1,
}


def content_hash(obj: PictureGraphic) -> str:
    """Change-detection key over the object's full encoded form."""
    return hashlib.blake2b(encode_picture_graphic(obj), digest_size=8).hexdigest()


def unpack_indices(data: UInt8Array, fmt: PictureGraphicFormat) -> UInt8Array:
    """Split every byte into its palette indices, one row per byte."""
    if fmt == PictureGraphicFormat.MONOCHROME:
        return np.unpackbits(data[:, None], axis=1)
    if fmt == PictureGraphicFormat.FOUR_BIT:
        return np.stack([data >> 4, data & 0x0F], axis=1)
    return data[:, None]


def decode_picture_graphic(obj: PictureGraphic, pool: ObjectPool) -> UInt8Array:
    """Decode ``obj`` into an ``(actual_height, actual_width, 4)`` RGBA array.

    Pixels not covered by the data, and pixels whose colour equals the
    transparency colour when the transparent option is set, stay fully
    transparent.
    """
    width, height = obj.actual_width, obj.actual_height
    raster: UInt8Array = np.zeros((height, width, 4), dtype=np.uint8)
    data: UInt8Array = np.frombuffer(obj.data_as_raw_encoded(), dtype=np.uint8)
    if width == 0 or height == 0 or data.size == 0:
        return raster

    per_byte = PIXELS_PER_BYTE[obj.format]
    bytes_per_row = -(-width // per_byte)
    rows = min(height, -(-data.size // bytes_per_row))

    # Every row consumes exactly bytes_per_row bytes.
    padded: UInt8Array = np.zeros(rows * bytes_per_row, dtype=np.uint8)
    used = min(data.size, padded.size)
    padded[:used] = data[:used]
    indices = unpack_indices(padded, obj.format).reshape(rows, -1)[:, :width]

    source_byte = (
        np.arange(rows)[:, None] * bytes_per_row + np.arange(width)[None, :] // per_byte
    )
    written: BoolArray = source_byte < data.size

    palette: UInt8Array = np.array(pool.palette, dtype=np.uint8)
    colors = palette[indices]
    if obj.options.transparent:
        key = np.array(pool.color_by_index(obj.transparency_colour), dtype=np.uint8)
        written &= ~np.all(colors == key, axis=-1)

    region = raster[:rows]
    region[written, :3] = colors[written]
    region[written, 3] = 255
    return raster


def cached_raster(
    obj: PictureGraphic, ctx: RenderContext, surface: DrawingSurface
) -> TextureHandle:
    """Return the texture for ``obj``, decoding and uploading it when stale."""
    digest = content_hash(obj)
    handle = ctx.cache.lookup(obj.id, digest)
    if handle is not None:
        logger.debug("Reusing texture - %s", obj.id)
        return handle

    pixels = decode_picture_graphic(obj, ctx.pool)
    handle = surface.upload_raster(f"{ctx.cache.key(obj.id)}_texture", pixels)
    logger.debug("Saving texture - %s", obj.id)
    ctx.cache.store(obj.id, digest, handle)
    return handle


def render_picture_graphic(
    obj: PictureGraphic, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    rect = relative_rect(position, obj.width, obj.display_height)
    surface.draw_raster(cached_raster(obj, ctx, surface), rect)
