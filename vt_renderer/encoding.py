"""ISO 11783-6 binary encoding helpers.

Only the pieces the renderer needs are implemented: the encoded form of a
picture graphic object (used as its content-hash input) and expansion of
run-length encoded picture data. Reading whole object pools from the wire is
left to the pool loader.
"""

import struct
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vt_renderer.objects.graphics import PictureGraphic

_PICTURE_GRAPHIC_HEADER = struct.Struct("<HBHHHBBBIB")


def expand_run_length(data: bytes) -> bytes:
    """Expand ``(count, value)`` pairs into ``count`` copies of ``value``.

    A trailing unpaired byte is ignored.
    """
    out = bytearray()
    for i in range(0, len(data) - 1, 2):
        out += bytes((data[i + 1],)) * data[i]
    return bytes(out)


def encode_picture_graphic(obj: "PictureGraphic") -> bytes:
    """Serialize a picture graphic the way it is stored in an object pool."""
    options = (
        int(obj.options.transparent)
        | int(obj.options.flashing) << 1
        | int(obj.options.run_length_encoded) << 2
    )
    header = _PICTURE_GRAPHIC_HEADER.pack(
        obj.id,
        int(obj.object_type),
        obj.width,
        obj.actual_width,
        obj.actual_height,
        int(obj.format),
        options,
        obj.transparency_colour,
        len(obj.data),
        len(obj.macro_refs),
    )
    macros = b"".join(
        struct.pack("<BB", macro.event_id, macro.macro_id) for macro in obj.macro_refs
    )
    return header + obj.data + macros
