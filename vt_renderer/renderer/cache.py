"""Per-session raster cache.

Entries live in the surface's scratch store so their lifetime is the surface
session. Each entry pairs the content hash of the object it was produced from
with the texture handle; a lookup only hits when the stored hash equals the
object's current hash.
"""

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

from vt_renderer.renderer.surface import TextureHandle
from vt_renderer.types import ObjectID


@dataclass(frozen=True)
class CacheEntry:
    content_hash: str
    handle: TextureHandle


class RenderCache:
    """Object id -> :class:`CacheEntry` map on top of a scratch store.

    ``namespace`` prefixes every key. Give each pool its own namespace when
    several pools are rendered on one surface session.
    """

    def __init__(self, scratch: MutableMapping[str, Any], namespace: str = ""):
        self.scratch = scratch
        self.namespace = namespace

    def key(self, object_id: ObjectID) -> str:
        return f"{self.namespace}picturegraphic_{object_id}"

    def lookup(
        self, object_id: ObjectID, content_hash: str
    ) -> Optional[TextureHandle]:
        entry = self.scratch.get(self.key(object_id))
        if isinstance(entry, CacheEntry) and entry.content_hash == content_hash:
            return entry.handle
        return None

    def store(
        self, object_id: ObjectID, content_hash: str, handle: TextureHandle
    ) -> None:
        self.scratch[self.key(object_id)] = CacheEntry(content_hash, handle)
