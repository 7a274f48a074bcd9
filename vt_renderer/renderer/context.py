"""State shared by all renderers during one render pass."""

from dataclasses import dataclass, field
from typing import Set

from vt_renderer.config import DEFAULT_CONFIG, RenderConfig
from vt_renderer.pool import ObjectPool
from vt_renderer.renderer.cache import RenderCache
from vt_renderer.types import ObjectID


@dataclass(frozen=True)
class RenderContext:
    """Inputs of a render pass.

    Attributes:
        pool: Pool being rendered; read only.
        cache: Raster cache of the surface session.
        config: Engine constants.
        active: Ids of the objects on the current render path.
            Used to stop reference cycles.
    """

    pool: ObjectPool
    cache: RenderCache
    config: RenderConfig = DEFAULT_CONFIG
    active: Set[ObjectID] = field(default_factory=set)
