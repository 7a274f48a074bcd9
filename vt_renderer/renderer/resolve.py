"""Reference resolution.

References between objects are bare identifiers. They may dangle or point at
an object of the wrong kind; both cases resolve to ``None`` here and the
caller decides how to degrade (usually a visible diagnostic label).
"""

import logging
from typing import Optional, Type, TypeVar

from vt_renderer.objects import VTObject
from vt_renderer.pool import ObjectPool
from vt_renderer.types import RGBA, ObjectID

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=VTObject)


def resolve_color(pool: ObjectPool, index: int) -> RGBA:
    """Opaque RGBA colour of palette entry ``index``."""
    r, g, b = pool.color_by_index(index)
    return (r, g, b, 255)


def resolve_typed(
    pool: ObjectPool, object_id: Optional[ObjectID], expected: Type[T]
) -> Optional[T]:
    """Look up ``object_id`` and return it only if it is an ``expected`` object.

    Arguments:
        pool: Pool to search.
        object_id: Identifier to resolve; ``None`` never resolves.
        expected: Object class the reference must point at. Kinds are compared
            by their ``object_type`` tag.

    Returns:
        Optional[T]: The object, or ``None`` if it is absent or of another kind.
    """
    obj = pool.object_by_id(object_id)
    if obj is None:
        logger.debug("Reference %s not found in pool", object_id)
        return None
    if obj.object_type != expected.object_type:
        logger.debug(
            "Reference %s is a %s, expected %s",
            object_id,
            obj.object_type.name,
            expected.object_type.name,
        )
        return None
    return obj  # type: ignore[return-value]
