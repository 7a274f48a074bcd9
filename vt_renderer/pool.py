"""Immutable object pool.

An :class:`ObjectPool` maps object identifiers to objects and carries the
256-entry colour palette that colour indices are resolved through. The pool
is a value object: editing helpers return a new pool and leave the original
untouched, so a pool can safely be shared for the duration of a render pass.

The default palette follows ISO 11783-6: sixteen named colours, a 6x6x6
colour cube and a proprietary range rendered as black.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from vt_renderer.objects import Object
from vt_renderer.types import RGB, ObjectID

PALETTE_SIZE = 256

STANDARD_COLOURS: Tuple[RGB, ...] = (
    (0x00, 0x00, 0x00),  # black
    (0xFF, 0xFF, 0xFF),  # white
    (0x00, 0x99, 0x00),  # green
    (0x00, 0x99, 0x99),  # teal
    (0x99, 0x00, 0x00),  # maroon
    (0x99, 0x00, 0x99),  # purple
    (0x99, 0x99, 0x00),  # olive
    (0xCC, 0xCC, 0xCC),  # silver
    (0x99, 0x99, 0x99),  # grey
    (0x00, 0x00, 0xFF),  # blue
    (0x00, 0xFF, 0x00),  # lime
    (0x00, 0xFF, 0xFF),  # cyan
    (0xFF, 0x00, 0x00),  # red
    (0xFF, 0x00, 0xFF),  # magenta
    (0xFF, 0xFF, 0x00),  # yellow
    (0x00, 0x00, 0x99),  # navy
)

_CUBE_STEPS = (0x00, 0x33, 0x66, 0x99, 0xCC, 0xFF)


def default_palette() -> Tuple[RGB, ...]:
    """Return the ISO 11783-6 default palette."""
    cube = [(r, g, b) for r in _CUBE_STEPS for g in _CUBE_STEPS for b in _CUBE_STEPS]
    proprietary = [(0, 0, 0)] * (PALETTE_SIZE - len(STANDARD_COLOURS) - len(cube))
    return STANDARD_COLOURS + tuple(cube) + tuple(proprietary)


DEFAULT_PALETTE: Tuple[RGB, ...] = default_palette()


@dataclass(frozen=True)
class ObjectPool:
    """Scene graph of objects plus palette.

    Attributes:
        objects (PMap[ObjectID, Object]): Objects keyed by their identifier.
        palette (Tuple[RGB, ...]): Colour table, exactly 256 entries.
    """

    objects: PMap[ObjectID, Object] = pmap()
    palette: Tuple[RGB, ...] = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        if len(self.palette) != PALETTE_SIZE:
            raise ValueError(
                f"Palette must hold {PALETTE_SIZE} colours, got {len(self.palette)}"
            )

    @classmethod
    def from_objects(
        cls, objects: Iterable[Object], palette: Optional[Tuple[RGB, ...]] = None
    ) -> "ObjectPool":
        pool = cls(palette=palette if palette is not None else DEFAULT_PALETTE)
        return pool.add_all(objects)

    def object_by_id(self, object_id: Optional[ObjectID]) -> Optional[Object]:
        if object_id is None:
            return None
        return self.objects.get(object_id)

    def color_by_index(self, index: int) -> RGB:
        """Palette colour for ``index``; only the low eight bits are used."""
        return self.palette[index & 0xFF]

    def add(self, obj: Object) -> "ObjectPool":
        """Return a pool with ``obj`` added, replacing any object with its id."""
        return replace(self, objects=self.objects.set(obj.id, obj))

    def add_all(self, objects: Iterable[Object]) -> "ObjectPool":
        evolver = self.objects.evolver()
        for obj in objects:
            evolver[obj.id] = obj
        return replace(self, objects=evolver.persistent())

    def remove(self, object_id: ObjectID) -> "ObjectPool":
        return replace(self, objects=self.objects.discard(object_id))

    def __contains__(self, object_id: object) -> bool:
        return object_id in self.objects

    def __len__(self) -> int:
        return len(self.objects)
