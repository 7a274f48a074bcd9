"""Object renderers.

``render`` walks an object tree depth first. Every object kind maps to one
entry of :data:`RENDERERS`; kinds without a visual representation (or not
drawn yet) map to :func:`render_nothing` explicitly, so the table always
covers the whole :class:`~vt_renderer.types.ObjectType` enumeration.

Positions are relative to the surface a renderer is handed. Objects that own
a region (containers, buttons, fields, ...) open a viewport for it, which
makes the region's top-left corner the origin for their children. Offsets
therefore add up while descending the tree.

A broken reference never aborts the pass: the object that needs it is
replaced by a diagnostic label and rendering carries on with its siblings.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from vt_renderer.config import DEFAULT_CONFIG, RenderConfig
from vt_renderer.objects import (
    AlarmMask,
    Button,
    Container,
    DataMask,
    FillAttributes,
    FontAttributes,
    Key,
    LineAttributes,
    Object,
    ObjectPointer,
    ObjectRef,
    OutputRectangle,
    OutputString,
    Point,
    StringVariable,
    WorkingSet,
)
from vt_renderer.pool import ObjectPool
from vt_renderer.renderer.cache import RenderCache
from vt_renderer.renderer.context import RenderContext
from vt_renderer.renderer.geometry import Rect, relative_rect
from vt_renderer.renderer.picture import render_picture_graphic
from vt_renderer.renderer.resolve import resolve_color, resolve_typed
from vt_renderer.renderer.surface import DrawingSurface
from vt_renderer.types import TRANSPARENT, ObjectType

logger = logging.getLogger(__name__)

RenderFn = Callable[[Any, RenderContext, DrawingSurface, Point], None]


def render_object(
    obj: Object, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    if obj.id in ctx.active:
        logger.debug("Reference cycle through object %s", obj.id)
        surface.label(position, f"Cyclic reference: {obj.id}")
        return
    ctx.active.add(obj.id)
    try:
        RENDERERS[obj.object_type](obj, ctx, surface, position)
    finally:
        ctx.active.discard(obj.id)


def render_object_refs(
    object_refs: Sequence[ObjectRef], ctx: RenderContext, surface: DrawingSurface
) -> None:
    for ref in object_refs:
        obj = ctx.pool.object_by_id(ref.id)
        if obj is None:
            surface.label(ref.offset, f"Missing object: {ref.id}")
            continue
        render_object(obj, ctx, surface, ref.offset)


def render_nothing(
    obj: Object, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    pass


# -------- Masks and containers --------


def _render_mask(
    background_colour: int,
    object_refs: Sequence[ObjectRef],
    ctx: RenderContext,
    surface: DrawingSurface,
    position: Point,
) -> None:
    width, height = surface.size
    with surface.viewport(relative_rect(position, width, height)) as mask:
        background = resolve_color(ctx.pool, background_colour)
        mask.fill_rect(Rect(0, 0, width, height), background)
        render_object_refs(object_refs, ctx, mask)


def render_working_set(
    obj: WorkingSet, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    if not obj.selectable:
        # The working set is not visible
        return
    _render_mask(obj.background_colour, obj.object_refs, ctx, surface, position)


def render_data_mask(
    obj: DataMask, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    _render_mask(obj.background_colour, obj.object_refs, ctx, surface, position)


def render_alarm_mask(
    obj: AlarmMask, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    _render_mask(obj.background_colour, obj.object_refs, ctx, surface, position)


def render_container(
    obj: Container, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    if obj.hidden:
        return
    with surface.viewport(relative_rect(position, obj.width, obj.height)) as inner:
        render_object_refs(obj.object_refs, ctx, inner)


def render_key(
    obj: Key, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    width, height = ctx.config.key_size
    with surface.viewport(relative_rect(position, width, height)) as inner:
        render_object_refs(obj.object_refs, ctx, inner)


def render_button(
    obj: Button, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    border_width = ctx.config.button_border_width
    rect = relative_rect(position, obj.width, obj.height)
    face = rect if obj.options.no_border else rect.shrink(border_width)

    surface.set_border_emphasis(0 if obj.options.suppress_border else border_width)
    if obj.options.transparent_background:
        surface.fill_rect(face, TRANSPARENT)
    else:
        surface.fill_rect(face, resolve_color(ctx.pool, obj.background_colour))

    with surface.viewport(face) as inner:
        render_object_refs(obj.object_refs, ctx, inner)


def render_object_pointer(
    obj: ObjectPointer, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    if obj.value is None:
        # No object selected
        return
    target = ctx.pool.object_by_id(obj.value)
    if target is None:
        surface.label(position, f"Missing object: {obj.value}")
        return
    render_object(target, ctx, surface, position)


# -------- Output fields and shapes --------


def render_output_string(
    obj: OutputString, ctx: RenderContext, surface: DrawingSurface, position: Point
) -> None:
    font_attributes = resolve_typed(ctx.pool, obj.font_attributes, FontAttributes)
    if font_attributes is None:
        surface.label(position, f"Missing font attributes: {obj.font_attributes}")
        return

    text = obj.value
    if obj.variable_reference is not None:
        variable = resolve_typed(ctx.pool, obj.variable_reference, StringVariable)
        if variable is not None:
            text = variable.value

    # TODO: wrap on hyphen, justification and font size are not applied yet.
    color = resolve_color(ctx.pool, font_attributes.font_colour)
    with surface.viewport(relative_rect(position, obj.width, obj.height)) as field:
        field.text(Point(0, 0), text, color)


def render_output_rectangle(
    obj: OutputRectangle,
    ctx: RenderContext,
    surface: DrawingSurface,
    position: Point,
) -> None:
    rect = relative_rect(position, obj.width, obj.height)

    line_attributes = resolve_typed(ctx.pool, obj.line_attributes, LineAttributes)
    if line_attributes is None:
        surface.label(position, f"Missing line attributes: {obj.line_attributes}")
        return
    # Border; line art is drawn solid.
    surface.stroke_rect(
        rect,
        resolve_color(ctx.pool, line_attributes.line_colour),
        line_attributes.line_width,
    )

    if obj.fill_attributes is None:
        return
    fill_attributes = resolve_typed(ctx.pool, obj.fill_attributes, FillAttributes)
    if fill_attributes is None:
        surface.label(position, f"Missing fill attributes: {obj.fill_attributes}")
        return
    # Infill; fill type and pattern are not applied yet.
    surface.fill_rect(
        rect.shrink(line_attributes.line_width),
        resolve_color(ctx.pool, fill_attributes.fill_colour),
    )


RENDERERS: Dict[ObjectType, RenderFn] = {
    ObjectType.WORKING_SET: render_working_set,
    ObjectType.DATA_MASK: render_data_mask,
    ObjectType.ALARM_MASK: render_alarm_mask,
    ObjectType.CONTAINER: render_container,
    ObjectType.SOFT_KEY_MASK: render_nothing,
    ObjectType.KEY: render_key,
    ObjectType.BUTTON: render_button,
    ObjectType.INPUT_BOOLEAN: render_nothing,
    ObjectType.INPUT_STRING: render_nothing,
    ObjectType.INPUT_NUMBER: render_nothing,
    ObjectType.INPUT_LIST: render_nothing,
    ObjectType.OUTPUT_STRING: render_output_string,
    ObjectType.OUTPUT_NUMBER: render_nothing,
    ObjectType.OUTPUT_LINE: render_nothing,
    ObjectType.OUTPUT_RECTANGLE: render_output_rectangle,
    ObjectType.OUTPUT_ELLIPSE: render_nothing,
    ObjectType.OUTPUT_POLYGON: render_nothing,
    ObjectType.OUTPUT_METER: render_nothing,
    ObjectType.OUTPUT_LINEAR_BAR_GRAPH: render_nothing,
    ObjectType.OUTPUT_ARCHED_BAR_GRAPH: render_nothing,
    ObjectType.PICTURE_GRAPHIC: render_picture_graphic,
    ObjectType.NUMBER_VARIABLE: render_nothing,
    ObjectType.STRING_VARIABLE: render_nothing,
    ObjectType.FONT_ATTRIBUTES: render_nothing,
    ObjectType.LINE_ATTRIBUTES: render_nothing,
    ObjectType.FILL_ATTRIBUTES: render_nothing,
    ObjectType.INPUT_ATTRIBUTES: render_nothing,
    ObjectType.OBJECT_POINTER: render_object_pointer,
    ObjectType.MACRO: render_nothing,
    ObjectType.AUXILIARY_FUNCTION_TYPE1: render_nothing,
    ObjectType.AUXILIARY_INPUT_TYPE1: render_nothing,
    ObjectType.AUXILIARY_FUNCTION_TYPE2: render_nothing,
    ObjectType.AUXILIARY_INPUT_TYPE2: render_nothing,
    ObjectType.AUXILIARY_CONTROL_DESIGNATOR_TYPE2: render_nothing,
    ObjectType.WINDOW_MASK: render_nothing,
    ObjectType.KEY_GROUP: render_nothing,
    ObjectType.GRAPHICS_CONTEXT: render_nothing,
    ObjectType.OUTPUT_LIST: render_nothing,
    ObjectType.EXTENDED_INPUT_ATTRIBUTES: render_nothing,
    ObjectType.COLOUR_MAP: render_nothing,
    ObjectType.OBJECT_LABEL_REFERENCE_LIST: render_nothing,
    ObjectType.EXTERNAL_OBJECT_DEFINITION: render_nothing,
    ObjectType.EXTERNAL_REFERENCE_NAME: render_nothing,
    ObjectType.EXTERNAL_OBJECT_POINTER: render_nothing,
    ObjectType.ANIMATION: render_nothing,
    ObjectType.COLOUR_PALETTE: render_nothing,
    ObjectType.GRAPHIC_DATA: render_nothing,
    ObjectType.WORKING_SET_SPECIAL_CONTROLS: render_nothing,
    ObjectType.SCALED_GRAPHIC: render_nothing,
}

_unmapped = set(ObjectType) - RENDERERS.keys()
if _unmapped:
    raise RuntimeError(f"Object types without a renderer: {sorted(_unmapped)}")


def render(
    root: Object,
    pool: ObjectPool,
    surface: DrawingSurface,
    position: Point = Point(0, 0),
    config: Optional[RenderConfig] = None,
    namespace: str = "",
) -> None:
    """Render ``root`` and everything it references onto ``surface``.

    Arguments:
        root: Object to draw, typically a working set or data mask.
        pool: Pool that resolves references and colours.
        surface: Drawing target; its scratch store holds the raster cache.
        position: Offset of ``root`` in surface coordinates.
        config: Engine constants, ``DEFAULT_CONFIG`` when omitted.
        namespace: Cache key prefix, needed when one surface session renders
            several pools.
    """
    ctx = RenderContext(
        pool=pool,
        cache=RenderCache(surface.scratch, namespace),
        config=config or DEFAULT_CONFIG,
    )
    render_object(root, ctx, surface, position)
