from typing import Any, List, Tuple

import pytest

from vt_renderer.config import RenderConfig
from vt_renderer.objects import (
    AlarmMask,
    Animation,
    AuxiliaryFunctionType2,
    Button,
    ButtonOptions,
    ColourMap,
    Container,
    DataMask,
    ExternalObjectPointer,
    FillAttributes,
    FontAttributes,
    GraphicsContext,
    InputBoolean,
    InputList,
    InputNumber,
    InputString,
    Key,
    KeyGroup,
    LineAttributes,
    Macro,
    NumberVariable,
    ObjectPointer,
    ObjectRef,
    OutputEllipse,
    OutputLine,
    OutputList,
    OutputMeter,
    OutputNumber,
    OutputPolygon,
    OutputString,
    Point,
    ScaledGraphic,
    SoftKeyMask,
    StringVariable,
    WindowMask,
    WorkingSet,
    WorkingSetSpecialControls,
)
from vt_renderer.pool import ObjectPool
from vt_renderer.renderer.geometry import Rect
from vt_renderer.renderer.objects import RENDERERS, render, render_nothing
from vt_renderer.types import TRANSPARENT, ObjectType
from tests.test_utils import (
    RED,
    WHITE,
    RecordingSurface,
    make_label_objects,
    make_nested_containers,
    make_rectangle_pool,
)

RED_RGBA = (255, 0, 0, 255)
WHITE_RGBA = (255, 255, 255, 255)


def render_calls(root: Any, pool: ObjectPool, **kwargs: Any) -> List[Tuple[Any, ...]]:
    surface = RecordingSurface()
    render(root, pool, surface, **kwargs)
    return surface.calls


# -------- Dispatch --------


def test_dispatch_table_covers_every_object_type() -> None:
    assert set(RENDERERS) == set(ObjectType)


@pytest.mark.parametrize(
    "obj",
    [
        SoftKeyMask(id=1, objects=(2,)),
        InputBoolean(id=1),
        InputString(id=1, font_attributes=2),
        InputNumber(id=1),
        InputList(id=1),
        OutputNumber(id=1, font_attributes=2),
        OutputList(id=1),
        OutputLine(id=1, line_attributes=2),
        OutputEllipse(id=1, line_attributes=2),
        OutputPolygon(id=1, line_attributes=2),
        OutputMeter(id=1),
        NumberVariable(id=1, value=3),
        StringVariable(id=1, value="x"),
        FontAttributes(id=1),
        LineAttributes(id=1),
        FillAttributes(id=1),
        Macro(id=1),
        WindowMask(id=1),
        KeyGroup(id=1),
        GraphicsContext(id=1),
        ColourMap(id=1),
        Animation(id=1, object_refs=(ObjectRef(2),)),
        ScaledGraphic(id=1),
        AuxiliaryFunctionType2(id=1, object_refs=(ObjectRef(2),)),
        ExternalObjectPointer(id=1, default_object_id=2),
        WorkingSetSpecialControls(id=1),
    ],
)
def test_unimplemented_kinds_paint_nothing(obj: Any) -> None:
    pool = make_rectangle_pool(rect_id=2).add(obj)
    assert RENDERERS[obj.object_type] is render_nothing
    assert render_calls(obj, pool) == []


# -------- Masks --------


def test_working_set_fills_then_renders_children() -> None:
    pool = make_rectangle_pool(rect_id=100)
    working_set = WorkingSet(
        id=1, background_colour=WHITE, object_refs=(ObjectRef(100, Point(5, 6)),)
    )
    pool = pool.add(working_set)

    calls = render_calls(working_set, pool)

    assert calls[0] == ("fill_rect", Rect(0, 0, 480, 480), WHITE_RGBA)
    assert calls[1] == ("stroke_rect", Rect(5, 6, 40, 20), RED_RGBA, 2)


def test_unselectable_working_set_paints_nothing() -> None:
    pool = make_rectangle_pool(rect_id=100)
    working_set = WorkingSet(
        id=1, selectable=False, object_refs=(ObjectRef(100, Point(5, 6)),)
    )
    assert render_calls(working_set, pool.add(working_set)) == []


@pytest.mark.parametrize("mask_cls", [DataMask, AlarmMask])
def test_masks_fill_background(mask_cls: Any) -> None:
    mask = mask_cls(id=1, background_colour=RED)
    calls = render_calls(mask, ObjectPool.from_objects([mask]))
    assert calls == [("fill_rect", Rect(0, 0, 480, 480), RED_RGBA)]


def test_mask_children_render_in_list_order() -> None:
    objects = make_label_objects(string_id=10, font_id=11, text="first")
    objects += make_label_objects(string_id=20, font_id=21, text="second")
    mask = DataMask(
        id=1,
        object_refs=(ObjectRef(20, Point(0, 0)), ObjectRef(10, Point(0, 0))),
    )
    calls = render_calls(mask, ObjectPool.from_objects([mask, *objects]))
    texts = [call[2] for call in calls if call[0] == "text"]
    assert texts == ["second", "first"]


# -------- Containers and offsets --------


def test_hidden_container_paints_nothing() -> None:
    pool = make_rectangle_pool(rect_id=100)
    container = Container(
        id=1, width=50, height=50, hidden=True, object_refs=(ObjectRef(100),)
    )
    assert render_calls(container, pool.add(container)) == []


@pytest.mark.parametrize(
    "offsets",
    [
        [(10, 5)],
        [(10, 5), (3, 4)],
        [(10, 5), (3, 4), (7, 1), (0, 0), (2, 2)],
        [(10, 10), (-4, -3)],
    ],
)
def test_offsets_compose_through_nested_containers(
    offsets: List[Tuple[int, int]],
) -> None:
    containers, leaf_id = make_nested_containers(offsets)
    pool = make_rectangle_pool(rect_id=leaf_id).add_all(containers)

    calls = render_calls(containers[0], pool, position=Point(1, 1))

    x = 1 + sum(dx for dx, _ in offsets)
    y = 1 + sum(dy for _, dy in offsets)
    assert calls[0] == ("stroke_rect", Rect(x, y, 40, 20), RED_RGBA, 2)


def test_missing_child_gets_diagnostic_and_siblings_render() -> None:
    pool = make_rectangle_pool(rect_id=100)
    container = Container(
        id=1,
        width=100,
        height=100,
        object_refs=(ObjectRef(999, Point(2, 3)), ObjectRef(100, Point(4, 5))),
    )

    calls = render_calls(container, pool.add(container), position=Point(10, 10))

    assert calls[0] == ("label", Point(12, 13), "Missing object: 999")
    assert calls[1] == ("stroke_rect", Rect(14, 15, 40, 20), RED_RGBA, 2)


# -------- Output rectangle --------


def test_rectangle_stroke_then_inset_fill() -> None:
    pool = make_rectangle_pool(line_width=3)
    rect = pool.object_by_id(100)

    calls = render_calls(rect, pool, position=Point(10, 20))

    assert calls == [
        ("stroke_rect", Rect(10, 20, 40, 20), RED_RGBA, 3),
        ("fill_rect", Rect(13, 23, 34, 14), WHITE_RGBA),
    ]


def test_rectangle_without_fill_only_strokes() -> None:
    pool = make_rectangle_pool(fill_id=None)
    calls = render_calls(pool.object_by_id(100), pool)
    assert calls == [("stroke_rect", Rect(0, 0, 40, 20), RED_RGBA, 2)]


def test_missing_line_attributes_diagnostic_only() -> None:
    pool = make_rectangle_pool(rect_id=100).remove(200)
    pool = pool.add_all(make_label_objects(string_id=50, font_id=51))
    mask = DataMask(
        id=1,
        object_refs=(ObjectRef(100, Point(5, 5)), ObjectRef(50, Point(60, 5))),
    )

    calls = render_calls(mask, pool.add(mask))

    labels = [call for call in calls if call[0] == "label"]
    assert labels == [("label", Point(5, 5), "Missing line attributes: 200")]
    assert not [call for call in calls if call[0] == "stroke_rect"]
    assert ("text", Point(60, 5), "Hello", RED_RGBA) in calls


def test_line_attributes_of_wrong_kind_treated_as_missing() -> None:
    pool = make_rectangle_pool().remove(200).add(FontAttributes(id=200))
    calls = render_calls(pool.object_by_id(100), pool)
    assert calls == [("label", Point(0, 0), "Missing line attributes: 200")]


def test_missing_fill_attributes_after_stroke() -> None:
    pool = make_rectangle_pool().remove(300)
    calls = render_calls(pool.object_by_id(100), pool)
    assert calls == [
        ("stroke_rect", Rect(0, 0, 40, 20), RED_RGBA, 2),
        ("label", Point(0, 0), "Missing fill attributes: 300"),
    ]


# -------- Output string --------


def test_output_string_literal_text() -> None:
    pool = ObjectPool.from_objects(make_label_objects(text="Speed"))
    calls = render_calls(pool.object_by_id(400), pool, position=Point(7, 8))
    assert calls == [("text", Point(7, 8), "Speed", RED_RGBA)]


def test_output_string_uses_linked_variable() -> None:
    label = OutputString(
        id=1, width=50, height=10, font_attributes=2, variable_reference=3, value="lit"
    )
    pool = ObjectPool.from_objects(
        [
            label,
            FontAttributes(id=2, font_colour=WHITE),
            StringVariable(id=3, value="var"),
        ]
    )
    assert render_calls(label, pool) == [("text", Point(0, 0), "var", WHITE_RGBA)]


@pytest.mark.parametrize("variable", [None, NumberVariable(id=3, value=5)])
def test_output_string_falls_back_to_literal(variable: Any) -> None:
    label = OutputString(
        id=1, width=50, height=10, font_attributes=2, variable_reference=3, value="lit"
    )
    objects: List[Any] = [label, FontAttributes(id=2, font_colour=WHITE)]
    if variable is not None:
        objects.append(variable)
    pool = ObjectPool.from_objects(objects)
    assert render_calls(label, pool) == [("text", Point(0, 0), "lit", WHITE_RGBA)]


def test_output_string_missing_font_attributes() -> None:
    label = OutputString(id=1, width=50, height=10, font_attributes=2, value="lit")
    pool = ObjectPool.from_objects([label, LineAttributes(id=2)])
    assert render_calls(label, pool, position=Point(3, 4)) == [
        ("label", Point(3, 4), "Missing font attributes: 2")
    ]


# -------- Buttons and keys --------


def test_button_face_and_children() -> None:
    objects = make_label_objects(string_id=10, font_id=11, text="OK")
    button = Button(
        id=1,
        width=50,
        height=30,
        background_colour=WHITE,
        object_refs=(ObjectRef(10, Point(2, 2)),),
    )
    pool = ObjectPool.from_objects([button, *objects])
    calls = render_calls(button, pool, position=Point(10, 10))

    assert calls == [
        ("border_emphasis", 4),
        ("fill_rect", Rect(14, 14, 42, 22), WHITE_RGBA),
        ("text", Point(16, 16), "OK", RED_RGBA),
    ]


@pytest.mark.parametrize(
    "options, face, fill, emphasis",
    [
        (ButtonOptions(no_border=True), Rect(0, 0, 50, 30), WHITE_RGBA, 4),
        (
            ButtonOptions(transparent_background=True),
            Rect(4, 4, 42, 22),
            TRANSPARENT,
            4,
        ),
        (ButtonOptions(suppress_border=True), Rect(4, 4, 42, 22), WHITE_RGBA, 0),
    ],
)
def test_button_options(
    options: ButtonOptions, face: Rect, fill: Any, emphasis: int
) -> None:
    button = Button(id=1, width=50, height=30, background_colour=WHITE, options=options)
    calls = render_calls(button, ObjectPool.from_objects([button]))
    assert calls == [("border_emphasis", emphasis), ("fill_rect", face, fill)]


def test_button_border_width_from_config() -> None:
    button = Button(id=1, width=50, height=30, background_colour=WHITE)
    calls = render_calls(
        button,
        ObjectPool.from_objects([button]),
        config=RenderConfig(button_border_width=1),
    )
    assert calls == [
        ("border_emphasis", 1),
        ("fill_rect", Rect(1, 1, 48, 28), WHITE_RGBA),
    ]


def test_key_region_uses_configured_size() -> None:
    mask = DataMask(id=2, background_colour=WHITE)
    key = Key(id=1, object_refs=(ObjectRef(2, Point(0, 0)),))
    calls = render_calls(
        key,
        ObjectPool.from_objects([key, mask]),
        position=Point(5, 5),
        config=RenderConfig(key_size=(60, 30)),
    )
    assert calls == [("fill_rect", Rect(5, 5, 60, 30), WHITE_RGBA)]


# -------- Object pointer --------


def test_unset_object_pointer_paints_nothing() -> None:
    pointer = ObjectPointer(id=1)
    assert render_calls(pointer, ObjectPool.from_objects([pointer])) == []


def test_object_pointer_renders_target_in_place() -> None:
    pool = make_rectangle_pool(rect_id=100, fill_id=None)
    pointer = ObjectPointer(id=1, value=100)
    calls = render_calls(pointer, pool.add(pointer), position=Point(9, 9))
    assert calls == [("stroke_rect", Rect(9, 9, 40, 20), RED_RGBA, 2)]


def test_object_pointer_missing_target() -> None:
    pointer = ObjectPointer(id=1, value=77)
    pool = ObjectPool.from_objects([pointer])
    calls = render_calls(pointer, pool, position=Point(1, 2))
    assert calls == [("label", Point(1, 2), "Missing object: 77")]


def test_reference_cycle_is_cut_with_diagnostic() -> None:
    container = Container(
        id=1, width=10, height=10, object_refs=(ObjectRef(2, Point(1, 1)),)
    )
    pointer = ObjectPointer(id=2, value=1)
    calls = render_calls(container, ObjectPool.from_objects([container, pointer]))
    assert calls == [("label", Point(1, 1), "Cyclic reference: 1")]


def test_shared_object_renders_at_each_reference() -> None:
    pool = make_rectangle_pool(rect_id=100, fill_id=None)
    mask = DataMask(
        id=1, object_refs=(ObjectRef(100, Point(0, 0)), ObjectRef(100, Point(50, 0)))
    )
    calls = render_calls(mask, pool.add(mask))
    strokes = [call[1] for call in calls if call[0] == "stroke_rect"]
    assert strokes == [Rect(0, 0, 40, 20), Rect(50, 0, 40, 20)]


# -------- Idempotence --------


def test_render_twice_is_identical() -> None:
    pool = make_rectangle_pool(rect_id=100)
    pool = pool.add_all(make_label_objects(string_id=50, font_id=51))
    mask = DataMask(
        id=1,
        background_colour=WHITE,
        object_refs=(ObjectRef(100, Point(5, 5)), ObjectRef(50, Point(60, 5))),
    )
    pool = pool.add(mask)
    surface = RecordingSurface()

    render(mask, pool, surface)
    first = list(surface.calls)
    surface.calls.clear()
    render(mask, pool, surface)

    assert surface.calls == first
