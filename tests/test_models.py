import dataclasses

import pytest

from floorplan.models import Desk, Layer, Rect, Rectangle, Root


def test_rectangle_from_position_size():
    r = Rectangle.from_position_size(10, 20, 30, 40)
    assert r == Rectangle(10, 20, 40, 60)
    assert (r.width, r.height) == (30, 40)


def test_rectangle_union_takes_outer_bounds():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(-5, 5, 3, 20)
    assert a.union(b) == Rectangle(-5, 0, 10, 20)


def test_rectangle_to_qrectf():
    q = Rectangle(-10, 5, 30, 25).to_qrectf()
    assert (q.x(), q.y(), q.width(), q.height()) == (-10, 5, 40, 20)


def test_rect_extent_is_its_box():
    assert Rect(10, 20, 30, 40).extent() == Rectangle(10, 20, 40, 60)


def test_desk_extent_is_a_point():
    assert Desk("D1", 5, 5).extent() == Rectangle(5, 5, 5, 5)


def test_empty_containers_extent_is_origin():
    assert Layer().extent() == Rectangle(0, 0, 0, 0)
    assert Root("L1").extent() == Rectangle(0, 0, 0, 0)


def test_layer_extent_always_includes_origin():
    layer = Layer((Rect(50, 60, 10, 10), Desk("D1", 100, 80)))
    assert layer.extent() == Rectangle(0, 0, 100, 80)


def test_layer_extent_grows_into_negative_coordinates():
    layer = Layer((Rect(-20, -10, 5, 5),))
    assert layer.extent() == Rectangle(-20, -10, 0, 0)


def test_root_extent_aggregates_layers():
    root = Root("L1", (
        Layer((Rect(0, 0, 100, 50),)),
        Layer((Desk("D1", 150, -30),)),
    ))
    assert root.extent() == Rectangle(0, -30, 150, 50)


def test_extent_is_idempotent():
    root = Root("L1", (Layer((Rect(1, 2, 3, 4), Desk("D", 9, 9))),))
    assert root.extent() == root.extent()


def test_negative_size_passes_through():
    assert Rect(10, 10, -5, -5).extent() == Rectangle(10, 10, 5, 5)


def test_tree_is_read_only():
    layer = Layer([Desk("D1", 1, 2)])
    assert isinstance(layer.children, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        layer.children = ()
    root = Root("L1", [layer])
    with pytest.raises(dataclasses.FrozenInstanceError):
        root.location_id = "L2"


def test_root_accessors():
    layer = Layer((Desk("A", 0, 0), Desk("B", 1, 1)))
    root = Root("L1", (layer, Layer()))
    assert root.layers == (layer, Layer())
    assert len(root) == 2
    assert list(layer) == [Desk("A", 0, 0), Desk("B", 1, 1)]
    assert root.element_count() == 2
