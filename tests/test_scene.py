import pytest
from PySide6.QtCore import QRectF, Qt

from floorplan.errors import InvariantError
from floorplan.items import DeskItem, LayerItem, RectItem
from floorplan.loader import load_root
from floorplan.models import Desk, Layer, Rect, Rectangle, Root
from floorplan.scene import FloorplanScene, FloorplanView
from floorplan.utils import DESK_SIZE, MAX_SCALE, MIN_SCALE, ZOOM_STEP


@pytest.fixture
def scene(qapp, end_to_end_doc):
    s = FloorplanScene()
    s.load_root(load_root(end_to_end_doc))
    return s


def test_scene_builds_one_item_per_element(scene):
    assert len(scene.layer_items) == 1
    layer_item = scene.layer_items[0]
    assert isinstance(layer_item, LayerItem)
    items = layer_item.element_items()
    assert [type(it) for it in items] == [RectItem, DeskItem]


def test_scene_rect_is_root_extent(scene):
    assert scene.extent == Rectangle(0, 0, 100, 50)
    assert scene.sceneRect() == QRectF(0, 0, 100, 50)


def test_rect_item_geometry_and_colours(scene):
    rect_item = scene.layer_items[0].element_items()[0]
    assert rect_item.pos().x() == 0 and rect_item.pos().y() == 0
    assert rect_item.rect() == QRectF(0, 0, 100, 50)
    assert rect_item.brush().color().rgba() == 0xFFAABBCC
    assert rect_item.pen().style() == Qt.NoPen


def test_rect_item_without_fill_paints_nothing(qapp):
    item = RectItem(Rect(5, 5, 10, 10, stroke=None))
    assert item.brush().style() == Qt.NoBrush


def test_desk_item_is_a_fixed_size_marker(scene):
    desk_item = scene.layer_items[0].element_items()[1]
    assert desk_item.desk_id == "D1"
    assert (desk_item.pos().x(), desk_item.pos().y()) == (10, 10)
    assert desk_item.rect() == QRectF(0, 0, DESK_SIZE, DESK_SIZE)
    assert "D1" in desk_item.toolTip()


def test_find_desk(scene):
    assert scene.find_desk("D1") is scene.desk_items()[0]
    assert scene.find_desk("nope") is None


def test_layers_keep_paint_order(qapp):
    root = Root("L", (Layer((Desk("A", 0, 0),)), Layer((Desk("B", 0, 0),))))
    s = FloorplanScene()
    s.load_root(root)
    assert [it.zValue() for it in s.layer_items] == [0, 1]
    assert [it.layer for it in s.layer_items] == list(root.layers)


def test_unknown_element_is_an_invariant_failure(qapp):
    s = FloorplanScene()
    with pytest.raises(InvariantError):
        s.build_item(Layer())


def test_layer_visibility(scene):
    scene.set_layer_visible(0, False)
    assert not scene.layer_items[0].isVisible()
    scene.set_layer_visible(0, True)
    assert scene.layer_items[0].isVisible()


def test_reload_replaces_items(scene):
    scene.load_root(Root("L2"))
    assert scene.layer_items == []
    assert scene.root.location_id == "L2"
    assert scene.sceneRect() == QRectF(0, 0, 0, 0)


def test_zoom_is_clamped(scene):
    view = FloorplanView(scene)
    for _ in range(200):
        view.zoom(ZOOM_STEP)
    assert view.current_scale() == pytest.approx(MAX_SCALE)
    for _ in range(400):
        view.zoom(1.0 / ZOOM_STEP)
    assert view.current_scale() == pytest.approx(MIN_SCALE)


def test_zoom_emits_scale(scene):
    view = FloorplanView(scene)
    seen = []
    view.scaleChanged.connect(seen.append)
    view.zoom(2.0)
    assert seen == [pytest.approx(2.0)]


def test_hud_gets_one_button_per_layer(qapp):
    s = FloorplanScene()
    s.load_root(Root("L", (Layer(), Layer(), Layer())))
    view = FloorplanView(s)
    view.sync_layers()
    assert len(view.hud.buttons) == 3
    view.hud.buttons[1].setChecked(False)
    assert not s.layer_items[1].isVisible()
    assert s.layer_items[0].isVisible()
