import pytest

from rxserver.plugins.cursor_manager import DEFAULT_CURSORS, CursorManager


@pytest.fixture
def manager():
    return CursorManager()


def test_default_cursors_are_loaded(manager):
    names = {cursor.name for cursor in manager.list_cursors()}
    assert names == {
        "arrow",
        "cross",
        "hand",
        "ibeam",
        "wait",
        "resize_ns",
        "resize_ew",
        "resize_nwse",
        "resize_nesw",
    }
    assert len(manager) == len(DEFAULT_CURSORS)


def test_load_cached_cursor_returns_same_id(manager):
    first = manager.load_cursor("arrow")
    assert manager.load_cursor("arrow") == first
    assert len(manager) == len(DEFAULT_CURSORS)


def test_load_new_cursor(manager):
    default_ids = {cursor.id for cursor in manager.list_cursors()}
    cursor_id = manager.load_cursor("pirate")
    assert cursor_id not in default_ids
    cursor = manager.get_cursor(cursor_id)
    assert cursor.name == "pirate"
    assert cursor.id == cursor_id
    assert manager.is_cursor_loaded(cursor_id) is True


def test_new_cursor_shape(manager):
    cursor = manager.get_cursor(manager.load_cursor("pirate"))
    assert (cursor.width, cursor.height) == (16, 16)
    assert (cursor.hotspot_x, cursor.hotspot_y) == (8, 8)
    assert len(cursor.data) * 8 == cursor.width * cursor.height
    assert not any(cursor.data)


def test_unload_cursor(manager):
    cursor_id = manager.load_cursor("hand")
    manager.unload_cursor(cursor_id)
    assert manager.is_cursor_loaded(cursor_id) is False
    assert manager.get_cursor(cursor_id) is None
    assert "hand" not in {c.name for c in manager.list_cursors()}


def test_reload_after_unload_gets_new_id(manager):
    cursor_id = manager.load_cursor("hand")
    manager.unload_cursor(cursor_id)
    new_id = manager.load_cursor("hand")
    assert new_id != cursor_id
    assert manager.get_cursor(new_id).name == "hand"


def test_unload_unknown_is_ignored(manager):
    before = len(manager)
    manager.unload_cursor(10_000)
    assert len(manager) == before


def test_ids_are_unique(manager):
    ids = [cursor.id for cursor in manager.list_cursors()]
    assert len(ids) == len(set(ids))