from hexworld.coord import HexCoord
from hexworld.map import HexMap, HexMapContext, Tile, TileView


def test_tile_membership():
    tile = Tile()
    assert tile.add(7)
    assert not tile.add(7)
    assert tile.contains(7)
    assert 7 in tile
    assert len(tile) == 1
    assert tile.remove(7)
    assert not tile.remove(7)
    assert list(tile) == []


def test_tile_occupants_is_a_snapshot():
    tile = Tile()
    tile.add("truck")
    snapshot = tile.occupants
    tile.add("crew")
    assert snapshot == {"truck"}
    assert tile.occupants == {"truck", "crew"}
    tile.clear()
    assert len(tile) == 0


def test_tile_view_is_read_only():
    tile = Tile()
    tile.add(1)
    view = tile.view()
    assert isinstance(view, TileView)
    assert 1 in view and view.contains(1)
    assert not hasattr(view, "add")
    tile.add(2)
    assert set(view) == {1, 2}


def test_storage_is_width_times_height():
    hex_map = HexMap(4, 3, wrap_x=False)
    assert len(hex_map) == 12
    assert hex_map.context == HexMapContext(width=4, height=3, wrap_x=False)


def test_get_tile_mut_and_get_tile_share_the_cell():
    hex_map = HexMap(4, 4, wrap_x=True)
    tile = hex_map.get_tile_mut(HexCoord(1, 2))
    assert tile is not None
    tile.add(42)
    view = hex_map.get_tile(HexCoord(1, 2))
    assert view is not None and 42 in view


def test_wrapped_lookup_reaches_repaired_cell():
    hex_map = HexMap(4, 4, wrap_x=True)
    hex_map.get_tile_mut(HexCoord(0, 2)).add("scout")
    assert "scout" in hex_map.get_tile(HexCoord(5, 2))


def test_invalid_coordinates_have_no_tile():
    hex_map = HexMap(4, 4, wrap_x=False)
    assert hex_map.get_tile(HexCoord(5, 2)) is None
    assert hex_map.get_tile_mut(HexCoord(1, 9)) is None


def test_index_past_storage_has_no_tile():
    hex_map = HexMap(4, 4, wrap_x=False)
    assert HexCoord(4, 4).idx(hex_map.context) == 20
    assert hex_map.get_tile(HexCoord(4, 4)) is None
    assert hex_map.get_tile(HexCoord(3, 3)) is not None


def test_from_context_and_iter_tiles():
    context = HexMapContext(width=2, height=2, wrap_x=False)
    hex_map = HexMap.from_context(context)
    assert hex_map.context == context
    assert [index for index, _ in hex_map.iter_tiles()] == [0, 1, 2, 3]


def test_last_column_shares_storage_with_next_row():
    hex_map = HexMap(4, 4, wrap_x=False)
    assert HexCoord(4, 0).idx(hex_map.context) == HexCoord(0, 1).idx(hex_map.context) == 4
    hex_map.get_tile_mut(HexCoord(4, 0)).add("convoy")
    assert "convoy" in hex_map.get_tile(HexCoord(0, 1))
