from hexworld.coord import RelativeHexCoord


ALL_OFFSETS = [RelativeHexCoord(q, r) for q in range(-128, 128) for r in range(-128, 128)]


def _repeat(coord, method, times):
    for _ in range(times):
        coord = method(coord)
    return coord


def test_clockwise_permutes_cubic_triple():
    coord = RelativeHexCoord(2, -3)
    x, y, z = coord.to_cubic_tuple()
    assert coord.rotate_clockwise().to_cubic_tuple() == (-z, -x, -y)


def test_counter_clockwise_permutes_cubic_triple():
    coord = RelativeHexCoord(2, -3)
    x, y, z = coord.to_cubic_tuple()
    assert coord.rotate_counter_clockwise().to_cubic_tuple() == (-y, -z, -x)


def test_clockwise_walks_the_directions():
    directions = RelativeHexCoord.DIRECTIONS
    for current, following in zip(directions, directions[1:] + directions[:1]):
        assert current.cw() == following
        assert following.ccw() == current


def test_six_clockwise_rotations_make_itself():
    for coord in ALL_OFFSETS:
        assert _repeat(coord, RelativeHexCoord.rotate_clockwise, 6) == coord


def test_six_counter_clockwise_rotations_make_itself():
    for coord in ALL_OFFSETS:
        assert _repeat(coord, RelativeHexCoord.rotate_counter_clockwise, 6) == coord


def test_three_lefts_make_three_rights_and_negate():
    for coord in ALL_OFFSETS:
        three_right = _repeat(coord, RelativeHexCoord.rotate_clockwise, 3)
        assert three_right == _repeat(coord, RelativeHexCoord.rotate_counter_clockwise, 3)
        assert three_right == -coord
