import math

import pytest
from hypothesis import given, strategies as st

from gfxlab.shadows import shadow_matrix
from gfxlab.surfaces import ROOM_PLANES, klein_bottle, room_shadow_matrices


def _apply(matrix, point):
    # matrix is indexed [column][row]
    x, y, z, w = point
    return tuple(
        matrix[0][row] * x + matrix[1][row] * y + matrix[2][row] * z + matrix[3][row] * w
        for row in range(4)
    )


def test_grid_shape():
    grid = klein_bottle(10, 7, 2)
    assert len(grid) == 11
    assert all(len(row) == 8 for row in grid)


def test_first_point():
    position, _ = klein_bottle(4, 4, 2)[0][0]
    assert position == pytest.approx((2.0, 0.0, 0.0))


def test_normals_are_unit():
    grid = klein_bottle(12, 12, 2)
    for row in grid:
        for _, normal in row:
            length = math.sqrt(sum(c * c for c in normal))
            assert length == pytest.approx(1.0) or length == 0.0


def test_last_row_joins_first_row_reversed():
    steps = 16
    grid = klein_bottle(steps, steps, 2)
    for j in range(steps + 1):
        assert grid[steps][j][0] == pytest.approx(grid[0][steps - j][0], abs=1e-9)


def test_columns_close_around_the_tube():
    grid = klein_bottle(8, 10, 2)
    for row in grid:
        assert row[0][0] == pytest.approx(row[-1][0], abs=1e-9)


def test_normal_perpendicular_to_surface_direction():
    steps = 400
    grid = klein_bottle(steps, 8, 2)
    i, j = 37, 3
    p0 = grid[i][j][0]
    p1 = grid[i + 1][j][0]
    tangent = [b - a for a, b in zip(p0, p1)]
    tlen = math.sqrt(sum(c * c for c in tangent))
    normal = grid[i][j][1]
    dot = sum(a * b for a, b in zip(normal, tangent)) / tlen
    assert abs(dot) < 0.05


@pytest.mark.parametrize("a, b", [(0, 5), (5, 0), (-1, 3), (2.5, 3)])
def test_invalid_steps(a, b):
    with pytest.raises(ValueError):
        klein_bottle(a, b, 2)


def test_room_matrices_names():
    matrices = room_shadow_matrices((10.0, 8.0, 10.0, 1.0))
    assert set(matrices) == {"floor", "left", "right", "back", "forward"}


def test_room_matrices_match_shadow_matrix():
    light = (10.0, 8.0, 10.0, 1.0)
    matrices = room_shadow_matrices(light)
    for name, plane in ROOM_PLANES.items():
        assert matrices[name] == shadow_matrix(plane, light)


@given(
    st.floats(min_value=1, max_value=19),
    st.floats(min_value=1, max_value=8),
    st.floats(min_value=1, max_value=19),
)
def test_points_land_on_their_planes(x, y, z):
    light = (10.0, 8.5, 10.0, 1.0)
    matrices = room_shadow_matrices(light)
    for name, plane in ROOM_PLANES.items():
        hx, hy, hz, hw = _apply(matrices[name], (x, y, z, 1.0))
        if abs(hw) < 1e-6:
            continue
        projected = (hx / hw, hy / hw, hz / hw)
        value = sum(p * c for p, c in zip(plane[:3], projected)) + plane[3]
        assert value == pytest.approx(0.0, abs=1e-6)


def test_floor_shadow_of_point_below_light():
    matrices = room_shadow_matrices((10.0, 8.0, 10.0, 1.0))
    hx, hy, hz, hw = _apply(matrices["floor"], (10.0, 4.0, 10.0, 1.0))
    assert (hx / hw, hy / hw, hz / hw) == pytest.approx((10.0, 0.0, 10.0))


def test_room_matrices_reject_short_light():
    with pytest.raises(ValueError):
        room_shadow_matrices((1.0, 2.0, 3.0))