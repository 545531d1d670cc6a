"""A parametric Klein bottle and the shadow matrices of a walled room."""

import math

from .shadows import shadow_matrix

# Planes (a, b, c, d) of a*x + b*y + c*z + d = 0 bounding a 20 x 20 room.
ROOM_PLANES = {
    "floor": (0.0, 1.0, 0.0, 0.0),
    "left": (-1.0, 0.0, 0.0, 20.0),
    "right": (1.0, 0.0, 0.0, 0.0),
    "back": (0.0, 0.0, 1.0, 0.0),
    "forward": (0.0, 0.0, -1.0, 20.0),
}


def _klein_point(u, v, radius):
    """Position and unit normal of the surface at parameters ``u``, ``v``."""
    cu, su = math.cos(u / 2), math.sin(u / 2)
    sv, cv = math.sin(v), math.cos(v)
    s2v, c2v = math.sin(2 * v), math.cos(2 * v)
    ring = radius + cu * sv - su * s2v

    du_ring = -su * sv / 2 - cu * s2v / 2
    xu = du_ring * math.cos(u) - ring * math.sin(u)
    yu = du_ring * math.sin(u) + ring * math.cos(u)
    zu = (cu * sv - su * s2v) / 2
    dv_ring = cu * cv - 2 * su * c2v
    xv = dv_ring * math.cos(u)
    yv = dv_ring * math.sin(u)
    zv = su * cv + 2 * cu * c2v

    nx = yu * zv - yv * zu
    ny = zu * xv - zv * xu
    nz = xu * yv - xv * yu
    norm = math.sqrt(nx * nx + ny * ny + nz * nz)
    if norm == 0:
        normal = (0.0, 0.0, 0.0)
    else:
        # The normal is flipped on half of the tube to keep it facing outwards.
        sign = -1.0 if 0 < v < math.pi else 1.0
        normal = (sign * nx / norm, sign * ny / norm, sign * nz / norm)

    position = (ring * math.cos(u), ring * math.sin(u), su * sv + cu * s2v)
    return position, normal


def klein_bottle(a_steps=50, b_steps=50, radius=2):
    """Grid of ``(position, normal)`` pairs over a Klein bottle.

    Row ``i`` holds ``u = 2*pi*i/a_steps`` and column ``j`` holds
    ``v = 2*pi*j/b_steps``; there are ``a_steps + 1`` rows of
    ``b_steps + 1`` points, so consecutive rows form quad strips.
    """
    if not isinstance(a_steps, int) or a_steps < 1:
        raise ValueError(f"a_steps must be a positive integer, got {a_steps!r}")
    if not isinstance(b_steps, int) or b_steps < 1:
        raise ValueError(f"b_steps must be a positive integer, got {b_steps!r}")
    return tuple(
        tuple(
            _klein_point(i * 2 * math.pi / a_steps, j * 2 * math.pi / b_steps, radius)
            for j in range(b_steps + 1)
        )
        for i in range(a_steps + 1)
    )


def room_shadow_matrices(light_position):
    """Shadow matrices onto the floor and the four walls of the room, by name."""
    return {
        name: shadow_matrix(plane, light_position)
        for name, plane in ROOM_PLANES.items()
    }