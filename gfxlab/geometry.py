"""Vertex generation for a torus, a textured torus section and a cube-map box."""

import math
from dataclasses import dataclass

# The demos this geometry belongs to use this approximation of pi.
PI = 3.1415

_CUBE_CORNERS = (
    (-0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5),
    (-0.5, 0.5, -0.5),
    (0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5),
    (-0.5, 0.5, 0.5),
    (0.5, 0.5, 0.5),
)

_CUBE_FACES = (
    (5, 4, 6, 7),
    (6, 2, 3, 7),
    (3, 1, 5, 7),
    (4, 5, 1, 0),
    (1, 3, 2, 0),
    (2, 6, 4, 0),
)


def _torus_vertex(r1, r2, phi, psi):
    normal = (
        math.cos(phi) * math.cos(psi),
        math.sin(psi),
        math.sin(phi) * math.cos(psi),
    )
    position = (
        r1 * math.cos(phi) + r2 * normal[0],
        r2 * normal[1],
        r1 * math.sin(phi) + r2 * normal[2],
    )
    return normal, position


def torus_quads(r1, r2, n1, n2):
    """Quads of a closed torus around the y axis.

    ``r1`` is the main radius, ``r2`` the tube radius; ``n1`` and ``n2`` are
    the subdivisions around each. Each quad is four ``(normal, position)``
    pairs.
    """
    quads = []
    for i in range(n1):
        i2 = i + 1 if i < n1 - 1 else 0
        phi1 = 2 * i * PI / n1
        phi2 = 2 * i2 * PI / n1
        for j in range(n2):
            j2 = j + 1 if j < n2 - 1 else 0
            psi1 = 2 * j * PI / n2
            psi2 = 2 * j2 * PI / n2
            quads.append((
                _torus_vertex(r1, r2, phi1, psi1),
                _torus_vertex(r1, r2, phi1, psi2),
                _torus_vertex(r1, r2, phi2, psi2),
                _torus_vertex(r1, r2, phi2, psi1),
            ))
    return quads


def torus_strips(r0, n, u_repeat, start, end, r1, m, v_repeat, ccw):
    """Textured triangle strips for a torus section around the z axis.

    The section runs from angle ``start`` to ``end``; equal angles give the
    whole closed torus. Each strip is a list of ``(texcoord, position)``
    pairs. ``ccw`` chooses the winding of the polygons.
    """
    if n < 1 or m < 1:
        raise ValueError("subdivision counts must be at least 1")
    closed = end == start
    if closed:
        start, end = 0.0, 2 * PI
    strips = []
    for i in range(n):
        if closed:
            i2 = i + 1 if i < n - 1 else 0
        else:
            i2 = i + 1
        angle = start + (end - start) * i / n
        angle2 = start + (end - start) * i2 / n
        xv, yv = math.cos(angle), math.sin(angle)
        xv2, yv2 = math.cos(angle2), math.sin(angle2)
        x, y = r0 * xv, r0 * yv
        x2, y2 = r0 * xv2, r0 * yv2
        strip = []
        for j in range(m + 1):
            j2 = 0 if j == m else j
            tv = r1 * math.cos(2 * j2 * PI / m)
            zv = r1 * math.sin(2 * j2 * PI / m)
            near = (x + xv * tv, y + yv * tv, zv)
            far = (x2 + xv2 * tv, y2 + yv2 * tv, zv)
            v = v_repeat * j / m
            if ccw:
                tex = (u_repeat * i / n, v)
                strip.append((tex, near))
                strip.append((tex, far))
            else:
                strip.append(((u_repeat * (i + 1) / n, v), far))
                strip.append(((u_repeat * i / n, v), near))
        strips.append(strip)
    return strips


def cube_map_quads():
    """Six faces of a unit cube centred on the origin.

    Each vertex doubles as its own cube-map texture coordinate.
    """
    return tuple(
        tuple(_CUBE_CORNERS[index] for index in face) for face in _CUBE_FACES
    )


@dataclass
class TextureScroller:
    """Texture offset that drifts diagonally and wraps around."""

    du: float = 0.0
    dv: float = 0.0
    step: float = 0.009

    def advance(self):
        """Return the current offset, then move it one step."""
        offset = (self.du, self.dv)
        self.du += self.step
        if self.du > 1:
            self.du -= 1
        self.dv += self.step
        if self.dv > 1:
            self.dv -= 1
        return offset