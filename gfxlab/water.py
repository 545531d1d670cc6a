"""A rippling water surface with rising air bubbles."""

import random
from dataclasses import dataclass

SIZE = 128
LIFETIME = 300
BUBBLE_RADIUS = 0.05
DEFAULT_VISCOSITY = 0.004

_DISTURB_CHANCE = 25
_BUMP_REACH = 4
_BUMP_OFFSET = 3
_RISE_END = LIFETIME * 4 // 5


def _grid_coordinate(index):
    return 3.0 - 6.0 * index / (SIZE - 1)


@dataclass
class Particle:
    """An air bubble rising from one point of the surface."""

    x: float
    y: float
    z: float = 0.0
    speed: float = 0.0
    time: int = 0
    alive: bool = False


class WaterSurface:
    """Height field of 128 x 128 points driven by a damped wave equation.

    ``current`` holds the heights now and ``previous`` those one step back.
    ``positions`` and ``normals`` are the vertices of the rendered surface;
    normals are left unnormalised.
    """

    def __init__(self, seed=None):
        self._random = random.Random(seed)
        self.current = [[0.0] * SIZE for _ in range(SIZE)]
        self.previous = [[0.0] * SIZE for _ in range(SIZE)]
        self.particles = [
            [Particle(_grid_coordinate(i), _grid_coordinate(j)) for j in range(SIZE)]
            for i in range(SIZE)
        ]
        self.positions = [
            [[_grid_coordinate(i), _grid_coordinate(j + 1), 0.0] for j in range(SIZE)]
            for i in range(SIZE)
        ]
        self.normals = [
            [[0.0, 0.0, -4.0 / (SIZE - 1)] for _ in range(SIZE)]
            for _ in range(SIZE)
        ]

    def disturb(self, x, y):
        """Press a round dent into the surface and release a bubble at (x, y).

        The dent is centred three cells past (x, y) in both directions; the
        parts of it that fall outside the grid are dropped.
        """
        for value in (x, y):
            if not isinstance(value, int) or not 0 <= value < SIZE:
                raise ValueError(f"grid coordinate must be in 0..{SIZE - 1}, got {value!r}")
        for di in range(-_BUMP_REACH, _BUMP_REACH + 1):
            i = x + di + _BUMP_OFFSET
            if not 0 <= i < SIZE:
                continue
            row = self.current[i]
            for dj in range(-_BUMP_REACH, _BUMP_REACH + 1):
                j = y + dj + _BUMP_OFFSET
                if not 0 <= j < SIZE:
                    continue
                depth = max(6.0 - di * di - dj * dj, 0.0)
                row[j] -= depth * 0.005 + 0.01

        particle = self.particles[x][y]
        particle.speed = (0.02 + self._random.randrange(5) * 0.01) * 0.3
        particle.alive = True
        particle.z = 0.0
        particle.time = 0

    def step(self, viscosity=DEFAULT_VISCOSITY):
        """Advance the waves one step; with zero viscosity they never fade.

        A random point is disturbed once in 25 steps on average. The bubbles
        move too, and the spheres to draw for them are returned as
        ``(center, radius)`` pairs.
        """
        x = self._random.randrange(SIZE)
        y = self._random.randrange(SIZE)
        if self._random.randrange(_DISTURB_CHANCE) == 0:
            self.disturb(x, y)

        cur, prev = self.current, self.previous
        vs = viscosity
        for i in range(1, SIZE - 1):
            above, row, below = cur[i - 1], cur[i], cur[i + 1]
            new_row = prev[i]
            positions = self.positions[i]
            normals = self.normals[i]
            for j in range(1, SIZE - 1):
                height = row[j]
                positions[j][2] = height
                normals[j][0] = above[j] - below[j]
                normals[j][1] = row[j - 1] - row[j + 1]
                laplace = (above[j] + below[j] + row[j + 1] + row[j - 1]) * 0.25 - height
                new_row[j] = (2.0 - vs) * height - new_row[j] * (1.0 - vs) + laplace

        spheres = self.advance_particles()
        self.current, self.previous = prev, cur
        return spheres

    def advance_particles(self):
        """Age every live bubble by one tick and return the spheres to draw.

        A bubble rises for the first four fifths of its life, then swells and
        bursts when its life is over. Bubbles on the last row or column of
        the grid are left untouched.
        """
        spheres = []
        for row in self.particles[:SIZE - 1]:
            for particle in row[:SIZE - 1]:
                if not particle.alive:
                    continue
                if particle.time >= LIFETIME:
                    particle.alive = False
                    continue
                particle.time += 1
                if particle.time < _RISE_END:
                    particle.z = particle.speed * particle.time
                    spheres.append((
                        (particle.x, particle.y, -particle.z),
                        BUBBLE_RADIUS + 0.01 * particle.z,
                    ))
                else:
                    height = particle.speed * particle.time
                    growth = (height - particle.z) * 0.1
                    spheres.append((
                        (particle.x, particle.y, -height),
                        BUBBLE_RADIUS + 0.01 * particle.z + growth,
                    ))
        return spheres