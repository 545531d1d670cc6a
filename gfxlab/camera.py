"""First-person camera controls and scene animation for a walled room."""

import math
from dataclasses import dataclass, field

PI = math.pi

# The camera is kept inside the room, away from the walls, floor and ceiling.
_WALL_MIN = 0.5
_WALL_MAX = 19.5
_FLOOR_LIMIT = 0.5
_CEILING_LIMIT = 8.5
_HEIGHT_STEP = 0.25

_TURN_STEP = PI / 24
_TURN_LIMIT = 2 * PI * 23 / 24
_PITCH_STEP = 15.0
_PITCH_LIMIT = 90.0

_FRAME_INTERVAL_MS = 10
_MS_WRAP = 1 << 16


@dataclass
class Camera:
    """Camera position, heading ``phi`` (radians) and pitch ``psy`` (degrees).

    Keyboard input also switches the room light and the fog on and off.
    """

    position: list = field(default_factory=lambda: [10.0, 2.0, 10.0])
    phi: float = 0.0
    psy: float = 0.0
    speed: float = 0.25
    light_on: bool = True
    fog: bool = False

    def _move(self, sign):
        x = self.position[0] + sign * math.cos(self.phi) * self.speed
        if _WALL_MIN < x < _WALL_MAX:
            self.position[0] = x
        z = self.position[2] + sign * math.sin(self.phi) * self.speed
        if _WALL_MIN < z < _WALL_MAX:
            self.position[2] = z

    def handle_key(self, key):
        """Apply one key press; keys without a binding are ignored.

        w/s walk forward and back, a/d turn, z/x look up and down,
        space/c rise and sink, f toggles the light, t toggles the fog.
        """
        if key == "w":
            self._move(1)
        elif key == "s":
            self._move(-1)
        elif key == "a":
            self.phi -= _TURN_STEP
            if self.phi < -_TURN_LIMIT:
                self.phi = 0.0
        elif key == "d":
            self.phi += _TURN_STEP
            if self.phi > _TURN_LIMIT:
                self.phi = 0.0
        elif key == "x":
            if self.psy > -_PITCH_LIMIT:
                self.psy -= _PITCH_STEP
        elif key == "z":
            if self.psy < _PITCH_LIMIT:
                self.psy += _PITCH_STEP
        elif key == "c":
            if self.position[1] > _FLOOR_LIMIT:
                self.position[1] -= _HEIGHT_STEP
        elif key == " ":
            if self.position[1] < _CEILING_LIMIT:
                self.position[1] += _HEIGHT_STEP
        elif key == "f":
            self.light_on = not self.light_on
        elif key == "t":
            self.fog = not self.fog


@dataclass
class Animation:
    """Rotation angles of the animated objects, in degrees."""

    surface_angle: float = 0.0
    spiral_angle: float = 0.0

    def tick(self, elapsed_ms):
        """Advance one frame if more than 10 ms have passed.

        The elapsed time is taken modulo 65536, as an unsigned 16-bit
        millisecond counter would give it. Returns whether a frame advanced.
        """
        elapsed = int(elapsed_ms) % _MS_WRAP
        if elapsed <= _FRAME_INTERVAL_MS:
            return False
        self.surface_angle += 0.5
        if self.surface_angle > 180:
            self.surface_angle = -180.0
        self.spiral_angle += 1.0
        if self.spiral_angle >= 360:
            self.spiral_angle = 0.0
        return True