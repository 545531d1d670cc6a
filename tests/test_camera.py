import math

import pytest

from gfxlab.camera import Animation, Camera


def make_camera(**kwargs):
    params = dict(position=[10.0, 2.0, 10.0], phi=0.0, psy=0.0, speed=0.5)
    params.update(kwargs)
    return Camera(**params)


def test_walk_forward_along_heading():
    cam = make_camera()
    cam.handle_key("w")
    assert cam.position == pytest.approx([10.5, 2.0, 10.0])


def test_walk_forward_then_back_returns():
    cam = make_camera(phi=0.7)
    cam.handle_key("w")
    cam.handle_key("s")
    assert cam.position == pytest.approx([10.0, 2.0, 10.0])


def test_walk_moves_by_speed():
    cam = make_camera(phi=1.1)
    cam.handle_key("w")
    dx = cam.position[0] - 10.0
    dz = cam.position[2] - 10.0
    assert math.hypot(dx, dz) == pytest.approx(0.5)


def test_walk_blocked_by_wall():
    cam = make_camera(position=[19.4, 2.0, 10.0])
    cam.handle_key("w")
    assert cam.position[0] == 19.4


def test_walk_back_blocked_by_wall():
    cam = make_camera(position=[0.6, 2.0, 10.0])
    cam.handle_key("s")
    assert cam.position[0] == 0.6


def test_turn_left_and_right_cancel():
    cam = make_camera()
    cam.handle_key("a")
    assert cam.phi == pytest.approx(-math.pi / 24)
    cam.handle_key("d")
    assert cam.phi == pytest.approx(0.0)


def test_turn_wraps_to_zero():
    cam = make_camera(phi=-2 * math.pi * 23 / 24 + math.pi / 48)
    cam.handle_key("a")
    assert cam.phi == 0.0
    cam = make_camera(phi=2 * math.pi * 23 / 24 - math.pi / 48)
    cam.handle_key("d")
    assert cam.phi == 0.0


def test_pitch_is_limited():
    cam = make_camera()
    for _ in range(10):
        cam.handle_key("x")
    assert cam.psy == -90.0
    for _ in range(20):
        cam.handle_key("z")
    assert cam.psy == 90.0


def test_height_limits():
    cam = make_camera(position=[10.0, 0.5, 10.0])
    cam.handle_key("c")
    assert cam.position[1] == 0.5
    cam = make_camera(position=[10.0, 8.25, 10.0])
    cam.handle_key(" ")
    cam.handle_key(" ")
    assert cam.position[1] == 8.5


def test_toggles():
    cam = make_camera(light_on=True, fog=False)
    cam.handle_key("f")
    cam.handle_key("t")
    assert (cam.light_on, cam.fog) == (False, True)
    cam.handle_key("f")
    cam.handle_key("t")
    assert (cam.light_on, cam.fog) == (True, False)


def test_unknown_key_changes_nothing():
    cam = make_camera()
    before = (list(cam.position), cam.phi, cam.psy, cam.light_on, cam.fog)
    cam.handle_key("q")
    assert (cam.position, cam.phi, cam.psy, cam.light_on, cam.fog) == before


def test_tick_waits_for_interval():
    anim = Animation()
    assert anim.tick(5) is False
    assert anim.tick(10) is False
    assert (anim.surface_angle, anim.spiral_angle) == (0.0, 0.0)


def test_tick_advances_angles():
    anim = Animation()
    assert anim.tick(11) is True
    assert anim.surface_angle == 0.5
    assert anim.spiral_angle == 1.0


def test_tick_wraps_angles():
    anim = Animation(surface_angle=180.0, spiral_angle=359.0)
    anim.tick(20)
    assert anim.surface_angle == -180.0
    assert anim.spiral_angle == 0.0


def test_tick_negative_elapsed_wraps_like_unsigned_counter():
    anim = Animation()
    assert anim.tick(-1) is True
    assert anim.spiral_angle == 1.0


def test_surface_angle_stays_in_range():
    anim = Animation()
    for _ in range(2000):
        anim.tick(50)
        assert -180.0 <= anim.surface_angle <= 180.0
        assert 0.0 <= anim.spiral_angle < 360.0