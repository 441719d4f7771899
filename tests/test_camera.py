"""Unit tests for camera ray generation."""

import math
import random

from conftest import assert_vec_close
from camera.camera import Camera
from core.vector import Vector3


def make_camera(**overrides):
    params = dict(
        lookfrom=Vector3(0, 0, 0),
        lookat=Vector3(0, 0, -1),
        vup=Vector3(0, 1, 0),
        vfov=90.0,
        aspect_ratio=2.0,
        aperture=0.0,
        focus_dist=1.0,
        time0=0.0,
        shutter_duration=0.0,
    )
    params.update(overrides)
    return Camera(**params)


class TestCameraBasis:
    """Tests for the derived orthonormal basis."""

    def test_basis_is_orthonormal(self):
        """right, up and w are unit length and mutually perpendicular."""
        cam = make_camera(lookfrom=Vector3(3, 2, 5), lookat=Vector3(-1, 0, 0))
        for v in (cam.w, cam.right, cam.up):
            assert abs(v.length() - 1.0) < 1e-12
        assert abs(cam.w.dot(cam.right)) < 1e-12
        assert abs(cam.w.dot(cam.up)) < 1e-12
        assert abs(cam.right.dot(cam.up)) < 1e-12

    def test_viewport_extent(self):
        """Half height is tan(fov / 2) times the focus distance."""
        cam = make_camera(vfov=60.0, focus_dist=4.0, aspect_ratio=1.5)
        assert abs(cam.half_height - math.tan(math.radians(30.0)) * 4.0) < 1e-12
        assert abs(cam.half_width - 1.5 * cam.half_height) < 1e-12

    def test_look_from_constructor(self):
        """look_from takes the positional argument order of scene configs."""
        cam = Camera.look_from(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0),
                               40.0, 1.0, 0.1, 5.0, 0.0, 0.5)
        assert cam.lens_radius == 0.05
        assert cam.shutter_duration == 0.5


class TestGetRay:
    """Tests for get_ray."""

    def test_center_ray(self, rng):
        """(0.5, 0.5) looks straight at the target."""
        cam = make_camera()
        ray = cam.get_ray(0.5, 0.5, rng)
        assert_vec_close(ray.origin, Vector3(0, 0, 0))
        assert_vec_close(ray.direction.normalize(), Vector3(0, 0, -1))

    def test_corners(self, rng):
        """(0, 0) is the lower left corner of the viewport."""
        cam = make_camera()
        ray = cam.get_ray(0.0, 0.0, rng)
        # 90 degree fov and focus distance 1: half height 1, half width 2.
        assert_vec_close(ray.direction, Vector3(-2, -1, -1), 1e-12)
        ray = cam.get_ray(1.0, 1.0, rng)
        assert_vec_close(ray.direction, Vector3(2, 1, -1), 1e-12)

    def test_pinhole_is_deterministic(self):
        """Without aperture or shutter no randomness is consumed."""
        cam = make_camera()
        r = random.Random(1)
        cam.get_ray(0.3, 0.7, r)
        assert r.random() == random.Random(1).random()

    def test_aperture_jitters_origin_but_keeps_focus(self, rng):
        """Lens samples stay on the disk and still pass through the focus plane point."""
        cam = make_camera(aperture=0.5, focus_dist=3.0)
        target = cam.lower_left_corner + cam.horizontal * 0.25 + cam.vertical * 0.75
        origins = set()
        for _ in range(50):
            ray = cam.get_ray(0.25, 0.75, rng)
            offset = ray.origin - cam.position
            assert offset.length() <= 0.25 + 1e-12
            assert abs(offset.dot(cam.w)) < 1e-12
            assert_vec_close(ray.origin + ray.direction, target, 1e-9)
            origins.add(ray.origin.to_tuple())
        assert len(origins) > 1

    def test_shutter_time_within_window(self, rng):
        """Ray times fall inside [time0, time0 + duration]."""
        cam = make_camera(time0=1.0, shutter_duration=0.5)
        times = [cam.get_ray(0.5, 0.5, rng).time for _ in range(100)]
        assert all(1.0 <= t <= 1.5 for t in times)
        assert max(times) - min(times) > 0.1

    def test_zero_shutter_fixed_time(self, rng):
        """A closed shutter casts every ray at time0."""
        cam = make_camera(time0=0.7)
        assert cam.get_ray(0.1, 0.9, rng).time == 0.7
