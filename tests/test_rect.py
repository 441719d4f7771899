"""Unit tests for axis-aligned rects, cubes and the Y rotation wrapper."""

import math

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.vector import Vector3
from geometry.cube import Cube
from geometry.hittable import Face
from geometry.rect import XYRect, XZRect, YZRect
from geometry.transform import RotateY


class TestRects:
    """Tests for XY, XZ and YZ rects."""

    def test_xy_hit(self, gray):
        """A ray along -z hits an XY rect inside its extent."""
        rect = XYRect((0, 0), (2, 2), -1.0, gray)
        rec = rect.hit(Ray(Vector3(1, 1, 3), Vector3(0, 0, -1)), 0.001, math.inf)
        assert abs(rec.t - 4.0) < 1e-12
        assert_vec_close(rec.p, Vector3(1, 1, -1))
        assert_vec_close(rec.normal, Vector3(0, 0, 1))
        assert rec.face is Face.INWARD
        assert abs(rec.uv.u - 0.5) < 1e-12
        assert abs(rec.uv.v - 0.5) < 1e-12

    def test_outside_extent_misses(self, gray):
        """Hitting the plane outside the rect is a miss."""
        rect = XZRect((0, 0), (1, 1), 0.0, gray)
        assert rect.hit(Ray(Vector3(2, 1, 0.5), Vector3(0, -1, 0)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self, gray):
        """A ray parallel to the plane never hits it."""
        rect = YZRect((0, 0), (1, 1), 0.0, gray)
        assert rect.hit(Ray(Vector3(0, 0.5, 0.5), Vector3(0, 1, 0)), 0.001, math.inf) is None

    def test_back_face(self, gray):
        """Approaching from the negative side flips the normal."""
        rect = YZRect((0, 0), (1, 1), 0.0, gray)
        rec = rect.hit(Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0)), 0.001, math.inf)
        assert rec.face is Face.OUTWARD
        assert_vec_close(rec.normal, Vector3(-1, 0, 0))

    def test_bounding_box_has_thickness(self, gray):
        """The box is padded along the fixed axis."""
        box = XZRect((0, 0), (1, 1), 5.0, gray).bounding_box()
        assert box.minimum.y < 5.0 < box.maximum.y
        assert box.minimum.x == 0 and box.maximum.z == 1

    def test_empty_extent_rejected(self, gray):
        """A rect with an inverted extent is rejected."""
        with pytest.raises(ValueError):
            XYRect((1, 0), (0, 1), 0.0, gray)


class TestCube:
    """Tests for the six-sided box."""

    @pytest.mark.parametrize("origin,direction,expected_t,normal", [
        (Vector3(0.5, 0.5, 5), Vector3(0, 0, -1), 4.0, Vector3(0, 0, 1)),
        (Vector3(0.5, 0.5, -5), Vector3(0, 0, 1), 5.0, Vector3(0, 0, -1)),
        (Vector3(0.5, -5, 0.5), Vector3(0, 1, 0), 5.0, Vector3(0, -1, 0)),
        (Vector3(-5, 0.5, 0.5), Vector3(1, 0, 0), 5.0, Vector3(-1, 0, 0)),
    ])
    def test_nearest_face_from_outside(self, gray, origin, direction, expected_t, normal):
        """The closest side wins and every outside hit is a front face."""
        cube = Cube(Vector3(0, 0, 0), Vector3(1, 1, 1), gray)
        rec = cube.hit(Ray(origin, direction), 0.001, math.inf)
        assert abs(rec.t - expected_t) < 1e-12
        assert_vec_close(rec.normal, normal)
        assert rec.face is Face.INWARD

    def test_from_inside_is_back_face(self, gray):
        """Leaving the cube hits a back face."""
        cube = Cube(Vector3(0, 0, 0), Vector3(1, 1, 1), gray)
        rec = cube.hit(Ray(Vector3(0.5, 0.5, 0.5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.face is Face.OUTWARD
        assert abs(rec.t - 0.5) < 1e-12

    def test_corners_in_any_order(self, gray):
        """Opposite corners may be given in any order."""
        cube = Cube(Vector3(1, 1, 1), Vector3(0, 0, 0), gray)
        assert cube.bounding_box().minimum == Vector3(0, 0, 0)


class TestRotateY:
    """Tests for the rotation wrapper."""

    def test_zero_angle_is_identity(self, gray):
        """Rotating by zero changes nothing."""
        cube = Cube(Vector3(0, 0, 0), Vector3(1, 1, 1), gray)
        ray = Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1))
        plain = cube.hit(ray, 0.001, math.inf)
        rotated = RotateY(cube, 0.0).hit(ray, 0.001, math.inf)
        assert abs(plain.t - rotated.t) < 1e-12
        assert_vec_close(plain.normal, rotated.normal)

    def test_quarter_turn_moves_object(self, gray):
        """A 90 degree turn maps +x to -z."""
        cube = Cube(Vector3(2, -0.5, -0.5), Vector3(3, 0.5, 0.5), gray)
        rotated = RotateY(cube, 90.0)
        # The cube now sits around z = -2.5.
        assert rotated.hit(Ray(Vector3(2.5, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf) is None
        rec = rotated.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert abs(rec.p.z - (-2.0)) < 1e-9
        assert_vec_close(rec.normal, Vector3(0, 0, 1), 1e-9)

    def test_bounding_box_rotated(self, gray):
        """The box of a rotated object encloses its rotated corners."""
        cube = Cube(Vector3(2, -0.5, -0.5), Vector3(3, 0.5, 0.5), gray)
        box = RotateY(cube, 90.0).bounding_box()
        assert abs(box.minimum.z - (-3.0)) < 1e-9
        assert abs(box.maximum.z - (-2.0)) < 1e-9
        assert abs(box.minimum.x - (-0.5)) < 1e-9
