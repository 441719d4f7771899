"""Shared fixtures for the path tracer tests."""

import random

import pytest

from core.vector import Color, Vector3
from materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """A seeded random stream so every test is reproducible."""
    return random.Random(1234)


@pytest.fixture
def gray():
    """A mid-gray diffuse material."""
    return Lambertian(Color(0.5, 0.5, 0.5))


def assert_vec_close(a: Vector3, b: Vector3, tol: float = 1e-9):
    assert abs(a.x - b.x) < tol, f"{a} != {b}"
    assert abs(a.y - b.y) < tol, f"{a} != {b}"
    assert abs(a.z - b.z) < tol, f"{a} != {b}"
