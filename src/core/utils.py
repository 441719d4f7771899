# core/utils.py
import math
from typing import Optional
from core.vector import Vector3

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    a = rng.uniform(0.0, 2.0 * math.pi)
    z = rng.uniform(-1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)

def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            rng.uniform(-1, 1),
            rng.uniform(-1, 1),
            0
        )
        if p.dot(p) < 1:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(unit_v: Vector3, n: Vector3, ni_over_nt: float) -> Vector3:
    """
    Refracts a unit vector through a surface with normal n, splitting the
    result into components perpendicular and parallel to the normal.
    """
    cos_theta = min(-unit_v.dot(n), 1.0)
    r_out_perp = (unit_v + n * cos_theta) * ni_over_nt
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cos_theta: float, ref_idx: float, r0: Optional[float] = None) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    if r0 is None:
        r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
        r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
