# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

def sphere_uv(p: Vector3) -> UV:
    """
    Surface coordinate of a point on the unit sphere: u is the angle around
    the Y axis from X=-1, v the angle from Y=-1 up to Y=+1, both in [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def center_at(self, time: float) -> Vector3:
        return self.center

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.dot(ray.direction)
        if a == 0.0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.uv = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

class BouncingSphere(Sphere):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Rays outside the window see the sphere clamped at either end.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        super().__init__(center0, radius, material)
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1

    @classmethod
    def bouncing(cls, center: Vector3, radius: float, height: float,
                 time0: float, time1: float, material) -> "BouncingSphere":
        """A sphere that rises by height over the shutter window."""
        return cls(center, center + Vector3(0.0, height, 0.0), time0, time1, radius, material)

    def center_at(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        f = (time - self.time0) / (self.time1 - self.time0)
        f = min(max(f, 0.0), 1.0)
        return self.center0 + (self.center1 - self.center0) * f

    def bounding_box(self) -> AABB:
        offset = Vector3(self.radius, self.radius, self.radius)
        box0 = AABB(self.center0 - offset, self.center0 + offset)
        box1 = AABB(self.center1 - offset, self.center1 + offset)
        return AABB.surrounding_box(box0, box1)
