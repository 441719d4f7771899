import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

class RotateY(Hittable):
    """
    Rotates a wrapped object around the Y axis by a fixed angle in degrees.

    Rays are brought into the object's local frame, intersected there, and
    the resulting point and normal are rotated back to world space.
    """
    def __init__(self, inner: Hittable, angle: float):
        self.inner = inner
        self.angle = angle
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = inner.bounding_box()
        self.box = None if box is None else AABB.from_points(self._to_world(c) for c in box.corners())

    def _to_local(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        local_ray = Ray(self._to_local(ray.origin), self._to_local(ray.direction), ray.time)
        rec = self.inner.hit(local_ray, t_min, t_max, rng)
        if rec is None:
            return None
        # A rotation keeps the normal facing against the ray, so the face is unchanged.
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> Optional[AABB]:
        return self.box
