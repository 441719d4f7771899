from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.rect import XYRect, XZRect, YZRect

class Cube(Hittable):
    """Axis-aligned box between two opposite corners, built from six rects."""
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = Vector3(min(p0.x, p1.x), min(p0.y, p1.y), min(p0.z, p1.z))
        self.box_max = Vector3(max(p0.x, p1.x), max(p0.y, p1.y), max(p0.z, p1.z))
        self.material = material

        lo, hi = self.box_min, self.box_max
        self.sides = [
            XYRect((lo.x, lo.y), (hi.x, hi.y), hi.z, material),
            XYRect((lo.x, lo.y), (hi.x, hi.y), lo.z, material, flip=True),
            XZRect((lo.x, lo.z), (hi.x, hi.z), hi.y, material),
            XZRect((lo.x, lo.z), (hi.x, hi.z), lo.y, material, flip=True),
            YZRect((lo.y, lo.z), (hi.y, hi.z), hi.x, material),
            YZRect((lo.y, lo.z), (hi.y, hi.z), lo.x, material, flip=True),
        ]

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for side in self.sides:
            rec = side.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return AABB(self.box_min, self.box_max)
