# geometry/rect.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half thickness given to rects along their fixed axis so boxes have volume.
PAD = 1e-4

class AARect(Hittable):
    """
    A rectangle lying in a plane perpendicular to one of the coordinate axes.

    Subclasses pick the two free axes (a, b) and the fixed axis; the rect
    spans [a0, a1] x [b0, b1] at coordinate k along the fixed axis. The
    outward normal is the positive fixed axis, or the negative one with flip.
    """
    free_axes: Tuple[str, str] = None
    fixed_axis: str = None

    def __init__(self, low: Tuple[float, float], high: Tuple[float, float], k: float,
                 material, flip: bool = False):
        self.a0, self.b0 = low
        self.a1, self.b1 = high
        if self.a1 <= self.a0 or self.b1 <= self.b0:
            raise ValueError(f"Rect extent must be non-empty, got {low} to {high}")
        self.k = k
        self.material = material
        normal = {"x": 0.0, "y": 0.0, "z": 0.0}
        normal[self.fixed_axis] = -1.0 if flip else 1.0
        self.normal = Vector3(normal["x"], normal["y"], normal["z"])

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = {self.free_axes[0]: a, self.free_axes[1]: b, self.fixed_axis: k}
        return Vector3(coords["x"], coords["y"], coords["z"])

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d = getattr(ray.direction, self.fixed_axis)
        if d == 0.0:
            return None
        t = (self.k - getattr(ray.origin, self.fixed_axis)) / d
        if t <= t_min or t >= t_max:
            return None

        a_axis, b_axis = self.free_axes
        a = getattr(ray.origin, a_axis) + t * getattr(ray.direction, a_axis)
        b = getattr(ray.origin, b_axis) + t * getattr(ray.direction, b_axis)
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0), (b - self.b0) / (self.b1 - self.b0))
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return AABB(self._point(self.a0, self.b0, self.k - PAD),
                    self._point(self.a1, self.b1, self.k + PAD))

class XYRect(AARect):
    free_axes = ("x", "y")
    fixed_axis = "z"

class XZRect(AARect):
    free_axes = ("x", "z")
    fixed_axis = "y"

class YZRect(AARect):
    free_axes = ("y", "z")
    fixed_axis = "x"
