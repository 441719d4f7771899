import math
from typing import Optional, Union
from core.vector import Vector3, Color
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord, Face
from materials.isotropic import Isotropic
from materials.textures import Texture

INFINITY = float("inf")

class ConstantMedium(Hittable):
    """
    A homogeneous participating medium (fog, smoke) filling a boundary shape.

    A ray crossing the boundary travels an exponentially distributed free
    flight distance with rate `density` before scattering. If that distance
    is longer than the segment inside the boundary the ray passes through.
    The boundary must be convex for the entry/exit search to be correct.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Color, Texture]):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            raise ValueError("ConstantMedium.hit needs a random source")

        rec1 = self.boundary.hit(ray, -INFINITY, INFINITY, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, INFINITY, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        if ray_length == 0.0:
            return None
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], so the log is always defined.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1.0, 0.0, 0.0)  # arbitrary, the phase function ignores it
        rec.face = Face.INWARD
        rec.material = self.phase_function
        return rec

    def bounding_box(self) -> Optional[AABB]:
        return self.boundary.bounding_box()
