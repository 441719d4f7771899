# geometry/hittable.py
from enum import Enum
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB

class Face(Enum):
    """Which side of a surface a ray arrived from."""
    INWARD = "inward"    # ray travels into the object (hit the front face)
    OUTWARD = "outward"  # ray leaves the object (hit the back face)

class HitRecord:
    """
    Records details of a ray-object intersection.
    The material is shared with the object that was hit, never copied.
    """
    __slots__ = ("p", "normal", "t", "uv", "face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, uv: UV = None, face: Face = Face.INWARD, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, always against the incoming ray
        self.t = t              # Ray parameter at intersection
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.face = face
        self.material = material

    @property
    def front_face(self) -> bool:
        return self.face is Face.INWARD

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        if ray.direction.dot(outward_normal) < 0:
            self.face = Face.INWARD
            self.normal = outward_normal
        else:
            self.face = Face.OUTWARD
            self.normal = -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        """
        Returns the closest intersection with t in (t_min, t_max), or None.
        rng is only consumed by stochastic objects such as participating media.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
