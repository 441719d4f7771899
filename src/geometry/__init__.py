from geometry.hittable import Face, HitRecord, Hittable
from geometry.sphere import Sphere, BouncingSphere
from geometry.rect import AARect, XYRect, XZRect, YZRect
from geometry.cube import Cube
from geometry.transform import RotateY
from geometry.constant_medium import ConstantMedium
from geometry.bvh import BVHNode
from geometry.world import HittableList, World

__all__ = [
    "Face", "HitRecord", "Hittable",
    "Sphere", "BouncingSphere",
    "AARect", "XYRect", "XZRect", "YZRect",
    "Cube", "RotateY", "ConstantMedium",
    "BVHNode", "HittableList", "World",
]
