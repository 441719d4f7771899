# src/geometry/world.py
import logging
from typing import Optional, List
from core.aabb import AABB
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode
from renderer.skybox import SkyBox, ColorGradientSkyBox

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects tested one after another; the closest hit wins.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box()
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

DEFAULT_SKYBOX = ColorGradientSkyBox()

class World(HittableList):
    """
    Every object of a scene plus the skybox seen by escaping rays.

    Call update_metadata() once the scene is populated: it builds the BVH
    and the aggregate bounding box. Until then, and after any later add(),
    hits fall back to a linear scan over the objects.
    """
    def __init__(self, skybox: Optional[SkyBox] = None):
        super().__init__()
        self.skybox = skybox
        self.bvh_root = None
        self.box = None

    def add(self, obj: Hittable):
        super().add(obj)
        self._invalidate()

    def clear(self):
        super().clear()
        self._invalidate()

    def set_skybox(self, skybox: Optional[SkyBox]):
        self.skybox = skybox

    def _invalidate(self):
        self.bvh_root = None
        self.box = None

    def update_metadata(self):
        """Finalize derived data (bounds, acceleration structure) before rendering."""
        self._invalidate()
        if len(self.objects) == 0:
            logger.debug("World is empty, nothing to accelerate")
            return
        self.box = super().bounding_box()
        if self.box is None:
            logger.warning("An object has no bounding box; using a linear scan")
            return
        self.bvh_root = BVHNode(self.objects)
        logger.debug("Built BVH over %d objects, depth %d", len(self.objects), self.bvh_root.depth())

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max, rng)
        return super().hit(ray, t_min, t_max, rng)

    def bounding_box(self) -> Optional[AABB]:
        if self.box is not None:
            return self.box
        return super().bounding_box()

    def background(self, ray: Ray) -> Color:
        skybox = self.skybox if self.skybox is not None else DEFAULT_SKYBOX
        return skybox.color(ray)
