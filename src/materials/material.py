# materials/material.py
from typing import NamedTuple, Optional
from core.ray import Ray
from core.vector import Vector3, Color
from core.uv import UV

BLACK = Color(0.0, 0.0, 0.0)

class Scattered(NamedTuple):
    """Outcome of a successful scatter: the new ray and its attenuation."""
    ray: Ray
    attenuation: Color

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared between objects and never mutated after creation.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Scattered]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scattered(ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """Radiance emitted at a surface point. Black unless the material is a light."""
        return BLACK

    def get_texture_color(self, uv: UV, point: Vector3) -> Optional[Color]:
        """
        Get the color from the texture at the given UV coordinates and point.
        If no texture is set, returns None.
        """
        if self.texture is None:
            return None
        return self.texture.sample(uv, point)
