from typing import Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from materials.material import Material, Scattered
from materials.textures import Texture, as_texture

class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""
    def __init__(self, albedo: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Scattered:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return Scattered(scattered, self.get_texture_color(rec.uv, rec.p))
