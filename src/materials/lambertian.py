# materials/lambertian.py
from typing import Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from materials.material import Material, Scattered
from materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Scattered:
        """
        Scatter a ray according to a Lambertian reflection model.
        Adding a random unit vector to the normal gives a cosine-weighted
        direction, so the attenuation is just the albedo.
        """
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can cancel the normal almost exactly.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.get_texture_color(rec.uv, rec.p)
        return Scattered(scattered, attenuation)
