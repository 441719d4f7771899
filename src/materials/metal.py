# materials/metal.py
from typing import Optional, Union
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_unit_vector
from materials.material import Material, Scattered
from materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    The fuzz factor is clamped to [0, 1].
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Scattered]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0.0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return Scattered(scattered, self.get_texture_color(rec.uv, rec.p))

        return None  # Absorb the ray if it does not scatter forward
