# src/materials/dielectric.py
import math
from typing import Union
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract, schlick
from materials.material import Material, Scattered
from materials.textures import Texture, as_texture

class Dielectric(Material):
    """
    Clear material (glass, water) that either reflects or refracts.

    The choice between the two is made per ray: total internal reflection
    forces a reflection, otherwise the Schlick reflectance is used as the
    probability of reflecting. A dielectric never absorbs a ray.
    """
    def __init__(self, ref_idx: float, albedo: Union[Color, Texture] = None):
        super().__init__()
        self.ref_idx = ref_idx
        self.texture = as_texture(albedo if albedo is not None else Color(1.0, 1.0, 1.0))
        r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
        self.r0 = r0 * r0

    def scatter(self, ray_in: Ray, rec, rng) -> Scattered:
        attenuation = self.get_texture_color(rec.uv, rec.p)

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or rng.random() < schlick(cos_theta, self.ref_idx, self.r0):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Scattered(Ray(rec.p, direction, ray_in.time), attenuation)
