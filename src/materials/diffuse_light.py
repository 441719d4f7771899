# materials/diffuse_light.py
from typing import Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.uv import UV
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light; the
    brightness factor scales it.
    """
    def __init__(self, emit: Union[Vector3, Texture], brightness: float = 1.0):
        super().__init__()
        self.texture = as_texture(emit)
        self.brightness = brightness

    def scatter(self, ray_in: Ray, rec, rng) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Return the emitted radiance.

        Args:
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Color: The texture color scaled by the brightness.
        """
        return self.texture.sample(UV(u, v), p) * self.brightness
