# renderer/skybox.py
import math
import numpy as np
from PIL import Image
from core.vector import Vector3, Color
from core.ray import Ray

class SkyBox:
    """Background radiance seen by rays that escape the scene."""
    def color(self, ray: Ray) -> Color:
        raise NotImplementedError("color() must be implemented by skybox subclasses.")

class SolidSkyBox(SkyBox):
    """The same color in every direction."""
    def __init__(self, color: Color):
        self._color = color

    def color(self, ray: Ray) -> Color:
        return self._color

class ColorGradientSkyBox(SkyBox):
    """
    Vertical gradient: blends from `low` (looking straight down) to
    `high` (looking straight up) by the Y component of the unit direction.
    """
    def __init__(self, low: Color = None, high: Color = None):
        self.low = low if low is not None else Color(1.0, 1.0, 1.0)
        self.high = high if high is not None else Color(0.5, 0.7, 1.0)

    def color(self, ray: Ray) -> Color:
        unit = ray.direction.normalize()
        t = 0.5 * (unit.y + 1.0)
        return self.low * (1.0 - t) + self.high * t

def direction_to_equirect_uv(direction: Vector3):
    """
    Convert a normalized 3D direction to equirectangular (u, v), both in
    [0, 1], with v = 0 straight up.
    """
    phi = math.atan2(-direction.z, direction.x)
    if phi < 0.0:
        phi += 2.0 * math.pi
    theta = math.acos(max(-1.0, min(1.0, direction.y)))
    return phi / (2.0 * math.pi), theta / math.pi

def generate_gradient_env_map(width=512, height=256,
                              zenith_color=(0.2, 0.4, 0.8), horizon_color=(1.0, 0.8, 0.6)):
    """
    Generate a gradient environment map.
    Interpolates vertically between a zenith color and a horizon color.

    Args:
        width (int): The width of the generated environment map.
        height (int): The height of the generated environment map.

    Returns:
        np.ndarray: A (height x width x 3) array in float32 (values in [0,1]).
    """
    zenith = np.asarray(zenith_color, dtype=np.float32)
    horizon = np.asarray(horizon_color, dtype=np.float32)
    # t goes from 0 at the top to 1 at the bottom
    t = np.linspace(0.0, 1.0, height, dtype=np.float32)[:, None, None]
    rows = (1.0 - t) * zenith + t * horizon
    return np.broadcast_to(rows, (height, width, 3)).copy()

class EnvironmentMapSkyBox(SkyBox):
    """Background looked up in an equirectangular (height, width, 3) radiance map."""
    def __init__(self, env_map: np.ndarray, intensity: float = 1.0):
        env_map = np.asarray(env_map, dtype=np.float32)
        if env_map.ndim != 3 or env_map.shape[2] != 3:
            raise ValueError(f"Environment map must have shape (h, w, 3), got {env_map.shape}")
        self.env_map = env_map
        self.height, self.width = env_map.shape[:2]
        self.intensity = intensity

    @classmethod
    def from_image(cls, path: str, intensity: float = 1.0) -> "EnvironmentMapSkyBox":
        with Image.open(path) as img:
            return cls(np.asarray(img.convert('RGB'), dtype=np.float32) / 255.0, intensity)

    def color(self, ray: Ray) -> Color:
        u, v = direction_to_equirect_uv(ray.direction.normalize())
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)
        r, g, b = self.env_map[y, x]
        return Color(float(r), float(g), float(b)) * self.intensity
