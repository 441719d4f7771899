# materials/textures.py
import math
import numpy as np
from PIL import Image
from core.vector import Vector3, Color
from core.uv import UV

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, p: Vector3) -> Color:
        """Sample the texture at the given surface coordinate and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def random(cls, rng) -> "SolidTexture":
        a = Vector3(rng.random(), rng.random(), rng.random())
        b = Vector3(rng.random(), rng.random(), rng.random())
        return cls(a * b)

    def sample(self, uv: UV, p: Vector3) -> Color:
        return self.color

def as_texture(value) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value

class CheckerTexture(Texture):
    """
    A solid 3D checker pattern. Space is split by the sign of
    sin(scale*x) * sin(scale*y) * sin(scale*z), so the pattern depends only
    on the hit point and not on the surface parametrisation.
    """
    def __init__(self, odd, even, scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Color:
        s = (math.sin(self.scale * p.x) *
             math.sin(self.scale * p.y) *
             math.sin(self.scale * p.z))
        if s < 0.0:
            return self.odd.sample(uv, p)
        return self.even.sample(uv, p)

class ImageTexture(Texture):
    """A texture backed by an RGB image, addressed by surface coordinate."""
    def __init__(self, data: np.ndarray):
        self.data = np.asarray(data, dtype=np.float32)
        self.height, self.width = self.data.shape[:2]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return cls(np.array(img) / 255.0)

    def sample(self, uv: UV, p: Vector3) -> Color:
        # Handle texture wrapping
        u = uv.u % 1.0
        v = 1.0 - (uv.v % 1.0)  # Flip V so v=0 is the bottom row

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Color(float(color[0]), float(color[1]), float(color[2]))
