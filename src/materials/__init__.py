from materials.material import Material, Scattered
from materials.textures import Texture, SolidTexture, CheckerTexture, ImageTexture
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.isotropic import Isotropic

__all__ = [
    "Material", "Scattered",
    "Texture", "SolidTexture", "CheckerTexture", "ImageTexture",
    "Lambertian", "Metal", "Dielectric", "DiffuseLight", "Isotropic",
]
