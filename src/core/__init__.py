from core.vector import Vector3, Color
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB

__all__ = ["Vector3", "Color", "Ray", "UV", "AABB"]
