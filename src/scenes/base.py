from typing import Tuple
from camera.camera import Camera
from geometry.world import World

class SceneConfig:
    """Builds a populated world and a matching camera."""
    name = None
    aspect_ratio = 16.0 / 9.0

    def get_camera(self, aspect_ratio: float = None) -> Camera:
        raise NotImplementedError("get_camera() must be implemented by scene subclasses.")

    def get_world(self, rng) -> World:
        raise NotImplementedError("get_world() must be implemented by scene subclasses.")

    def build(self, rng, aspect_ratio: float = None) -> Tuple[World, Camera]:
        world = self.get_world(rng)
        world.update_metadata()
        return world, self.get_camera(aspect_ratio)
