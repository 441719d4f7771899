from core.vector import Vector3, Color
from camera.camera import Camera
from geometry.constant_medium import ConstantMedium
from geometry.cube import Cube
from geometry.rect import XYRect, XZRect, YZRect
from geometry.transform import RotateY
from geometry.world import World
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from renderer.skybox import SolidSkyBox
from scenes.base import SceneConfig

BOX_SIZE = 555.0

class CornellBoxScene(SceneConfig):
    """
    The Cornell box: five walls 555 units wide, open towards the camera,
    lit only by a small lamp under the ceiling, with two rotated blocks.
    Nothing outside the box emits, so the background is black.
    """
    name = "cornell_box"
    aspect_ratio = 1.0

    def get_camera(self, aspect_ratio: float = None) -> Camera:
        look_from = Vector3(273.0, 273.0, 1300.0)
        look_at = Vector3(273.0, 273.0, 0.0)
        return Camera.look_from(
            look_from,
            look_at,
            Vector3(0.0, 1.0, 0.0),
            40.0,
            aspect_ratio or self.aspect_ratio,
            0.0,
            (look_at - look_from).length(),
            0.0,
            0.0,
        )

    def make_blocks(self, white):
        tall = RotateY(Cube(Vector3(130.0, 0.0, 100.0), Vector3(295.0, 330.0, 300.0), white), 10.0)
        short = RotateY(Cube(Vector3(265.0, 0.0, 295.0), Vector3(430.0, 165.0, 460.0), white), -5.0)
        return tall, short

    def get_world(self, rng) -> World:
        red = Lambertian(Color(0.65, 0.05, 0.05))
        white = Lambertian(Color(0.73, 0.73, 0.73))
        green = Lambertian(Color(0.12, 0.45, 0.15))
        light = DiffuseLight(Color(1.0, 1.0, 1.0), brightness=15.0)

        world = World(SolidSkyBox(Color(0.0, 0.0, 0.0)))
        full = ((0.0, 0.0), (BOX_SIZE, BOX_SIZE))
        world.add(YZRect(*full, BOX_SIZE, green))
        world.add(YZRect(*full, 0.0, red))
        world.add(XZRect(*full, BOX_SIZE, white))
        world.add(XZRect(*full, 0.0, white))
        world.add(XYRect(*full, 0.0, white))
        world.add(XZRect((213.0, 227.0), (343.0, 332.0), BOX_SIZE - 1.0, light))

        for block in self.make_blocks(white):
            world.add(block)
        return world

class CornellSmokeScene(CornellBoxScene):
    """The Cornell box with its two blocks replaced by dark and light smoke."""
    name = "cornell_smoke"

    def make_blocks(self, white):
        tall, short = super().make_blocks(white)
        return (ConstantMedium(tall, 0.01, Color(0.0, 0.0, 0.0)),
                ConstantMedium(short, 0.01, Color(1.0, 1.0, 1.0)))
