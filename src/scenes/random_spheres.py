from core.vector import Vector3, Color
from camera.camera import Camera
from geometry.sphere import Sphere, BouncingSphere
from geometry.world import World
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, SolidTexture
from scenes.base import SceneConfig

class RandomSpheresScene(SceneConfig):
    """
    A checkered ground covered with small random spheres and three large
    ones. With bounce=True the diffuse spheres move up during the shutter
    window and come out motion blurred.
    """
    name = "random_spheres"
    aspect_ratio = 1.5

    def __init__(self, bounce: bool = False, grid: int = 11):
        self.bounce = bounce
        self.grid = grid

    def get_camera(self, aspect_ratio: float = None) -> Camera:
        look_from = Vector3(13.0, 2.0, 4.0)
        look_at = Vector3(0.0, 0.0, 0.0)
        return Camera.look_from(
            look_from,
            look_at,
            Vector3(0.0, 1.0, 0.0),
            20.0,
            aspect_ratio or self.aspect_ratio,
            0.0,
            (look_at - look_from).length(),
            0.0,
            0.25,
        )

    def get_world(self, rng) -> World:
        world = World()

        ground = Lambertian(CheckerTexture(Color(1.0, 1.0, 1.0), Color(0.2, 0.3, 0.1)))
        world.add(Sphere(Vector3(0.0, -1000.0, -1.0), 1000.0, ground))

        for i in range(-self.grid, self.grid + 1):
            for j in range(-self.grid, self.grid + 1):
                # Keep the row of large spheres clear.
                if j == 0:
                    continue
                center = Vector3(i * 1.2 + rng.uniform(-0.5, 0.5),
                                 0.3,
                                 j * 1.2 + rng.uniform(-0.5, 0.5))
                choose_mat = rng.random()
                if choose_mat < 0.65:
                    material = Lambertian(SolidTexture.random(rng))
                    if self.bounce:
                        world.add(BouncingSphere.bouncing(center, 0.3, rng.uniform(0.0, 1.0),
                                                          0.0, 0.5, material))
                        continue
                elif choose_mat < 0.9:
                    albedo = Color(rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0))
                    material = Metal(albedo, fuzz=rng.uniform(0.0, 0.5))
                else:
                    material = Dielectric(1.33)
                world.add(Sphere(center, 0.3, material))

        world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(SolidTexture.random(rng))))
        world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, Dielectric(1.33)))
        world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), fuzz=0.1)))
        return world
