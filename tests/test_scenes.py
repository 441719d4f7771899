"""Tests for the demo scene builders."""

import math
import random

import pytest

from camera.camera import Camera
from geometry.constant_medium import ConstantMedium
from geometry.sphere import BouncingSphere
from geometry.world import World
from scenes import SCENES, get_scene
from scenes.cornell_box import CornellBoxScene, CornellSmokeScene
from scenes.random_spheres import RandomSpheresScene


class TestSceneRegistry:
    """Tests for scene lookup."""

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_every_scene_builds(self, name):
        """Each registered scene returns a finalized world and a camera."""
        scene = get_scene(name)
        world, camera = scene.build(random.Random(0))
        assert isinstance(world, World)
        assert isinstance(camera, Camera)
        assert len(world.objects) > 0
        assert world.bvh_root is not None

    def test_unknown_scene(self):
        """Unknown names are a ValueError listing the choices."""
        with pytest.raises(ValueError, match="random_spheres"):
            get_scene("teapot")


class TestRandomSpheres:
    """Tests for the random sphere field."""

    def test_same_seed_same_world(self):
        """Scene construction only uses the given random stream."""
        a, _ = RandomSpheresScene().build(random.Random(5))
        b, _ = RandomSpheresScene().build(random.Random(5))
        assert [o.center.to_tuple() for o in a.objects] == [o.center.to_tuple() for o in b.objects]

    def test_bouncing_variant(self):
        """The bouncing variant moves spheres; both variants share the same shutter."""
        scene = RandomSpheresScene(bounce=True)
        world, camera = scene.build(random.Random(5))
        assert any(isinstance(o, BouncingSphere) for o in world.objects)
        assert camera.shutter_duration == 0.25
        assert RandomSpheresScene().get_camera().shutter_duration == 0.25

    def test_big_spheres_present(self):
        """The three large spheres stand on the ground in a row."""
        world, _ = RandomSpheresScene(grid=1).build(random.Random(1))
        big = [o for o in world.objects if o.radius == 1.0]
        assert sorted(o.center.x for o in big) == [-4.0, 0.0, 4.0]


class TestCornellScenes:
    """Tests for the Cornell box variants."""

    def test_camera_sees_box(self):
        """The central camera ray hits the back wall."""
        world, camera = CornellBoxScene().build(random.Random(0))
        ray = camera.get_ray(0.5, 0.5, random.Random(0))
        rec = world.hit(ray, 0.001, math.inf)
        assert rec is not None

    def test_smoke_wraps_blocks(self):
        """The smoke variant replaces both blocks with media."""
        world, _ = CornellSmokeScene().build(random.Random(0))
        media = [o for o in world.objects if isinstance(o, ConstantMedium)]
        assert len(media) == 2
