"""Tests for the render driver, including the end-to-end scenarios."""

import numpy as np
import pytest

from camera.camera import Camera
from core.vector import Color, Vector3
from geometry.sphere import Sphere
from geometry.world import World
from materials.lambertian import Lambertian
from renderer.raytracer import Renderer, RenderSettings, render_row, row_seeds
from renderer.skybox import SolidSkyBox


def unit_sphere_scene():
    """One unit sphere at the origin on a diffuse ground under the gradient sky."""
    world = World()
    world.add(Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Color(0.7, 0.3, 0.3))))
    world.add(Sphere(Vector3(0, -101, 0), 100.0, Lambertian(Color(0.5, 0.5, 0.5))))
    world.update_metadata()
    camera = Camera(Vector3(0, 0.5, 5), Vector3(0, 0, 0), Vector3(0, 1, 0),
                    vfov=40.0, aspect_ratio=1.5, focus_dist=5.0)
    return world, camera


class TestRenderSettings:
    """Tests for settings validation."""

    @pytest.mark.parametrize("field", ["width", "height", "samples_per_pixel", "max_depth", "workers"])
    def test_non_positive_rejected(self, field):
        """Every size and count must be positive."""
        settings = RenderSettings(**{field: 0})
        with pytest.raises(ValueError):
            Renderer(settings)


class TestRender:
    """Tests for Renderer.render."""

    def test_output_shape(self):
        """The image is (height, width, 3) floats."""
        world, camera = unit_sphere_scene()
        image = Renderer(RenderSettings(width=6, height=4, samples_per_pixel=2,
                                        max_depth=5, seed=1)).render(world, camera, progress=False)
        assert image.shape == (4, 6, 3)
        assert image.dtype == np.float64

    def test_sky_pixels_positive(self):
        """Sky-facing pixels are strictly positive at low sample counts."""
        world, camera = unit_sphere_scene()
        image = Renderer(RenderSettings(width=12, height=8, samples_per_pixel=2,
                                        max_depth=10, seed=2)).render(world, camera, progress=False)
        # The top row looks over the sphere into the sky.
        assert np.all(image[0] > 0.0)

    def test_same_seed_same_image(self):
        """Renders are a deterministic function of the seed."""
        world, camera = unit_sphere_scene()
        settings = RenderSettings(width=5, height=4, samples_per_pixel=3, max_depth=5, seed=42)
        a = Renderer(settings).render(world, camera, progress=False)
        b = Renderer(settings).render(world, camera, progress=False)
        np.testing.assert_array_equal(a, b)

    def test_different_seeds_differ(self):
        """Different seeds give different noise."""
        world, camera = unit_sphere_scene()
        a = Renderer(RenderSettings(width=5, height=4, samples_per_pixel=2, max_depth=5, seed=1)
                     ).render(world, camera, progress=False)
        b = Renderer(RenderSettings(width=5, height=4, samples_per_pixel=2, max_depth=5, seed=2)
                     ).render(world, camera, progress=False)
        assert not np.array_equal(a, b)

    def test_worker_count_does_not_change_image(self):
        """Rows carry their own random streams, so parallel renders match serial ones."""
        world, camera = unit_sphere_scene()
        serial = Renderer(RenderSettings(width=6, height=4, samples_per_pixel=2, max_depth=5,
                                         seed=9, workers=1)).render(world, camera, progress=False)
        parallel = Renderer(RenderSettings(width=6, height=4, samples_per_pixel=2, max_depth=5,
                                           seed=9, workers=2)).render(world, camera, progress=False)
        np.testing.assert_array_equal(serial, parallel)

    def test_black_world_renders_black(self):
        """Without lights or sky there is no radiance at all."""
        world = World(SolidSkyBox(Color(0, 0, 0)))
        world.add(Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Color(0.9, 0.9, 0.9))))
        world.update_metadata()
        camera = Camera(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0), 40.0, 1.0)
        image = Renderer(RenderSettings(width=4, height=4, samples_per_pixel=2,
                                        max_depth=5, seed=0)).render(world, camera, progress=False)
        assert np.all(image == 0.0)

    def test_variance_decreases_with_samples(self):
        """More samples per pixel give a less noisy estimate."""
        world, camera = unit_sphere_scene()
        variances = []
        for spp in (1, 4, 16):
            renders = [
                Renderer(RenderSettings(width=8, height=6, samples_per_pixel=spp,
                                        max_depth=8, seed=1000 * spp + k)).render(world, camera, progress=False)
                for k in range(6)
            ]
            variances.append(float(np.mean(np.var(np.stack(renders), axis=0))))
        assert variances[0] > variances[1] > variances[2]


class TestRows:
    """Tests for the per-row helpers."""

    def test_row_seeds_independent_of_count(self):
        """Seeds for the first rows do not depend on the image height."""
        assert row_seeds(7, 3) == row_seeds(7, 10)[:3]
        assert len(set(row_seeds(7, 10))) == 10

    def test_render_row_matches_render(self):
        """A single row rendered alone equals the same row of the full image."""
        world, camera = unit_sphere_scene()
        settings = RenderSettings(width=5, height=3, samples_per_pixel=2, max_depth=5, seed=11)
        image = Renderer(settings).render(world, camera, progress=False)
        row = render_row(world, camera, settings, 1, row_seeds(11, 3)[1])
        np.testing.assert_array_equal(image[1], row)
