# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np
from tqdm import tqdm

from renderer.integrator import ray_color, T_MIN

logger = logging.getLogger(__name__)

@dataclass
class RenderSettings:
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 16
    max_depth: int = 50
    seed: Optional[int] = None
    workers: int = 1
    t_min: float = T_MIN

    def validate(self):
        for name in ("width", "height", "samples_per_pixel", "max_depth", "workers"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

# Scene state of a worker process, set once by _init_worker.
_worker_scene = None

def _init_worker(world, camera, settings):
    global _worker_scene
    _worker_scene = (world, camera, settings)

def _render_row_in_worker(task):
    world, camera, settings = _worker_scene
    row, seed = task
    return row, render_row(world, camera, settings, row, seed)

def render_row(world, camera, settings: RenderSettings, row: int, seed: int) -> np.ndarray:
    """
    Renders one image row (row 0 is the top of the image) with its own
    random stream. Returns a (width, 3) array of averaged linear colors.
    """
    rng = random.Random(seed)
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    out = np.zeros((width, 3), dtype=np.float64)
    # Image rows go top-down while camera t goes bottom-up.
    y = height - 1 - row
    for i in range(width):
        r = g = b = 0.0
        for _ in range(spp):
            s = (i + rng.random()) / width
            t = (y + rng.random()) / height
            ray = camera.get_ray(s, t, rng)
            c = ray_color(ray, world, settings.max_depth, rng, settings.t_min)
            r += c.x
            g += c.y
            b += c.z
        out[i] = (r / spp, g / spp, b / spp)
    return out

def row_seeds(seed: Optional[int], height: int) -> list:
    """One independent seed per row, derived from the master seed."""
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]

class Renderer:
    """
    CPU path tracer driver: averages samples_per_pixel estimates per pixel
    and returns a linear (height, width, 3) float image.

    Rows are independent: each has its own random stream and its own slice
    of the output, so they can be farmed out to worker processes. The image
    depends only on the scene, the settings and the seed, not on the number
    of workers.
    """
    def __init__(self, settings: RenderSettings):
        settings.validate()
        self.settings = settings

    def render(self, world, camera, progress: bool = True) -> np.ndarray:
        settings = self.settings
        logger.info("Rendering %dx%d, %d samples per pixel, depth %d, %d worker(s)",
                    settings.width, settings.height, settings.samples_per_pixel,
                    settings.max_depth, settings.workers)
        logger.info("World contains %d objects", len(world.objects))
        start = time.perf_counter()

        image = np.zeros((settings.height, settings.width, 3), dtype=np.float64)
        tasks = list(enumerate(row_seeds(settings.seed, settings.height)))

        with tqdm(total=settings.height, desc="Rendering", unit="row", disable=not progress) as bar:
            if settings.workers == 1:
                for row, seed in tasks:
                    image[row] = render_row(world, camera, settings, row, seed)
                    bar.update(1)
            else:
                with ProcessPoolExecutor(max_workers=settings.workers,
                                         initializer=_init_worker,
                                         initargs=(world, camera, settings)) as executor:
                    for row, pixels in executor.map(_render_row_in_worker, tasks):
                        image[row] = pixels
                        bar.update(1)

        elapsed = time.perf_counter() - start
        logger.info("Rendered in %.2fs", elapsed)
        return image
