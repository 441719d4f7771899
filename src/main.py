# main.py
"""Render one of the demo scenes to an image file.

Example:
    python src/main.py --scene cornell_box --width 300 --quality balanced --output cornell.png
"""
import argparse
import logging
import os
import random
import sys

from renderer.image_io import save_image
from renderer.raytracer import Renderer, RenderSettings
from renderer.tone_mapping import TONE_MAPPERS
from scenes import SCENES, get_scene

logger = logging.getLogger("main")

QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 20},
    "final": {"samples": 200, "bounces": 50},
}

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Offline Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random_spheres",
                        help="Scene to render (default: random_spheres)")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (default: from the scene aspect ratio)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview",
                        help="Preset for samples and bounce depth (default: preview)")
    parser.add_argument("--samples", type=int, default=None, help="Samples per pixel, overrides --quality")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum bounces, overrides --quality")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the scene and the render")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes, 0 for one per CPU (default: 1)")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="gamma",
                        help="Post-process applied before encoding (default: gamma)")
    parser.add_argument("--output", default="out.png", help="Output file path (default: out.png)")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")
    return parser.parse_args(argv)

def build_settings(args: argparse.Namespace, aspect_ratio: float) -> RenderSettings:
    quality = QUALITY_LEVELS[args.quality]
    height = args.height if args.height is not None else max(1, int(args.width / aspect_ratio))
    workers = args.workers if args.workers > 0 else (os.cpu_count() or 1)
    return RenderSettings(
        width=args.width,
        height=height,
        samples_per_pixel=args.samples if args.samples is not None else quality["samples"],
        max_depth=args.max_depth if args.max_depth is not None else quality["bounces"],
        seed=args.seed,
        workers=workers,
    )

def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    scene = get_scene(args.scene)
    try:
        settings = build_settings(args, scene.aspect_ratio)
        renderer = Renderer(settings)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    aspect_ratio = settings.width / settings.height
    world, camera = scene.build(random.Random(args.seed), aspect_ratio)
    logger.info("Scene %s built with %d objects", args.scene, len(world.objects))

    image = renderer.render(world, camera, progress=not args.quiet)
    pixels = TONE_MAPPERS[args.tone_map](image)

    try:
        save_image(pixels, args.output)
    except (OSError, ValueError) as e:
        logger.error("Failed to write %s: %s", args.output, e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
