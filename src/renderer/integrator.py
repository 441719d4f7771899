# renderer/integrator.py
from core.ray import Ray
from core.vector import Color

# Hits closer than this are ignored so a scattered ray cannot re-hit the
# surface it just left.
T_MIN = 0.001
INFINITY = float("inf")

def ray_color(ray: Ray, world, depth: int, rng, t_min: float = T_MIN) -> Color:
    """
    Monte Carlo estimate of the radiance carried back along `ray`.

    Every bounce adds the surface emission weighted by the product of the
    attenuations so far, then continues with the scattered ray. Absorbed
    rays stop at their emission, escaping rays add the world's background,
    and after `depth` bounces nothing more is added.
    """
    radiance = Color(0.0, 0.0, 0.0)
    throughput = Color(1.0, 1.0, 1.0)
    for _ in range(depth):
        rec = world.hit(ray, t_min, INFINITY, rng)
        if rec is None:
            return radiance + throughput * world.background(ray)

        radiance = radiance + throughput * rec.material.emitted(rec.uv.u, rec.uv.v, rec.p)
        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return radiance

        throughput = throughput * scattered.attenuation
        ray = scattered.ray
    return radiance
