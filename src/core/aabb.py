# src/core/aabb.py
from core.vector import Vector3

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in ['x', 'y', 'z']:
            d = getattr(ray.direction, a)
            o = getattr(ray.origin, a)
            lo = getattr(self.minimum, a)
            hi = getattr(self.maximum, a)
            if d == 0.0:
                # Parallel to the slab: either always inside it or never.
                if o < lo or o > hi:
                    return False
                continue
            invD = 1.0 / d
            t0 = (lo - o) * invD
            t1 = (hi - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def centroid(self, axis: int) -> float:
        a = "xyz"[axis]
        return (getattr(self.minimum, a) + getattr(self.maximum, a)) * 0.5

    def extent(self, axis: int) -> float:
        a = "xyz"[axis]
        return getattr(self.maximum, a) - getattr(self.minimum, a)

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    def corners(self):
        """Yields the eight corner points of the box."""
        for x in (self.minimum.x, self.maximum.x):
            for y in (self.minimum.y, self.maximum.y):
                for z in (self.minimum.z, self.maximum.z):
                    yield Vector3(x, y, z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    @staticmethod
    def from_points(points) -> "AABB":
        points = list(points)
        return AABB(
            Vector3(min(p.x for p in points), min(p.y for p in points), min(p.z for p in points)),
            Vector3(max(p.x for p in points), max(p.y for p in points), max(p.z for p in points))
        )

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
