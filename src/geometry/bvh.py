# src/geometry/bvh.py
from typing import List, Optional
from core.aabb import AABB
from core.vector import Vector3

# Leaves hold at most this many objects.
MAX_LEAF_SIZE = 2
# Relative cost of one extra traversal step against one primitive test.
TRAVERSAL_COST = 0.125
INFINITY = 1e20

def _empty_box() -> AABB:
    return AABB(Vector3(INFINITY, INFINITY, INFINITY),
                Vector3(-INFINITY, -INFINITY, -INFINITY))

class BVHNode:
    """
    Bounding volume hierarchy over a list of hittables.

    Interior nodes split their objects with a binned surface area heuristic
    (median split along the longest axis when no split pays off); leaves
    test every object they hold. The node never mutates the objects.
    """
    def __init__(self, objects: list, start: int = 0, end: Optional[int] = None, max_bin_count: int = 16):
        if end is None:
            objects = list(objects)
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        boxes = [obj.bounding_box() for obj in objects[start:end]]
        self.box = boxes[0]
        for box in boxes[1:]:
            self.box = AABB.surrounding_box(self.box, box)

        if object_span <= MAX_LEAF_SIZE:
            self._make_leaf(objects[start:end])
            return

        best_axis, best_split, best_cost = self._best_sah_split(objects, start, end, max_bin_count)

        # Fall back to a median split along the longest axis.
        if best_axis is None or best_cost >= object_span:
            best_axis = max(range(3), key=self.box.extent)
            best_split = start + object_span // 2

        # Sort along the best axis by centroid, which matches the bin order.
        objects[start:end] = sorted(objects[start:end],
                                    key=lambda obj: obj.bounding_box().centroid(best_axis))

        self.left = BVHNode(objects, start, best_split, max_bin_count)
        self.right = BVHNode(objects, best_split, end, max_bin_count)
        self.is_leaf = False
        self.objects = None

    def _make_leaf(self, objects: list):
        self.left = self.right = None
        self.is_leaf = True
        self.objects = list(objects)

    def _best_sah_split(self, objects: list, start: int, end: int, max_bin_count: int):
        best_cost = float('inf')
        best_axis = None
        best_split = start + (end - start) // 2
        total_area = self.box.surface_area()
        if total_area <= 0:
            return best_axis, best_split, best_cost

        for axis in range(3):
            centroids = [objects[i].bounding_box().centroid(axis) for i in range(start, end)]
            min_val = min(centroids)
            max_val = max(centroids)

            # Skip if the extent is too small
            if max_val - min_val < 1e-4:
                continue

            bin_count = min(max_bin_count, end - start)
            bin_width = (max_val - min_val) / bin_count
            counts = [0] * bin_count
            bin_boxes = [_empty_box() for _ in range(bin_count)]

            for i, centroid in zip(range(start, end), centroids):
                bin_idx = min(bin_count - 1, int((centroid - min_val) / bin_width))
                counts[bin_idx] += 1
                bin_boxes[bin_idx] = AABB.surrounding_box(bin_boxes[bin_idx], objects[i].bounding_box())

            # Right-to-left sweep gives the box and count of every suffix.
            right_boxes = [None] * bin_count
            right_counts = [0] * bin_count
            box, count = _empty_box(), 0
            for i in range(bin_count - 1, -1, -1):
                box = AABB.surrounding_box(box, bin_boxes[i])
                count += counts[i]
                right_boxes[i] = box
                right_counts[i] = count

            # Left-to-right sweep evaluates each split against its suffix.
            box, count = _empty_box(), 0
            for i in range(1, bin_count):
                box = AABB.surrounding_box(box, bin_boxes[i - 1])
                count += counts[i - 1]
                if count == 0 or right_counts[i] == 0:
                    continue
                cost = TRAVERSAL_COST + (count * box.surface_area() +
                                         right_counts[i] * right_boxes[i].surface_area()) / total_area
                if cost < best_cost:
                    best_cost = cost
                    best_axis = axis
                    best_split = start + count

        return best_axis, best_split, best_cost

    def hit(self, ray, t_min: float, t_max: float, rng=None):
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            hit_record = None
            for obj in self.objects:
                rec = obj.hit(ray, t_min, t_max, rng)
                if rec is not None:
                    t_max = rec.t
                    hit_record = rec
            return hit_record

        hit_left = self.left.hit(ray, t_min, t_max, rng)

        # Only accept right-hand hits closer than the left one
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self) -> List["BVHNode"]:
        if self.is_leaf:
            return [self]
        return self.left.leaves() + self.right.leaves()
