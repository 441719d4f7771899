# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera placed at `lookfrom`, aimed at `lookat`.

    Rays start on a disk of diameter `aperture` around the eye and pass
    through the viewport placed at `focus_dist`, so only that plane is sharp.
    Each ray carries a time drawn uniformly from the shutter window
    [time0, time0 + shutter_duration].
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, shutter_duration: float = 0.0):
        self.position = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov  # vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.shutter_duration = shutter_duration
        self.update_camera()

    @classmethod
    def look_from(cls, lookfrom: Vector3, lookat: Vector3, vup: Vector3, vfov: float,
                  aspect_ratio: float, aperture: float, focus_dist: float,
                  time0: float, shutter_duration: float) -> "Camera":
        return cls(lookfrom, lookat, vup, vfov, aspect_ratio, aperture,
                   focus_dist, time0, shutter_duration)

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # w points backwards, away from the scene.
        self.w = (self.position - self.lookat).normalize()
        self.right = self.vup.cross(self.w).normalize()
        self.up = self.w.cross(self.right)
        self.forward = -self.w

        half_height = math.tan(math.radians(self.vfov) / 2) * self.focus_dist
        half_width = self.aspect_ratio * half_height
        self.half_width = half_width
        self.half_height = half_height

        self.horizontal = self.right * (2.0 * half_width)
        self.vertical = self.up * (2.0 * half_height)

        self.lower_left_corner = (self.position -
                                  self.right * half_width -
                                  self.up * half_height -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Generates the ray through image-plane coordinate (s, t), both in
        [0, 1] with (0, 0) at the lower left corner.
        """
        time = self.time0
        if self.shutter_duration > 0:
            time += rng.uniform(0.0, self.shutter_duration)

        ray_origin = self.position
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            ray_origin = ray_origin + self.right * rd.x + self.up * rd.y

        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction, time)
