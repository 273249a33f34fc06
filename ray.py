import logging

import numpy as np
from config import ACCUMULATION_MODES
from geometry import Sphere
from ImLite import Image
from utils import clamp_color, frozen, gray, length, normalize, reflect, white, zero

"""
Core implementation of the ray tracer.
"""

logger = logging.getLogger(__name__)


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.
        """
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)

    def point_at(self, t):
        """Return the point origin + t * direction."""
        return self.origin + self.direction * t


class Camera:

    def __init__(self, origin=None, width=512, height=512, fov=75.0):
        """Create a camera looking down +z from origin.

        width and height are in pixels and must match the image the camera
        renders into; fov is the horizontal field of view in degrees.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"camera size must be positive, got {width}x{height}")
        if not 0 < fov < 180:
            raise ValueError(f"field of view must be in (0, 180) degrees, got {fov}")
        self.origin = frozen(zero() if origin is None else origin)
        self.width = float(width)
        self.height = float(height)
        self.half_fov = np.radians(fov / 2.0)

    def map_pixel_to_plane(self, x, y):
        """Return the point on the image plane z = 1 that pixel (x, y) maps to.

        (0, 0) maps to the lower left corner and (width, height) to the upper
        right one; the vertical extent is scaled by the aspect ratio.
        """
        x_coord = (2.0 * x - self.width) / self.width * np.tan(self.half_fov)
        y_coord = (2.0 * y - self.height) / self.height * np.tan(self.height / self.width * self.half_fov)
        return np.array([x_coord, y_coord, 1.0], np.float64)

    def get_camera_ray(self, x, y):
        """Ray from the camera origin through pixel (x, y) on the image plane."""
        return Ray(self.origin, self.map_pixel_to_plane(x, y))

    def get_pixel_color(self, scene, x, y):
        """Trace pixel (x, y) through scene and return its 8-bit RGB color."""
        ray = self.get_camera_ray(x, y)
        hit_sphere, t = scene.trace_scene(ray)
        if hit_sphere is None:
            color = scene.bg_color
        else:
            color = scene.compute_color(ray, ray.point_at(t), hit_sphere)
        return color.astype(np.uint8)


class PointLight:

    def __init__(self, origin, intensity):
        """Create a point light at given position and with given intensity"""
        if not intensity > 0:
            raise ValueError(f"light intensity must be positive, got {intensity}")
        self.origin = frozen(origin)
        self.intensity = float(intensity)

    def __repr__(self):
        return f"PointLight(origin={self.origin.tolist()}, intensity={self.intensity})"

    def distance_along(self, shadow_ray):
        """Distance from the shadow ray's origin to the light."""
        return length(self.origin - shadow_ray.origin)

    def illuminate(self, ray, point, normal, scene, material):
        """Compute the shading at a surface point due to this light.

        Returns the scalar lambert + specular contribution, 0 when something
        in the scene sits between the point and the light.
        """
        to_light = self.origin - point
        light_vec = normalize(to_light)
        shadow_ray = Ray(point, light_vec)
        t_light = self.distance_along(shadow_ray)
        _, t_scene = scene.trace_scene(shadow_ray)
        if t_scene < t_light:
            return 0.0

        lambert = max(0.0, np.dot(normal, light_vec)) * material.k_d * self.intensity

        view_vec = normalize(-ray.direction)
        reflected = normalize(reflect(-to_light, normal))
        specular = material.k_s * max(0.0, np.dot(view_vec, reflected)) ** material.p

        return float(lambert + specular)


class SphereLight(Sphere, PointLight):
    """A light that is also a small sphere.

    The distance to the light is where the shadow ray enters the sphere, found
    with the ordinary sphere intersection. The sphere is never drawn; it only
    stands in for the light position in shadow tests. The radius must be
    positive like any other sphere; a tiny radius approximates a point light.
    """

    def __init__(self, origin, intensity, radius=0.01, color=None):
        if not intensity > 0:
            raise ValueError(f"light intensity must be positive, got {intensity}")
        Sphere.__init__(self, origin, radius, white() if color is None else color)
        self.intensity = float(intensity)

    def __repr__(self):
        return f"SphereLight(origin={self.origin.tolist()}, intensity={self.intensity}, radius={self.radius})"

    def distance_along(self, shadow_ray):
        t = self.intersect(shadow_ray)
        if t is None:
            # shadow ray starts inside the light sphere
            return PointLight.distance_along(self, shadow_ray)
        return t


class Scene:

    def __init__(self, spheres=None, lights=None, ambient_light=0.1, bg_color=None,
                 accumulation="reference"):
        """Create a scene containing the given objects and lights.

        accumulation selects how each visible light is folded into the color:
          "reference" -- color += color * contribution, the historical
                         self-boosting update every render has used so far
          "additive"  -- color += sphere.color * contribution, one separate
                         term per light on top of the ambient base
        """
        if not 0.0 <= ambient_light <= 1.0:
            raise ValueError(f"ambient light must be in [0, 1], got {ambient_light}")
        if accumulation not in ACCUMULATION_MODES:
            raise ValueError(
                f"unknown accumulation mode {accumulation!r}, expected one of {ACCUMULATION_MODES}"
            )
        self.spheres = list(spheres) if spheres is not None else []
        self.lights = list(lights) if lights is not None else []
        self.ambient_light = ambient_light
        self.bg_color = frozen(gray() if bg_color is None else bg_color)
        self.accumulation = accumulation

    def add_sphere(self, sphere):
        self.spheres.append(sphere)

    def add_light(self, light):
        self.lights.append(light)

    def trace_scene(self, ray):
        """Find the nearest sphere hit by ray.

        Returns (sphere, t), or (None, inf) when nothing is hit. On equal t
        the sphere added first wins.
        """
        t_result = np.inf
        hit_sphere = None
        for sphere in self.spheres:
            t = sphere.intersect(ray)
            if t is not None and t < t_result:
                t_result = t
                hit_sphere = sphere
        return hit_sphere, t_result

    def compute_color(self, ray, intersection_point, hit_sphere):
        """Shade intersection_point on hit_sphere as seen along ray.

        Starts from the ambient-scaled sphere color, adds each unshadowed
        light, and clamps the result to [0, 255].
        """
        base_color = hit_sphere.color
        color = base_color * self.ambient_light
        normal = hit_sphere.get_normal(intersection_point)

        for light in self.lights:
            contribution = light.illuminate(ray, intersection_point, normal, self, hit_sphere.material)
            if self.accumulation == "reference":
                color = color + color * contribution
            else:
                color = color + base_color * contribution

        return clamp_color(color)


def render_image(camera, scene, image=None):
    """
    render a ray traced image.
    """
    width, height = int(camera.width), int(camera.height)
    if image is None:
        image = Image(width, height)
    elif (image.width, image.height) != (width, height):
        raise ValueError(
            f"image is {image.width}x{image.height} but the camera renders {width}x{height}"
        )

    logger.info("rendering %dx%d image: %d spheres, %d lights",
                width, height, len(scene.spheres), len(scene.lights))
    for x in range(width):
        logger.debug("rendering column %d/%d", x + 1, width)
        for y in range(height):
            r, g, b = camera.get_pixel_color(scene, x, y)
            image.set_pixel(x, y, r, g, b)
    logger.info("finished rendering")

    return image
