import numpy as np
from materials import DEFAULT_MATERIAL
from utils import frozen, normalize, white

# Hits closer than this to the ray origin are ignored, so rays leaving a
# surface do not hit that same surface again.
EPSILON = 1e-5


class Sphere:

    def __init__(self, origin, radius, color=None, material=None):
        """Create a sphere with the given origin and radius.

        Parameters:
          origin : (3,) -- a 3D point specifying the sphere's center
          radius : float -- a Python float specifying the sphere's radius, must be > 0
          color : (3,) -- RGB surface color in [0, 255], white by default
          material : Material -- the shading coefficients of the surface
        """
        if not radius > 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.origin = frozen(origin)
        self.radius = float(radius)
        self.color = frozen(white() if color is None else color)
        self.material = DEFAULT_MATERIAL if material is None else material

    def __repr__(self):
        return f"Sphere(origin={self.origin.tolist()}, radius={self.radius}, color={self.color.tolist()})"

    def intersect(self, ray):
        """Computes the first (smallest t) intersection between a ray and this sphere.

        Parameters:
          ray : Ray -- the ray to intersect with the sphere
        Return:
          float or None -- the ray parameter of the hit, None if there is none
        """
        sphere_vec = ray.origin - self.origin
        a = np.dot(ray.direction, ray.direction)
        b = 2 * np.dot(ray.direction, sphere_vec)
        c = np.dot(sphere_vec, sphere_vec) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None
        if discriminant == 0:
            t = -b / (2 * a)
        else:
            # both roots lie on the same ray, the smaller one is met first
            disc_sqrt = np.sqrt(discriminant)
            minus = (-b - disc_sqrt) / (2 * a)
            plus = (-b + disc_sqrt) / (2 * a)
            t = min(minus, plus)
        if t < EPSILON:
            return None
        return float(t)

    def get_normal(self, point):
        """Return the outward unit normal at a point on the surface."""
        return normalize(point - self.origin)
