import unittest
import numpy as np
from ray import *
from geometry import EPSILON
from materials import Material
from utils import normalize, red, vec


class TestSphereIntersect(unittest.TestCase):

    def confirm_hit(self, sphere, ray):
        # make sure hit is self-consistent, then return it
        t = sphere.intersect(ray)
        self.assertIsNotNone(t)
        point = ray.point_at(t)
        self.assertAlmostEqual(np.linalg.norm(point - sphere.origin), sphere.radius)
        return t

    def test_straight_on_hit(self):
        sphere = Sphere(vec([0, 0, 3]), 2.0)
        t = self.confirm_hit(sphere, Ray(vec([0, 0, 0]), vec([0, 0, 1])))
        self.assertEqual(t, 1.0)

    def test_off_axis_hit(self):
        sphere = Sphere(vec([0, 0, 3]), 2.0)
        h = 2.0 * np.sin(np.pi / 4)
        t = self.confirm_hit(sphere, Ray(vec([0, h, 0]), vec([0, 0, 1])))
        self.assertAlmostEqual(t, 3.0 - 2.0 * np.sin(np.pi / 4), places=12)

    def test_nonunit_direction(self):
        # same hit point, twice the direction, half the t
        sphere = Sphere(vec([0, 0, 3]), 2.0)
        t = self.confirm_hit(sphere, Ray(vec([0, 0, 0]), vec([0, 0, 2])))
        self.assertAlmostEqual(t, 0.5)

    def test_miss_behind_origin(self):
        sphere = Sphere(vec([0, 0, 3]), 1.0, red())
        self.assertIsNone(sphere.intersect(Ray(vec([0, 0, 5]), vec([0, 0, 1]))))

    def test_miss_starting_on_surface(self):
        # starts at the top of the sphere and grazes it
        sphere = Sphere(vec([0, 0, 3]), 1.0, red())
        self.assertIsNone(sphere.intersect(Ray(vec([0, 1, 3]), vec([0, 0, 1]))))

    def test_miss_above(self):
        sphere = Sphere(vec([0, 0, 3]), 1.0, red())
        self.assertIsNone(sphere.intersect(Ray(vec([0, 2, 3]), vec([0, 0, 1]))))

    def test_leaving_surface_is_not_a_hit(self):
        sphere = Sphere(vec([0, 0, 3]), 1.0)
        self.assertIsNone(sphere.intersect(Ray(vec([0, 0, 4]), vec([0, 0, 1]))))
        self.assertIsNone(sphere.intersect(Ray(vec([0, 1, 3]), vec([0, 1, 0]))))

    def test_tangent_hit(self):
        sphere = Sphere(vec([0, 0, 3]), 1.0)
        t = sphere.intersect(Ray(vec([0, 1, 0]), vec([0, 0, 1])))
        self.assertEqual(t, 3.0)

    def test_inside_is_a_miss(self):
        # the nearer root is behind the origin, so the far wall does not count
        sphere = Sphere(vec([0, 0, 0]), 1.0)
        self.assertIsNone(sphere.intersect(Ray(vec([0, 0, 0]), vec([1, 0, 0]))))
        self.assertIsNone(sphere.intersect(Ray(vec([0, 0, 0.5]), vec([0, 0, -3]))))

    def test_camera_inside_sphere_sees_background(self):
        cam = Camera(width=4, height=4, fov=90.0)
        scene = Scene([Sphere(vec([0, 0, 0]), 10.0, red())])
        np.testing.assert_array_equal(cam.get_pixel_color(scene, 2, 2), [127, 127, 127])

    def test_epsilon(self):
        # just inside the surface and leaving it: the exit is too close to count
        sphere = Sphere(vec([0, 0, 3]), 1.0)
        self.assertIsNone(sphere.intersect(Ray(vec([0, 0, 2 + EPSILON / 2]), vec([0, 0, -1]))))

    def test_normal(self):
        sphere = Sphere(vec([0, 0, 2]), 2.0)
        np.testing.assert_array_equal(sphere.get_normal(vec([0, 2, 2])), vec([0, 1, 0]))

    def test_invalid_radius(self):
        with self.assertRaises(ValueError):
            Sphere(vec([0, 0, 0]), 0.0)
        with self.assertRaises(ValueError):
            Sphere(vec([0, 0, 0]), -1.0)

    def test_immutable(self):
        sphere = Sphere(vec([0, 0, 2]), 2.0, red())
        with self.assertRaises(ValueError):
            sphere.origin[0] = 5.0


class TestCamera(unittest.TestCase):

    def test_corners(self):
        # square camera with a 90 degree fov spans [-1, 1] on both axes
        cam = Camera(width=16, height=16, fov=90.0)
        np.testing.assert_allclose(cam.map_pixel_to_plane(0, 0), [-1, -1, 1], atol=1e-12)
        np.testing.assert_allclose(cam.map_pixel_to_plane(16, 16), [1, 1, 1], atol=1e-12)
        np.testing.assert_allclose(cam.map_pixel_to_plane(8, 8), [0, 0, 1], atol=1e-12)

    def test_fov(self):
        fov = 60
        cam = Camera(width=32, height=32, fov=fov)
        s = np.tan(np.radians(fov / 2))
        np.testing.assert_allclose(cam.map_pixel_to_plane(0, 0), [-s, -s, 1], atol=1e-12)
        np.testing.assert_allclose(cam.map_pixel_to_plane(32, 32), [s, s, 1], atol=1e-12)

    def test_aspect(self):
        # vertical extent follows the aspect ratio
        cam = Camera(width=20, height=10, fov=90.0)
        np.testing.assert_allclose(cam.map_pixel_to_plane(0, 0), [-1, -np.tan(np.pi / 8), 1], atol=1e-12)

    def test_camera_ray(self):
        cam = Camera(vec([0, 0, -5]), 16, 16, 90.0)
        ray = cam.get_camera_ray(8, 8)
        np.testing.assert_array_equal(ray.origin, vec([0, 0, -5]))
        np.testing.assert_allclose(ray.direction, vec([0, 0, 1]), atol=1e-12)

    def test_pixel_color_miss(self):
        cam = Camera(width=16, height=16, fov=90.0)
        color = cam.get_pixel_color(Scene(), 3, 4)
        self.assertEqual(color.dtype, np.uint8)
        np.testing.assert_array_equal(color, [127, 127, 127])

    def test_pixel_color_hit(self):
        cam = Camera(width=16, height=16, fov=90.0)
        scene = Scene([Sphere(vec([0, 0, 5]), 1.0, red())], ambient_light=0.1)
        np.testing.assert_array_equal(cam.get_pixel_color(scene, 8, 8), [25, 0, 0])

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Camera(width=0, height=16)
        with self.assertRaises(ValueError):
            Camera(fov=180.0)


class TestScene(unittest.TestCase):

    def test_nearest_hit(self):
        near = Sphere(vec([0, 0, 4]), 1.0)
        far = Sphere(vec([0, 0, 10]), 1.0)
        scene = Scene([far, near])
        sphere, t = scene.trace_scene(Ray(vec([0, 0, 0]), vec([0, 0, 1])))
        self.assertIs(sphere, near)
        self.assertAlmostEqual(t, 3.0)

    def test_tie_goes_to_first(self):
        a = Sphere(vec([0, 0, 4]), 1.0, red())
        b = Sphere(vec([0, 0, 4]), 1.0, vec([0, 0, 255]))
        scene = Scene()
        scene.add_sphere(a)
        scene.add_sphere(b)
        sphere, _ = scene.trace_scene(Ray(vec([0, 0, 0]), vec([0, 0, 1])))
        self.assertIs(sphere, a)

    def test_miss(self):
        scene = Scene([Sphere(vec([0, 0, 4]), 1.0)])
        sphere, t = scene.trace_scene(Ray(vec([0, 0, 0]), vec([0, 1, 0])))
        self.assertIsNone(sphere)
        self.assertEqual(t, np.inf)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Scene(ambient_light=1.5)
        with self.assertRaises(ValueError):
            Scene(accumulation="multiplicative")


class TestShading(unittest.TestCase):

    # view ray from the origin to the top of the sphere; the reflected light
    # points away from the viewer, so there is no specular term
    point = vec([0, 1, 3])
    view = Ray(vec([0, 0, 0]), vec([0, 1, 3]))

    def scene(self, lights, material=None, accumulation="reference", ambient_light=0.1):
        scene = Scene(lights=lights, ambient_light=ambient_light, accumulation=accumulation)
        scene.add_sphere(Sphere(vec([0, 0, 3]), 1.0, red(), material))
        return scene

    def test_overhead_light(self):
        scene = self.scene([PointLight(vec([0, 7, 3]), 1.2)], Material(k_d=2.8))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        lambert = 2.8 * 1.2
        np.testing.assert_allclose(
            color,
            red() * scene.ambient_light + red() * scene.ambient_light * lambert
        )

    def test_overhead_light_additive(self):
        scene = self.scene([PointLight(vec([0, 7, 3]), 0.25)], Material(k_d=2.0), accumulation="additive")
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1 + red() * 0.5)

    def test_occluded_light(self):
        scene = self.scene([PointLight(vec([0, 7, 3]), 1.2)], Material(k_d=2.8))
        scene.add_sphere(Sphere(vec([0, 4, 3]), 1.0))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1)

    def test_occluder_beyond_light(self):
        scene = self.scene([PointLight(vec([0, 7, 3]), 1.2)], Material(k_d=2.8))
        scene.add_sphere(Sphere(vec([0, 10, 3]), 1.0))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1 * (1 + 2.8 * 1.2))

    def test_light_below_horizon(self):
        scene = self.scene([PointLight(vec([0, -7, 3]), 1.2)])
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1)

    def test_lights_are_independent(self):
        lights = [PointLight(vec([0, 7, 3]), 1.0), PointLight(vec([0, 9, 3]), 1.0)]
        scene = self.scene(lights, Material(k_d=0.5))
        scene.add_sphere(Sphere(vec([0, 8, 3]), 0.5))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        # only the nearer light reaches the point
        np.testing.assert_allclose(color, red() * 0.1 * 1.5)

    def test_specular(self):
        # viewer straight above, light straight above: full highlight
        view = Ray(vec([0, 5, 3]), vec([0, -1, 0]))
        scene = self.scene([PointLight(vec([0, 7, 3]), 1.0)], Material(k_d=0.0, k_s=1.0, p=25), accumulation="additive")
        color = scene.compute_color(view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1 + red() * 1.0)

    def test_clamp(self):
        lights = [PointLight(vec([0, 7, 3]), 5.0), PointLight(vec([1, 7, 3]), 5.0)]
        scene = Scene(lights=lights, ambient_light=1.0)
        scene.add_sphere(Sphere(vec([0, 0, 3]), 1.0, vec([200, 100, 0])))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_array_equal(color, [255, 255, 0])

    def test_sphere_light(self):
        scene = self.scene([SphereLight(vec([0, 7, 3]), 1.2, radius=0.5)], Material(k_d=2.8))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1 * (1 + 2.8 * 1.2))

        scene.add_sphere(Sphere(vec([0, 4, 3]), 1.0))
        color = scene.compute_color(self.view, self.point, scene.spheres[0])
        np.testing.assert_allclose(color, red() * 0.1)

    def test_invalid_light(self):
        with self.assertRaises(ValueError):
            PointLight(vec([0, 0, 0]), 0.0)
        with self.assertRaises(ValueError):
            SphereLight(vec([0, 0, 0]), -1.0)
        with self.assertRaises(ValueError):
            SphereLight(vec([0, 0, 0]), 1.0, radius=0.0)

    def test_sphere_light_from_inside(self):
        light = SphereLight(vec([0, 0, 0]), 1.0, radius=1.0)
        shadow_ray = Ray(vec([0, 0, 0.5]), vec([0, 0, -1]))
        self.assertAlmostEqual(light.distance_along(shadow_ray), 0.5)

    def test_sphere_light_from_outside(self):
        light = SphereLight(vec([0, 0, 0]), 1.0, radius=1.0)
        shadow_ray = Ray(vec([0, 0, 4]), vec([0, 0, -1]))
        self.assertAlmostEqual(light.distance_along(shadow_ray), 3.0)


class TestRender(unittest.TestCase):

    def make(self):
        camera = Camera(vec([0, 0, -5]), 12, 8, 75.0)
        scene = Scene(lights=[PointLight(vec([0, -5, 4]), 1.2)], ambient_light=0.1)
        scene.add_sphere(Sphere(vec([0, 0, 5]), 1.5, red()))
        return camera, scene

    def test_render_fills_canvas(self):
        camera, scene = self.make()
        im = render_image(camera, scene)
        self.assertEqual((im.width, im.height), (12, 8))
        self.assertEqual(im.get_pixel(0, 0), (127, 127, 127))
        center = im.get_pixel(6, 4)
        self.assertGreater(center[0], 0)
        self.assertEqual(center[1:], (0, 0))

    def test_render_is_deterministic(self):
        camera, scene = self.make()
        first = render_image(camera, scene).getPPMBytes()
        second = render_image(camera, scene).getPPMBytes()
        self.assertEqual(first, second)

    def test_canvas_size_mismatch(self):
        camera, scene = self.make()
        with self.assertRaises(ValueError):
            render_image(camera, scene, Image(8, 12))


if __name__ == '__main__':
    unittest.main()
