import ray
from config import RenderSettings
from utils import green, orange, purple, red, vec


class ExampleSceneDef(object):
    def __init__(self, camera, scene):
        self.camera = camera
        self.scene = scene

    def render(self, output_path=None):
        im = ray.render_image(self.camera, self.scene)
        if (output_path is None):
            return im
        else:
            im.writeToFile(output_path)
            return im


def _add_spheres(scene):
    scene.add_sphere(ray.Sphere(vec([0.0, 0.0, 5.0]), 1.5, red()))
    scene.add_sphere(ray.Sphere(vec([-2.5, -2.0, 8.0]), 1.0, purple()))
    scene.add_sphere(ray.Sphere(vec([2.0, 2.0, 5.0]), 1.0, orange()))
    scene.add_sphere(ray.Sphere(vec([-3.5, -5.0, 5.0]), 0.8, green()))


def FourSpheresExample(settings=None):
    """Four colored spheres lit by three point lights, seen from z = -5."""
    settings = (settings or RenderSettings()).validate()
    lights = [
        ray.PointLight(vec([0.0, -5.0, 4.0]), 1.2),
        ray.PointLight(vec([-5.0, 0.0, 4.0]), 1.9),
        ray.PointLight(vec([5.0, 0.0, 4.0]), 1.5),
    ]
    scene = ray.Scene(lights=lights, ambient_light=settings.ambient_light,
                      accumulation=settings.accumulation)
    _add_spheres(scene)
    camera = ray.Camera(vec([0.0, 0.0, -5.0]), settings.width, settings.height, settings.fov)
    return ExampleSceneDef(camera=camera, scene=scene)


def SphereLightExample(settings=None):
    """The same spheres under a single light modelled as a tiny sphere."""
    settings = (settings or RenderSettings()).validate()
    scene = ray.Scene(lights=[ray.SphereLight(vec([0.0, -5.0, 4.0]), 1.5, radius=0.1)],
                      ambient_light=settings.ambient_light,
                      accumulation=settings.accumulation)
    _add_spheres(scene)
    camera = ray.Camera(vec([0.0, 0.0, -5.0]), settings.width, settings.height, settings.fov)
    return ExampleSceneDef(camera=camera, scene=scene)


EXAMPLES = {
    "four_spheres": FourSpheresExample,
    "sphere_light": SphereLightExample,
}
