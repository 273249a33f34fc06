import io
import os
import tempfile
import unittest
from unittest import mock

import cli
from config import RenderSettings
from ExampleSceneDef import FourSpheresExample, SphereLightExample
from ImLite import Image


class TestExamples(unittest.TestCase):

    def test_four_spheres(self):
        example = FourSpheresExample(RenderSettings(width=16, height=16))
        self.assertEqual(len(example.scene.spheres), 4)
        self.assertEqual([l.intensity for l in example.scene.lights], [1.2, 1.9, 1.5])
        im = example.render()
        self.assertEqual((im.width, im.height), (16, 16))

    def test_sphere_light(self):
        example = SphereLightExample(RenderSettings(width=8, height=8, accumulation="additive"))
        self.assertEqual(example.scene.accumulation, "additive")
        self.assertEqual(len(example.scene.lights), 1)

    def test_render_to_file(self):
        example = FourSpheresExample(RenderSettings(width=8, height=8))
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "scene.png")
            im = example.render(path)
            self.assertEqual(Image.FromFile(path), im)

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            FourSpheresExample(RenderSettings(ambient_light=2.0))
        with self.assertRaises(ValueError):
            RenderSettings(accumulation="nope").validate()


class TestMain(unittest.TestCase):

    def setUp(self):
        # keep the root logger as the test runner configured it
        patcher = mock.patch("cli.setup_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_write_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.ppm")
            status = cli.main(["--width", "8", "--height", "6", "-f", "90", "-w", path])
            self.assertEqual(status, 0)
            with open(path, "rb") as f:
                data = f.read()
            self.assertTrue(data.startswith(b"P6 8 6 255\n"))
            self.assertEqual(len(data), len(b"P6 8 6 255\n") + 8 * 6 * 3)

    def test_write_stdout(self):
        buffer = io.BytesIO()
        fake_stdout = mock.Mock()
        fake_stdout.buffer = buffer
        with mock.patch("sys.stdout", fake_stdout):
            status = cli.main(["--width", "4", "--height", "4", "-s", "--scene", "sphere_light"])
        self.assertEqual(status, 0)
        self.assertTrue(buffer.getvalue().startswith(b"P6 4 4 255\n"))

    def test_unwritable_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "missing", "out.ppm")
            with self.assertLogs("cli", level="ERROR"):
                status = cli.main(["--width", "4", "--height", "4", "-w", path])
        self.assertEqual(status, 1)

    def test_unknown_extension(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.xyz")
            with self.assertLogs("cli", level="ERROR") as logs:
                status = cli.main(["--width", "4", "--height", "4", "-w", path])
        self.assertEqual(status, 1)
        self.assertIn(".xyz", logs.output[0])

    def test_invalid_fov(self):
        with self.assertLogs("cli", level="ERROR"):
            self.assertEqual(cli.main(["--fov", "200", "--width", "4", "--height", "4"]), 2)

    def test_same_output_twice(self):
        with tempfile.TemporaryDirectory() as d:
            paths = [os.path.join(d, name) for name in ("a.ppm", "b.ppm")]
            for path in paths:
                cli.main(["--width", "10", "--height", "10", "-w", path])
            with open(paths[0], "rb") as a, open(paths[1], "rb") as b:
                self.assertEqual(a.read(), b.read())


if __name__ == '__main__':
    unittest.main()
