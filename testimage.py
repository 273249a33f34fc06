import os
import tempfile
import unittest
import numpy as np
from PIL import Image as PIM
from ImLite import Image


class TestImage(unittest.TestCase):

    def test_new_is_black(self):
        im = Image(4, 3)
        self.assertEqual((im.width, im.height), (4, 3))
        self.assertEqual(im.pixels.shape, (3, 4, 3))
        self.assertEqual(im.get_pixel(3, 2), (0, 0, 0))

    def test_set_pixel(self):
        im = Image(4, 3)
        self.assertTrue(im.set_pixel(1, 2, 10, 20, 30))
        self.assertEqual(im.get_pixel(1, 2), (10, 20, 30))
        np.testing.assert_array_equal(im.pixels[2, 1], [10, 20, 30])

    def test_out_of_bounds(self):
        im = Image(4, 3)
        before = im.pixels.copy()
        with self.assertLogs("ImLite", level="WARNING"):
            self.assertFalse(im.set_pixel(4, 0, 255, 255, 255))
            self.assertFalse(im.set_pixel(0, 3, 255, 255, 255))
            self.assertFalse(im.set_pixel(-1, 0, 255, 255, 255))
        np.testing.assert_array_equal(im.pixels, before)
        self.assertIsNone(im.get_pixel(4, 0))

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            Image(0, 3)
        with self.assertRaises(ValueError):
            Image(pixels=np.zeros((2, 2)))

    def test_ppm_bytes(self):
        im = Image(2, 2)
        im.set_pixel(1, 0, 1, 2, 3)
        im.set_pixel(0, 1, 4, 5, 6)
        data = im.getPPMBytes()
        self.assertTrue(data.startswith(b"P6 2 2 255\n"))
        self.assertEqual(data[len(b"P6 2 2 255\n"):], bytes([0, 0, 0, 1, 2, 3, 4, 5, 6, 0, 0, 0]))

    def test_write_ppm(self):
        im = Image(3, 2)
        im.set_pixel(2, 1, 9, 8, 7)
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.ppm")
            im.writeToFile(path)
            with open(path, "rb") as f:
                self.assertEqual(f.read(), im.getPPMBytes())

    def test_write_unknown_extension(self):
        im = Image(3, 2)
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.xyz")
            with self.assertRaises(ValueError):
                im.writeToFile(path)
            self.assertFalse(os.path.exists(path))

    def test_write_png(self):
        im = Image(3, 2)
        im.set_pixel(2, 1, 9, 8, 7)
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.png")
            im.writeToFile(path)
            with PIM.open(path) as pim:
                self.assertEqual(pim.size, (3, 2))
                self.assertEqual(pim.mode, "RGB")
            self.assertEqual(Image.FromFile(path), im)

    def test_png_bytes(self):
        im = Image(3, 2)
        self.assertTrue(im.getPNGBytes().startswith(b"\x89PNG"))

    def test_clone_is_independent(self):
        im = Image(2, 2)
        copy = im.clone()
        copy.set_pixel(0, 0, 1, 1, 1)
        self.assertEqual(im.get_pixel(0, 0), (0, 0, 0))
        self.assertNotEqual(im, copy)


if __name__ == '__main__':
    unittest.main()
