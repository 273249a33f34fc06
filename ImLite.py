import io
import logging
import os

import numpy as np
from PIL import Image as PIM

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


class Image(object):
    """Image

    Fixed size 8-bit RGB canvas the renderer writes into. Pixel (x, y) is
    stored at row y, column x; rows are written top to bottom.
    """

    def __init__(self, width=None, height=None, pixels=None):
        # You can do Image(width, height) or Image(pixels=array)
        if (pixels is not None):
            pixels = np.asarray(pixels)
            if (pixels.ndim != 3 or pixels.shape[2] != 3):
                raise ValueError("expected pixels of shape (height, width, 3), got {}".format(pixels.shape))
            self._samples = np.clip(pixels, 0, 255).astype(np.uint8)
        else:
            if (width is None or height is None or width <= 0 or height <= 0):
                raise ValueError("image size must be positive, got {}x{}".format(width, height))
            self._samples = np.zeros((int(height), int(width), 3), dtype=np.uint8)

    def clone(self):
        return Image(pixels=self.pixels.copy())

    @property
    def pixels(self):
        return self._samples

    @property
    def width(self):
        return self._samples.shape[1]

    @property
    def height(self):
        return self._samples.shape[0]

    @property
    def shape(self):
        return np.asarray(self.pixels.shape)[:]

    def _inBounds(self, x, y):
        return (0 <= x < self.width) and (0 <= y < self.height)

    def set_pixel(self, x, y, r, g, b):
        """Write one pixel. Returns False, leaving the canvas untouched, if (x, y) is off the canvas."""
        if (not self._inBounds(x, y)):
            logger.warning("ignoring write to pixel (%s, %s) outside %dx%d canvas", x, y, self.width, self.height)
            return False
        self._samples[y, x] = (r, g, b)
        return True

    def get_pixel(self, x, y):
        if (not self._inBounds(x, y)):
            return None
        r, g, b = self._samples[y, x]
        return (int(r), int(g), int(b))

    def clear(self):
        self._samples[:] = 0

    def getPPMHeader(self):
        return "P6 {} {} 255\n".format(self.width, self.height).encode("ascii")

    def getRawBytes(self):
        """RGB triplets, row-major, top row first."""
        return self._samples.tobytes()

    def getPPMBytes(self):
        return self.getPPMHeader() + self.getRawBytes()

    def PIL(self):
        return PIM.fromarray(self._samples)

    def getPNGBytes(self):
        f = io.BytesIO()
        self.PIL().save(f, "PNG")
        return f.getvalue()

    def writeToFile(self, output_path, **kwargs):
        """Save to output_path; .ppm gets raw P6 bytes, anything else goes through Pillow.

        Raises ValueError for an extension Pillow cannot encode.
        """
        ext = os.path.splitext(str(output_path))[1].lower()
        if (ext == ".ppm"):
            with open(output_path, "wb") as f:
                f.write(self.getPPMBytes())
        else:
            if (ext == ""):
                kwargs.setdefault("format", "PNG")
            elif ("format" not in kwargs and ext not in PIM.registered_extensions()):
                raise ValueError("unsupported image file extension: {}".format(ext))
            self.PIL().save(output_path, **kwargs)
        logger.info("wrote %dx%d image to %s", self.width, self.height, output_path)

    @classmethod
    def FromFile(cls, path):
        with PIM.open(fp=path) as pim:
            return cls(pixels=np.array(pim.convert("RGB")))

    def show(self, title=None, block=True):
        Image.Show(self, title=title)
        plt.show(block=block)

    @staticmethod
    def Show(im, title=None, new_figure=True, axis=None, **kwargs):
        if (isinstance(im, Image)):
            imdata = im.pixels
        else:
            imdata = np.asarray(im).astype(np.uint8)

        if (new_figure and axis is None):
            if (title is not None):
                plt.figure(num=title)
            else:
                plt.figure()
        if (axis is not None):
            axis.imshow(imdata, **kwargs)
            axis.axis('off')
        else:
            plt.imshow(imdata, **kwargs)
            plt.axis('off')
        if (title):
            plt.title(title)

    def __eq__(self, other):
        if (not isinstance(other, Image)):
            return NotImplemented
        return np.array_equal(self._samples, other._samples)
