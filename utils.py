import numpy as np

"""
Vector helpers. A vector is a float64 NumPy array of length 3, used for
positions, directions and colors (channels in [0, 255]).
"""


def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)


def frozen(v):
    """Return a read-only float64 copy of v."""
    a = vec(v)
    a.setflags(write=False)
    return a


def zero():
    return vec([0, 0, 0])


def dot(u, v):
    """Return the dot product of u and v as a Python float."""
    return float(np.dot(u, v))


def length(v):
    """Return the Euclidean length of v."""
    return float(np.linalg.norm(v))


def normalize(v):
    """Return a unit vector in the direction of the vector v.

    A zero-length v has no direction; the result is then all NaN (NumPy
    emits a RuntimeWarning) and the NaNs propagate through later math.
    """
    return v / np.linalg.norm(v)


def inverse(v):
    """Return the negated vector."""
    return -v


def reflect(v, n):
    """Reflect v about the plane with unit normal n."""
    return v - 2 * np.dot(v, n) * n


def angle(u, v):
    """Return the angle in radians between u and v."""
    cos_theta = np.dot(normalize(u), normalize(v))
    return float(np.arccos(np.clip(cos_theta, -1.0, 1.0)))


def clamp_color(c):
    """Clip every channel of c to the displayable [0, 255] range."""
    return np.clip(c, 0.0, 255.0)


# named colors, 0-255 per channel
def red():
    return vec([255, 0, 0])


def green():
    return vec([0, 255, 0])


def blue():
    return vec([0, 0, 255])


def purple():
    return vec([255, 0, 255])


def yellow():
    return vec([255, 255, 0])


def orange():
    return vec([255, 153, 0])


def white():
    return vec([255, 255, 255])


def gray():
    return vec([127, 127, 127])
