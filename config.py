"""Configuration defaults for the ray tracer, overridable from the environment."""

import os
from dataclasses import dataclass

# Logging
LOG_LEVEL = os.getenv("RAYTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv(
    "RAYTRACER_LOG_FORMAT",
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Rendering
WIDTH = int(os.getenv("RAYTRACER_WIDTH", "512"))
HEIGHT = int(os.getenv("RAYTRACER_HEIGHT", "512"))
FOV = float(os.getenv("RAYTRACER_FOV", "75.0"))
AMBIENT_LIGHT = 0.1

# Ways a light's contribution is folded into the pixel color, see Scene.
ACCUMULATION_MODES = ("reference", "additive")


@dataclass
class RenderSettings:
    width: int = WIDTH
    height: int = HEIGHT
    fov: float = FOV
    ambient_light: float = AMBIENT_LIGHT
    accumulation: str = "reference"

    def validate(self):
        """Raise ValueError if any setting is outside its valid range."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if not 0 < self.fov < 180:
            raise ValueError(f"field of view must be in (0, 180) degrees, got {self.fov}")
        if not 0.0 <= self.ambient_light <= 1.0:
            raise ValueError(f"ambient light must be in [0, 1], got {self.ambient_light}")
        if self.accumulation not in ACCUMULATION_MODES:
            raise ValueError(
                f"unknown accumulation mode {self.accumulation!r}, expected one of {ACCUMULATION_MODES}"
            )
        return self
