"""Command line entry point: render an example scene to a file or stdout."""

import argparse
import logging
import sys

import config
from ExampleSceneDef import EXAMPLES
from ImLite import Image
from logging_config import setup_logging
from ray import render_image

logger = logging.getLogger(__name__)


def render(camera, scene, write_file=None, write_stdout=False, show=False):
    """Render scene through camera and send the image to the requested outputs.

    Returns the rendered Image. OSError or ValueError from writing propagates
    to the caller.
    """
    im = render_image(camera, scene, Image(int(camera.width), int(camera.height)))
    if write_file:
        im.writeToFile(write_file)
    if write_stdout:
        sys.stdout.buffer.write(im.getPPMBytes())
        sys.stdout.buffer.flush()
    if show:
        im.show(title="raytracer")
    return im


def build_parser():
    parser = argparse.ArgumentParser(description="A raytracer")
    parser.add_argument("-f", "--fov", type=float, default=config.FOV, help="The field of view.")
    parser.add_argument("-w", "--write-file", default="", help="Write output to a file.")
    parser.add_argument("-s", "--write-stdout", action="store_true", help="Write output to stdout.")
    parser.add_argument("--width", type=int, default=config.WIDTH, help="Image width")
    parser.add_argument("--height", type=int, default=config.HEIGHT, help="Image height")
    parser.add_argument("--ambient", type=float, default=config.AMBIENT_LIGHT, help="Ambient light coefficient")
    parser.add_argument("--scene", choices=sorted(EXAMPLES), default="four_spheres", help="Scene to render")
    parser.add_argument("--accumulation", choices=config.ACCUMULATION_MODES, default="reference",
                        help="How light contributions are combined")
    parser.add_argument("--show", action="store_true", help="Show the image in a window")
    parser.add_argument("--log-level", default=None, help="Log level (default from RAYTRACER_LOG_LEVEL)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    settings = config.RenderSettings(
        width=args.width,
        height=args.height,
        fov=args.fov,
        ambient_light=args.ambient,
        accumulation=args.accumulation,
    )
    try:
        example = EXAMPLES[args.scene](settings)
    except ValueError as e:
        logger.error("invalid settings: %s", e)
        return 2

    try:
        render(example.camera, example.scene, args.write_file, args.write_stdout, args.show)
    except (OSError, ValueError) as e:
        logger.error("could not write output: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
