#
# PROJECT: lina
# MODULE: lina/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import math
import sys

from .camera import Camera
from .config import LAYOUTS, CameraConfig
from .vector import Vector2, Vector3

logger = logging.getLogger(__name__)


def parse_args(argv=None, config: CameraConfig = None):
    """CLI argument parser.  Defaults come from ``config``."""
    if config is None:
        config = CameraConfig()
    epilog = """\
examples:
  %(prog)s                                         Camera at the origin looking down +X
  %(prog)s --position 0 2 5 --yaw -90              Step back and look down -Z
  %(prog)s --pitch 30 --fov 90 --screen 1920 1080  Tilted, wide-angle, 16:9
  %(prog)s --layout column                         Column-major matrices

environment:
  LINA_FOV, LINA_NEAR, LINA_FAR, LINA_SCREEN (WxH), LINA_LAYOUT
"""
    parser = argparse.ArgumentParser(
        prog="lina-camera",
        description="Print a camera's basis, view and projection matrices",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--position", type=float, nargs=3, default=[0.0, 0.0, 0.0],
                        metavar=("X", "Y", "Z"),
                        help="Camera position (default: 0 0 0)")
    parser.add_argument("--pitch", type=float, default=0.0,
                        help="Pitch in degrees (default: 0)")
    parser.add_argument("--yaw", type=float, default=0.0,
                        help="Yaw in degrees (default: 0)")
    parser.add_argument("--fov", type=float, default=config.fov,
                        help=f"Field of view in degrees (default: {config.fov})")
    parser.add_argument("--near", type=float, default=config.near,
                        help=f"Near clipping plane (default: {config.near})")
    parser.add_argument("--far", type=float, default=config.far,
                        help=f"Far clipping plane (default: {config.far})")
    parser.add_argument("--screen", type=int, nargs=2,
                        default=[config.screen_width, config.screen_height],
                        metavar=("W", "H"),
                        help=f"Screen size (default: {config.screen_width} {config.screen_height})")
    parser.add_argument("--layout", choices=LAYOUTS, default=config.layout,
                        help=f"Matrix layout (default: {config.layout})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point for ``lina-camera``.  Returns the process exit status."""
    try:
        config = CameraConfig.from_env()
    except ValueError as e:
        print(f"Error: bad LINA_* environment value: {e}", file=sys.stderr)
        return 2

    args = parse_args(argv, config)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    camera = Camera.from_config(config,
                                position=Vector3(*args.position),
                                pitch=math.radians(args.pitch),
                                yaw=math.radians(args.yaw))
    camera.fov = args.fov
    camera.near = args.near
    camera.far = args.far
    logger.debug("camera: pitch=%.4f yaw=%.4f fov=%s layout=%s",
                 camera.pitch, camera.yaw, camera.fov, args.layout)

    forward, right, up = camera.basis()
    print(f"forward: {forward!r}")
    print(f"right:   {right!r}")
    print(f"up:      {up!r}")
    print("view:")
    print(repr(camera.view_matrix(args.layout)))
    print("projection:")
    print(repr(camera.projection_matrix(Vector2(*args.screen), args.layout)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
