#
# PROJECT: lina
# MODULE: lina/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import os
from dataclasses import dataclass, field

from .vector import Vector2, Vector3

logger = logging.getLogger(__name__)

LAYOUTS = ('row', 'column')


@dataclass
class CameraConfig:
    """Default camera parameters used by Camera and the lina-camera tool."""
    fov: float = 60.0
    near: float = 0.1
    far: float = 150.0
    screen_width: int = 800
    screen_height: int = 600
    layout: str = 'row'
    world_up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    cam_offset: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 1.0))

    def __post_init__(self):
        if self.layout not in LAYOUTS:
            raise ValueError(f"layout must be one of {LAYOUTS}, got {self.layout!r}")

    @property
    def screen_size(self) -> Vector2:
        return Vector2(self.screen_width, self.screen_height)

    @classmethod
    def from_env(cls) -> 'CameraConfig':
        """
        Build a config from LINA_* environment variables.

        LINA_FOV, LINA_NEAR and LINA_FAR are floats, LINA_SCREEN is "WxH",
        LINA_LAYOUT is "row" or "column".  Unset variables keep their
        defaults; malformed values raise ValueError.
        """
        env = os.environ
        kwargs = {}
        for name, key in (('fov', 'LINA_FOV'), ('near', 'LINA_NEAR'), ('far', 'LINA_FAR')):
            if key in env:
                kwargs[name] = float(env[key])

        screen = env.get('LINA_SCREEN')
        if screen:
            width, _, height = screen.lower().partition('x')
            kwargs['screen_width'] = int(width)
            kwargs['screen_height'] = int(height)

        layout = env.get('LINA_LAYOUT')
        if layout:
            kwargs['layout'] = layout.strip().lower()

        if kwargs:
            logger.debug("camera config overrides from environment: %s", kwargs)
        return cls(**kwargs)
