#
# PROJECT: lina
# MODULE: lina/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from . import transforms
from .config import LAYOUTS, CameraConfig
from .vector import Vector3

logger = logging.getLogger(__name__)


class Camera:
    """
    Free-look camera state.

    Stores position, pitch/yaw (radians), field-of-view (degrees) and the
    near/far clip planes.  The basis and matrices are derived on demand
    through lina.transforms.
    """
    __slots__ = ('position', 'pitch', 'yaw', 'fov', 'near', 'far',
                 'world_up', 'cam_offset')

    def __init__(self, position: Vector3 = None, pitch: float = 0.0,
                 yaw: float = 0.0, fov: float = 60.0, near: float = 0.1,
                 far: float = 150.0, world_up: Vector3 = None,
                 cam_offset: Vector3 = None):
        self.position = position.copy() if position is not None else Vector3(0.0, 0.0, 0.0)
        self.pitch = pitch
        self.yaw = yaw
        self.fov = fov
        self.near = near
        self.far = far
        self.world_up = world_up if world_up is not None else Vector3(0.0, 1.0, 0.0)
        self.cam_offset = cam_offset if cam_offset is not None else Vector3(0.0, 0.0, 1.0)

    @classmethod
    def from_config(cls, config: CameraConfig, position: Vector3 = None,
                    pitch: float = 0.0, yaw: float = 0.0) -> 'Camera':
        return cls(position=position, pitch=pitch, yaw=yaw, fov=config.fov,
                   near=config.near, far=config.far,
                   world_up=config.world_up.copy(),
                   cam_offset=config.cam_offset.copy())

    def orbit(self, dyaw: float, dpitch: float):
        """Adjust yaw and pitch by delta (radians)."""
        self.yaw += dyaw
        self.pitch += dpitch
        logger.debug("camera orbit: yaw=%.4f pitch=%.4f", self.yaw, self.pitch)

    def zoom(self, delta: float):
        """Move along the forward vector.  Positive = forward."""
        self.position = self.position + self.forward() * delta
        logger.debug("camera zoom: position=%r", self.position)

    def adjust_fov(self, delta: float):
        """Adjust field of view by delta degrees, clamped to [10, 170]."""
        self.fov = max(10, min(170, self.fov + delta))

    def forward(self) -> Vector3:
        return transforms.camera_forward(self.pitch, self.yaw)

    def basis(self):
        """(forward, right, up) for the current angles."""
        return transforms.camera_basis(self.pitch, self.yaw, self.world_up)

    def view_matrix(self, layout: str = 'row'):
        _check_layout(layout)
        forward, right, up = self.basis()
        if layout == 'row':
            return transforms.row_major_view_matrix(self.position, right, up, forward)
        return transforms.column_major_view_matrix(self.position, right, up, forward)

    def projection_matrix(self, screen_size, layout: str = 'row'):
        _check_layout(layout)
        if layout == 'row':
            build = transforms.row_major_perspective_matrix
        else:
            build = transforms.column_major_perspective_matrix
        return build(screen_size, self.fov, self.near, self.far, self.cam_offset)


def _check_layout(layout):
    if layout not in LAYOUTS:
        raise ValueError(f"layout must be one of {LAYOUTS}, got {layout!r}")
