#
# PROJECT: lina
# MODULE: lina/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .vector import (Vector2, Vector3, Vector4, Rect,
                     vec2, vec3, vec4, ivec2, ivec3, ivec4, uvec2, uvec3, uvec4)
from .matrix import Mat2, Mat3, Mat4
from .transforms import (
    row_major_view_matrix,
    column_major_view_matrix,
    row_major_perspective_matrix,
    column_major_perspective_matrix,
    row_major_model_matrix,
    column_major_model_matrix,
    camera_forward,
    camera_right,
    camera_up,
    camera_basis,
)
from .config import CameraConfig
from .camera import Camera

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
