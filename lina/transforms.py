#
# PROJECT: lina
# MODULE: lina/transforms.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Camera and model matrix builders.

Every builder comes in two layouts.  The row-major variant keeps basis and
translation components in rows, for column vectors multiplied from the right
(``M @ v``).  The column-major variant is its exact transpose, for row vectors
multiplied from the left or for APIs that upload matrices column by column.

Angles given to the model and basis helpers are radians.  Only the
perspective field of view is in degrees.
"""

import math

from .matrix import Mat4
from .vector import Vector2, Vector3, Vector4

WORLD_UP = Vector3(0.0, 1.0, 0.0)
DEFAULT_CAM_OFFSET = Vector3(0.0, 0.0, 1.0)


# ── View ────────────────────────────────────────────────────────────────────

def row_major_view_matrix(position: Vector3, right: Vector3, up: Vector3,
                          forward: Vector3) -> Mat4:
    """
    World-to-camera matrix from a position and an orthonormal basis.

    The forward row is negated, so the camera looks down its own -Z.
    """
    return Mat4(
        right.x, right.y, right.z, -right.dot(position),
        up.x, up.y, up.z, -up.dot(position),
        -forward.x, -forward.y, -forward.z, forward.dot(position),
        0.0, 0.0, 0.0, 1.0
    )


def column_major_view_matrix(position: Vector3, right: Vector3, up: Vector3,
                             forward: Vector3) -> Mat4:
    return row_major_view_matrix(position, right, up, forward).transposed()


# ── Projection ──────────────────────────────────────────────────────────────

def row_major_perspective_matrix(screen_size: Vector2, fov: float, near: float,
                                 far: float, cam_offset: Vector3 = None) -> Mat4:
    """
    Perspective projection.

    Args:
        screen_size: Vector2(width, height); only the ratio is used.
        fov: Field of view in degrees.
        near, far: Clip plane distances.
        cam_offset: Camera-space offset placed in the x/y/z translation
            terms.  Defaults to (0, 0, 1).
    """
    if cam_offset is None:
        cam_offset = DEFAULT_CAM_OFFSET
    f = 1.0 / math.tan(0.5 * math.radians(fov))
    aspect = screen_size.y / screen_size.x
    return Mat4(
        f * aspect, 0.0, 0.0, cam_offset.x,
        0.0, f, 0.0, cam_offset.y,
        0.0, 0.0, far / (near - far), -cam_offset.z,
        0.0, 0.0, -(far * near) / (far - near), 0.0
    )


def column_major_perspective_matrix(screen_size: Vector2, fov: float, near: float,
                                    far: float, cam_offset: Vector3 = None) -> Mat4:
    return row_major_perspective_matrix(screen_size, fov, near, far, cam_offset).transposed()


# ── Model ───────────────────────────────────────────────────────────────────

def row_major_model_matrix(position: Vector3, rotation: Vector3,
                           scale: Vector4 = None) -> Mat4:
    """Translate @ rotate X @ rotate Y @ rotate Z @ scale."""
    if scale is None:
        scale = Vector4(1.0, 1.0, 1.0, 1.0)
    return (Mat4.translation(position)
            @ Mat4.rotation_x(rotation.x)
            @ Mat4.rotation_y(rotation.y)
            @ Mat4.rotation_z(rotation.z)
            @ Mat4.scalation(scale))


def column_major_model_matrix(position: Vector3, rotation: Vector3,
                              scale: Vector4 = None) -> Mat4:
    return row_major_model_matrix(position, rotation, scale).transposed()


# ── Camera basis ────────────────────────────────────────────────────────────

def camera_forward(pitch: float, yaw: float) -> Vector3:
    """Unit forward vector for pitch/yaw in radians."""
    return Vector3(
        math.cos(pitch) * math.cos(yaw),
        math.sin(pitch),
        math.cos(pitch) * math.sin(yaw)
    ).normalized()


def camera_right(forward: Vector3, world_up: Vector3 = None) -> Vector3:
    if world_up is None:
        world_up = WORLD_UP
    return Vector3.cross(forward, world_up).normalized()


def camera_up(forward: Vector3, right: Vector3) -> Vector3:
    return Vector3.cross(right, forward).normalized()


def camera_basis(pitch: float, yaw: float, world_up: Vector3 = None):
    """Return ``(forward, right, up)`` for the given angles."""
    forward = camera_forward(pitch, yaw)
    right = camera_right(forward, world_up)
    return forward, right, camera_up(forward, right)
