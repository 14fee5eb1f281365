#
# PROJECT: lina
# MODULE: lina/sdl.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Conversions between lina values and pygame (SDL) point/rect types.

Optional: needs the ``sdl`` extra (``pip install lina[sdl]``).  The core
vector and matrix modules never import this one.
"""

import pygame

from .vector import Rect, Vector2


def to_point(v):
    """Integer (x, y) tuple, the shape pygame accepts wherever a point is expected."""
    return (int(v.x), int(v.y))


def to_fpoint(v) -> pygame.math.Vector2:
    """Float 2D point; z and w of larger vectors are dropped."""
    return pygame.math.Vector2(float(v.x), float(v.y))


def from_point(p) -> Vector2:
    return Vector2(p[0], p[1])


def to_rect(r: Rect) -> pygame.Rect:
    return pygame.Rect(int(r.x), int(r.y), int(r.w), int(r.h))


def from_rect(rect: pygame.Rect) -> Rect:
    return Rect(rect.x, rect.y, rect.w, rect.h)
