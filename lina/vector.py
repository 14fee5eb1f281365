#
# PROJECT: lina
# MODULE: lina/vector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import numbers

_SCALARS = numbers.Real


class _Vector:
    """
    Shared arithmetic for the fixed-size vector types.

    Subclasses declare their component names in ``_fields`` (and the same
    names in ``__slots__``).  Every binary operator accepts either a vector of
    the same class (component-wise) or a plain scalar (broadcast to every
    component).  Compound operators mutate the receiver and return it.
    """
    __slots__ = ()
    _fields = ()

    # ── Sequence protocol ───────────────────────────────────────────────
    def __iter__(self):
        for name in self._fields:
            yield getattr(self, name)

    def __len__(self):
        return len(self._fields)

    def __getitem__(self, index):
        try:
            return getattr(self, self._fields[index])
        except IndexError:
            raise IndexError(f"{type(self).__name__} index out of range") from None

    def __setitem__(self, index, value):
        try:
            setattr(self, self._fields[index], value)
        except IndexError:
            raise IndexError(f"{type(self).__name__} index out of range") from None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"

    def copy(self):
        return type(self)(*self)

    # ── Element-wise helpers ────────────────────────────────────────────
    def _operands(self, other):
        """Return the per-component right-hand operands, or None."""
        if isinstance(other, type(self)):
            return tuple(other)
        if isinstance(other, _SCALARS):
            return (other,) * len(self._fields)
        return None

    def _combine(self, other, op):
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(self, rhs)))

    def _update(self, other, op):
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        for name, b in zip(self._fields, rhs):
            setattr(self, name, op(getattr(self, name), b))
        return self

    # ── Arithmetic ──────────────────────────────────────────────────────
    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._combine(other, lambda a, b: b + a)

    def __iadd__(self, other):
        return self._update(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __isub__(self, other):
        return self._update(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: b * a)

    def __imul__(self, other):
        return self._update(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __itruediv__(self, other):
        return self._update(other, lambda a, b: a / b)

    def __neg__(self):
        return type(self)(*(-c for c in self))

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(a == b for a, b in zip(self, other))

    # Mutable value type
    __hash__ = None

    # ── Geometry ────────────────────────────────────────────────────────
    def dot(self, other) -> float:
        """
        Sum of matching-component products.

        Also usable in type-level form, e.g. ``Vector2.dot(a, b)``.
        """
        return sum(a * b for a, b in zip(self, other))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self):
        """Divide this vector by its own length, in place."""
        self /= self.length()
        return self

    def normalized(self):
        return self / self.length()

    def nullify(self):
        """Set every component to zero."""
        for name in self._fields:
            setattr(self, name, 0)

    def cast(self, scalar_type):
        """Convert every component with ``scalar_type`` (``int`` truncates)."""
        return type(self)(*(scalar_type(c) for c in self))


class Vector2(_Vector):
    """2-component vector."""
    __slots__ = ('x', 'y')
    _fields = ('x', 'y')

    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y


class Vector3(_Vector):
    """3-component vector with a right-handed cross product."""
    __slots__ = ('x', 'y', 'z')
    _fields = ('x', 'y', 'z')

    def __init__(self, x=0, y=0, z=0):
        self.x = x
        self.y = y
        self.z = z

    def cross(self, other) -> 'Vector3':
        """Right-handed cross product; ``Vector3.cross(a, b)`` also works."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


class Vector4(_Vector):
    """
    4-component vector in homogeneous coordinates.

    ``w`` defaults to 1 so that a default-constructed vector, or one built
    from a Vector3, is a point.  Pass ``w=0`` for a direction.
    """
    __slots__ = ('x', 'y', 'z', 'w')
    _fields = ('x', 'y', 'z', 'w')

    def __init__(self, x=0, y=0, z=0, w=1):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    @classmethod
    def from_vector3(cls, v: Vector3, w=1) -> 'Vector4':
        return cls(v.x, v.y, v.z, w)

    @property
    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


class Rect:
    """Axis-aligned rectangle: origin (x, y) and size (w, h)."""
    __slots__ = ('x', 'y', 'w', 'h')

    def __init__(self, x=0, y=0, w=0, h=0):
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.w
        yield self.h

    def __repr__(self):
        return f"Rect({self.x!r}, {self.y!r}, {self.w!r}, {self.h!r})"

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None

    def copy(self) -> 'Rect':
        return Rect(*self)

    def cast(self, scalar_type) -> 'Rect':
        return Rect(*(scalar_type(c) for c in self))


def _typed(cls, scalar_type):
    def make(*components):
        return cls(*components).cast(scalar_type)
    make.__name__ = f"{scalar_type.__name__}_{cls.__name__}"
    make.__doc__ = f"Build a {cls.__name__} whose components are {scalar_type.__name__}."
    return make


# Scalar-typed shorthands.  uvec* are plain ints; no unsigned wraparound.
vec2 = _typed(Vector2, float)
vec3 = _typed(Vector3, float)
vec4 = _typed(Vector4, float)
ivec2 = _typed(Vector2, int)
ivec3 = _typed(Vector3, int)
ivec4 = _typed(Vector4, int)
uvec2 = _typed(Vector2, int)
uvec3 = _typed(Vector3, int)
uvec4 = _typed(Vector4, int)
