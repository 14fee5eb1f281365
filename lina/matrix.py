#
# PROJECT: lina
# MODULE: lina/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .vector import Vector3, Vector4


def _cell_property(index, name):
    def fget(self):
        return self.m[index]

    def fset(self, value):
        self.m[index] = value

    return property(fget, fset, doc=f"Cell {name}.")


def _with_cells(cls):
    """
    Class decorator adding named accessors for every cell.

    ``mRC`` is zero-based (``m03`` is row 0, column 3) and ``aIJ`` is the
    one-based alias (``a14`` is the same cell).  Both read and write the same
    slot of the flat storage list, so the two spellings never diverge.
    """
    n = cls.SIZE
    for r in range(n):
        for c in range(n):
            index = r * n + c
            setattr(cls, f"m{r}{c}", _cell_property(index, f"row {r}, column {c}"))
            setattr(cls, f"a{r + 1}{c + 1}", _cell_property(index, f"row {r}, column {c}"))
    return cls


class _Matrix:
    """
    Square matrix stored as one flat row-major list in ``self.m``.

    Cells are also reachable as ``mat[r, c]`` and through the named
    properties installed by ``_with_cells``.  The default constructor builds
    the identity matrix.
    """
    __slots__ = ('m',)
    SIZE = 0

    def __init__(self, *cells):
        n = self.SIZE
        if not cells:
            self.m = [1.0 if r == c else 0.0 for r in range(n) for c in range(n)]
        elif len(cells) == n * n:
            self.m = list(cells)
        else:
            raise ValueError(
                f"{type(self).__name__} takes {n * n} cells, got {len(cells)}")

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def zeroed(cls):
        return cls(*([0.0] * (cls.SIZE * cls.SIZE)))

    def copy(self):
        return type(self)(*self.m)

    # ── Access ──────────────────────────────────────────────────────────
    def _index(self, key):
        r, c = key
        n = self.SIZE
        if not (0 <= r < n and 0 <= c < n):
            raise IndexError(f"{type(self).__name__} index {key} out of range")
        return r * n + c

    def __getitem__(self, key):
        return self.m[self._index(key)]

    def __setitem__(self, key, value):
        self.m[self._index(key)] = value

    def __iter__(self):
        return iter(self.m)

    def rows(self):
        n = self.SIZE
        return [self.m[r * n:(r + 1) * n] for r in range(n)]

    def __repr__(self):
        body = ",\n ".join(", ".join(repr(v) for v in row) for row in self.rows())
        return f"{type(self).__name__}(\n {body})"

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.m == other.m

    __hash__ = None


@_with_cells
class Mat2(_Matrix):
    """2x2 matrix.  Holds data only; no arithmetic is defined for it."""
    __slots__ = ()
    SIZE = 2


class _SquareMatrix(_Matrix):
    """Arithmetic shared by Mat3 and Mat4."""
    __slots__ = ()
    VECTOR = None

    # ── Factories ───────────────────────────────────────────────────────
    @classmethod
    def translation(cls, t):
        """Identity with the first N-1 components of ``t`` in the last column."""
        mat = cls()
        n = cls.SIZE
        for r in range(n - 1):
            mat.m[r * n + n - 1] = t[r]
        return mat

    @classmethod
    def scalation(cls, s):
        """Diagonal matrix with the components of ``s`` on the diagonal."""
        mat = cls.zeroed()
        n = cls.SIZE
        for i, value in enumerate(s):
            mat.m[i * n + i] = value
        return mat

    @classmethod
    def _embed(cls, r3):
        """Place a 3x3 block (list of rows) in the upper-left of an identity."""
        mat = cls()
        n = cls.SIZE
        for r in range(3):
            for c in range(3):
                mat.m[r * n + c] = r3[r][c]
        return mat

    @classmethod
    def rotation_x(cls, angle: float):
        """Rotation about X.  ``angle`` is passed straight to sin/cos (radians)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._embed([[1.0, 0.0, 0.0],
                           [0.0, c, -s],
                           [0.0, s, c]])

    @classmethod
    def rotation_y(cls, angle: float):
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._embed([[c, 0.0, s],
                           [0.0, 1.0, 0.0],
                           [-s, 0.0, c]])

    @classmethod
    def rotation_z(cls, angle: float):
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._embed([[c, -s, 0.0],
                           [s, c, 0.0],
                           [0.0, 0.0, 1.0]])

    @classmethod
    def rotation(cls, angles: Vector3):
        """``rotation_x(x) @ rotation_y(y) @ rotation_z(z)``, in that order."""
        return cls.rotation_x(angles.x) @ cls.rotation_y(angles.y) @ cls.rotation_z(angles.z)

    # ── In-place transforms (post-multiply) ─────────────────────────────
    def translate(self, t):
        self @= self.translation(t)
        return self

    def scale(self, s):
        self @= self.scalation(s)
        return self

    def rotate_x(self, angle: float):
        self @= self.rotation_x(angle)
        return self

    def rotate_y(self, angle: float):
        self @= self.rotation_y(angle)
        return self

    def rotate_z(self, angle: float):
        self @= self.rotation_z(angle)
        return self

    def rotate(self, angles: Vector3):
        self @= self.rotation(angles)
        return self

    # ── Layout ──────────────────────────────────────────────────────────
    def transposed(self):
        n = self.SIZE
        return type(self)(*(self.m[c * n + r] for r in range(n) for c in range(n)))

    def transpose(self):
        self.m = self.transposed().m
        return self

    def row(self, i):
        n = self.SIZE
        return self.VECTOR(*self.m[i * n:(i + 1) * n])

    def column(self, j):
        n = self.SIZE
        return self.VECTOR(*self.m[j::n])

    # ── Conditions ──────────────────────────────────────────────────────
    def is_identity(self) -> bool:
        return self.m == type(self)().m

    def is_zeroed(self) -> bool:
        return all(v == 0 for v in self.m)

    def is_translation(self) -> bool:
        """True when everything except the last column's upper cells is identity."""
        n = self.SIZE
        ident = type(self)().m
        for r in range(n):
            for c in range(n):
                if c == n - 1 and r < n - 1:
                    continue
                if self.m[r * n + c] != ident[r * n + c]:
                    return False
        return True

    # ── Element-wise addition / subtraction ─────────────────────────────
    def _column0(self, v):
        """Offsets adding ``v`` into column 0, as a flat cell list."""
        n = self.SIZE
        offsets = [0.0] * (n * n)
        for r, value in enumerate(v):
            offsets[r * n] = value
        return offsets

    def _addend(self, other):
        if isinstance(other, type(self)):
            return other.m
        if isinstance(other, self.VECTOR):
            return self._column0(other)
        return None

    def __add__(self, other):
        rhs = self._addend(other)
        if rhs is None:
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.m, rhs)))

    def __iadd__(self, other):
        rhs = self._addend(other)
        if rhs is None:
            return NotImplemented
        self.m = [a + b for a, b in zip(self.m, rhs)]
        return self

    def __sub__(self, other):
        rhs = self._addend(other)
        if rhs is None:
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self.m, rhs)))

    def __isub__(self, other):
        rhs = self._addend(other)
        if rhs is None:
            return NotImplemented
        self.m = [a - b for a, b in zip(self.m, rhs)]
        return self

    # ── Multiplication ──────────────────────────────────────────────────
    def _product(self, other):
        n = self.SIZE
        a = self.m
        b = other.m
        return [sum(a[r * n + k] * b[k * n + c] for k in range(n))
                for r in range(n) for c in range(n)]

    def __matmul__(self, other):
        if isinstance(other, type(self)):
            return type(self)(*self._product(other))
        if isinstance(other, self.VECTOR):
            n = self.SIZE
            comps = tuple(other)
            return self.VECTOR(*(sum(self.m[r * n + k] * comps[k] for k in range(n))
                                 for r in range(n)))
        return NotImplemented

    def __imatmul__(self, other):
        if not isinstance(other, type(self)):
            # In-place composition only takes a matrix of the same size.
            raise TypeError(
                f"unsupported operand type(s) for @=: {type(self).__name__!r} "
                f"and {type(other).__name__!r}")
        # Built entirely from the old cells before self.m is replaced.
        self.m = self._product(other)
        return self

    __mul__ = __matmul__
    __imul__ = __imatmul__


@_with_cells
class Mat3(_SquareMatrix):
    """3x3 matrix; 2D affine transforms and 3D rotations."""
    __slots__ = ()
    SIZE = 3
    VECTOR = Vector3


@_with_cells
class Mat4(_SquareMatrix):
    """4x4 matrix; all that 3D camera math needs."""
    __slots__ = ()
    SIZE = 4
    VECTOR = Vector4

