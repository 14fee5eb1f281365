#
# PROJECT: lina
# MODULE: tests/test_matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

import pytest

from lina.matrix import Mat2, Mat3, Mat4
from lina.vector import Vector2, Vector3, Vector4


def _sample4():
    return Mat4(*range(1, 17))


def _sample3():
    return Mat3(2, -1, 0, 4, 3, 5, -2, 1, 7)


def test_default_is_identity():
    for cls in (Mat2, Mat3, Mat4):
        m = cls()
        n = cls.SIZE
        for r in range(n):
            for c in range(n):
                assert m[r, c] == (1.0 if r == c else 0.0)
        assert m == cls.identity()


def test_full_constructor_is_row_major():
    m = _sample3()
    assert m.rows() == [[2, -1, 0], [4, 3, 5], [-2, 1, 7]]
    assert m[2, 0] == -2


def test_wrong_cell_count_raises():
    with pytest.raises(ValueError):
        Mat4(1, 2, 3)


def test_zeroed():
    assert Mat4.zeroed().is_zeroed()
    assert Mat3.zeroed().is_zeroed()
    assert not Mat4().is_zeroed()
    assert list(Mat2.zeroed()) == [0.0] * 4


def test_dual_names_share_storage():
    m = Mat4()
    m.m03 = 7.0
    assert m.a14 == 7.0
    assert m[0, 3] == 7.0
    m.a44 = -2.0
    assert m.m33 == -2.0
    m[1, 2] = 5.0
    assert m.m12 == 5.0 and m.a23 == 5.0

    small = Mat2(1, 2, 3, 4)
    assert small.m10 == small.a21 == 3


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Mat3()[3, 0]


def test_translation_cells():
    m = Mat4.translation(Vector3(1, 2, 3))
    assert (m[0, 3], m[1, 3], m[2, 3]) == (1, 2, 3)
    for r in range(4):
        for c in range(4):
            if c == 3 and r < 3:
                continue
            assert m[r, c] == (1.0 if r == c else 0.0)
    assert m.is_translation()
    assert not m.is_identity()


def test_mat3_translation_and_scalation():
    t = Mat3.translation(Vector2(4, 5))
    assert t.column(2) == Vector3(4, 5, 1.0)
    assert t.is_translation()
    s = Mat3.scalation(Vector3(2, 3, 4))
    assert [s[i, i] for i in range(3)] == [2, 3, 4]
    assert not s.is_translation()


def test_scalation_includes_homogeneous_term():
    m = Mat4.scalation(Vector4(2, 3, 4, 5))
    assert [m[i, i] for i in range(4)] == [2, 3, 4, 5]
    assert m.m01 == 0.0


def test_rotation_angle_is_raw_radians():
    m = Mat4.rotation_z(math.pi / 2)
    v = m @ Vector4(1, 0, 0, 1)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)


def test_rotation_composes_in_xyz_order():
    angles = Vector3(0.3, -1.1, 2.0)
    for cls in (Mat3, Mat4):
        expected = cls.rotation_x(angles.x) @ cls.rotation_y(angles.y) @ cls.rotation_z(angles.z)
        assert cls.rotation(angles) == expected
        assert cls.rotation(angles) != (cls.rotation_z(angles.z) @ cls.rotation_y(angles.y)
                                        @ cls.rotation_x(angles.x))


def test_identity_is_neutral():
    for m in (_sample4(), _sample3()):
        ident = type(m).identity()
        assert ident @ m == m
        assert m @ ident == m


def test_star_is_composition():
    a, b = _sample4(), Mat4.rotation_y(0.5)
    assert a * b == a @ b


def test_product_values():
    a = Mat3(1, 2, 0, 0, 1, 0, 0, 0, 1)
    b = Mat3(1, 0, 0, 3, 1, 0, 0, 0, 2)
    assert a @ b == Mat3(7, 2, 0, 3, 1, 0, 0, 0, 2)


def test_in_place_product_uses_original_cells():
    for a, b in ((_sample4(), Mat4(*range(16, 0, -1))),
                 (_sample3(), Mat3(1, 0, 2, -1, 3, 1, 0, 5, -2))):
        expected = a @ b
        same = a
        a @= b
        assert a is same
        assert a == expected


def test_in_place_product_with_star():
    a = _sample4()
    expected = a @ Mat4.translation(Vector3(1, 1, 1))
    a *= Mat4.translation(Vector3(1, 1, 1))
    assert a == expected


def test_instance_transforms_post_multiply():
    m = _sample4()
    expected = m @ Mat4.translation(Vector3(1, 2, 3)) @ Mat4.scalation(Vector4(2, 2, 2, 1))
    m.translate(Vector3(1, 2, 3)).scale(Vector4(2, 2, 2, 1))
    assert m == expected

    r = Mat3()
    r.rotate_x(0.2)
    r.rotate_y(0.4)
    r.rotate_z(0.6)
    assert r == Mat3.rotation(Vector3(0.2, 0.4, 0.6))


def test_rotate_matches_factory():
    m = Mat4()
    m.rotate(Vector3(0.1, 0.2, 0.3))
    assert m == Mat4.rotation(Vector3(0.1, 0.2, 0.3))


def test_matrix_vector_product_is_row_dot_vector():
    m = _sample4()
    v = Vector4(1, 0, -1, 2)
    assert m @ v == Vector4(1 - 3 + 8, 5 - 7 + 16, 9 - 11 + 24, 13 - 15 + 32)
    assert m * v == m @ v

    t = Mat4.translation(Vector3(1, 2, 3))
    assert t @ Vector4(10, 20, 30) == Vector4(11, 22, 33, 1)
    assert t @ Vector4(10, 20, 30, 0) == Vector4(10, 20, 30, 0)

    assert _sample3() @ Vector3(1, 1, 1) == Vector3(1, 12, 6)


def test_transpose():
    m = _sample4()
    t = m.transposed()
    assert t[0, 3] == m[3, 0]
    assert t.transposed() == m
    assert m == _sample4()
    m.transpose()
    assert m == t
    assert _sample3().transposed().transposed() == _sample3()


def test_row_and_column():
    m = _sample4()
    assert m.row(1) == Vector4(5, 6, 7, 8)
    assert m.column(2) == Vector4(3, 7, 11, 15)


def test_matrix_add_sub():
    a, b = _sample4(), Mat4.translation(Vector3(1, -2, 3))
    assert a + b - b == a
    c = a.copy()
    c += b
    assert c == a + b
    c -= b
    assert c == a


def test_identity_flag_after_add():
    m = Mat4()
    assert m.is_identity()
    m += Mat4.translation(Vector3(0, 0, 1)) - Mat4()
    assert not m.is_identity()


def test_add_vector_into_first_column():
    m = Mat4() + Vector4(1, 2, 3, 4)
    assert m.column(0) == Vector4(2, 2, 3, 4)
    assert m.column(1) == Vector4(0, 1, 0, 0)

    n = Mat3()
    n -= Vector3(1, 1, 1)
    assert n.column(0) == Vector3(0, -1, -1)
    assert _sample3() - Vector3(2, 4, -2) == Mat3(0, -1, 0, 0, 3, 5, 0, 1, 7)


def test_mixed_sizes_raise():
    with pytest.raises(TypeError):
        Mat3() @ Mat4()
    with pytest.raises(TypeError):
        Mat4() + Vector3(1, 2, 3)


def test_mat2_has_no_arithmetic():
    with pytest.raises(TypeError):
        Mat2() @ Mat2()
    with pytest.raises(TypeError):
        Mat2() + Mat2()


def test_equality_is_exact():
    m = Mat4()
    n = Mat4()
    n.m22 = 1.0 + 1e-15
    assert m != n


def test_translation_ignores_homogeneous_component():
    m = Mat4.translation(Vector4(1, 2, 3, 0))
    assert m.column(3) == Vector4(1, 2, 3, 1.0)
    assert m.is_translation()
    assert Mat4().translate(Vector4(1, 2, 3, 0)) == Mat4.translation(Vector3(1, 2, 3))

    t = Mat3.translation(Vector3(4, 5, 0))
    assert t.m22 == 1.0
    assert t == Mat3.translation(Vector2(4, 5))


def test_in_place_product_rejects_vectors():
    m = _sample4()
    with pytest.raises(TypeError):
        m @= Vector4(1, 2, 3, 4)
    assert isinstance(m, Mat4)
    assert m == _sample4()
    with pytest.raises(TypeError):
        m *= Vector4(1, 2, 3, 4)
    with pytest.raises(TypeError):
        m @= Mat3()
