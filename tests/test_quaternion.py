import math

import pytest

from gamemath.matrix import Matrix4x4
from gamemath.quaternion import Quaternion
from gamemath.vector import Vector3

TOL = 1e-9


def _flat(matrix):
    return [value for row in matrix.m for value in row]


A = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.8)
B = Quaternion.from_axis_angle(Vector3(-2.0, 1.0, 0.5), 1.3)


def test_identity_is_default():
    assert Quaternion.identity() == Quaternion()
    assert tuple(Quaternion.identity()) == (0.0, 0.0, 0.0, 1.0)


def test_conjugate_negates_vector_part():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert Quaternion.conjugate(q) == Quaternion(-1.0, -2.0, -3.0, 4.0)


def test_norm_squared_equals_self_dot():
    q = Quaternion(1.0, -2.0, 3.0, 0.5)
    assert math.isclose(Quaternion.norm(q) ** 2, Quaternion.dot(q, q))


def test_normalize_gives_unit_norm():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert math.isclose(Quaternion.norm(Quaternion.normalize(q)), 1.0)


def test_normalize_zero_is_unchanged():
    zero = Quaternion(0.0, 0.0, 0.0, 0.0)
    assert Quaternion.normalize(zero) == zero


def test_inverse_times_self_is_identity():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert tuple(q * Quaternion.inverse(q)) == pytest.approx(
        (0.0, 0.0, 0.0, 1.0), abs=TOL
    )


def test_inverse_of_zero_raises():
    with pytest.raises(ValueError):
        Quaternion.inverse(Quaternion(0.0, 0.0, 0.0, 0.0))


def test_from_axis_angle_zero_axis_raises():
    with pytest.raises(ValueError):
        Quaternion.from_axis_angle(Vector3(), 1.0)


def test_from_axis_angle_is_unit():
    assert math.isclose(Quaternion.norm(A), 1.0)


def test_rotate_vector_quarter_turn_about_z():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, math.pi / 2)
    assert tuple(Quaternion.rotate_vector(Vector3.UNIT_X, q)) == pytest.approx(
        (0.0, 1.0, 0.0), abs=TOL
    )


def test_rotate_vector_preserves_length():
    v = Vector3(3.0, -1.0, 2.0)
    assert math.isclose(Quaternion.rotate_vector(v, A).length(), v.length())


def test_rotate_vector_matches_matrix_transform():
    v = Vector3(0.5, 2.0, -1.5)
    expected = tuple(v.transform(A.to_matrix()))
    assert tuple(Quaternion.rotate_vector(v, A)) == pytest.approx(expected, abs=TOL)


def test_to_matrix_matches_make_rotate_matrix():
    assert A.to_matrix() == Quaternion.make_rotate_matrix(A)


def test_matrix_matches_axis_angle_matrix():
    axis = Vector3(1.0, 2.0, 3.0)
    expected = _flat(Matrix4x4.make_rotate_axis_angle(axis, 0.8))
    assert _flat(A.to_matrix()) == pytest.approx(expected, abs=TOL)


def test_identity_matrix():
    expected = [1.0 if i == j else 0.0 for i in range(4) for j in range(4)]
    assert _flat(Quaternion.identity().to_matrix()) == pytest.approx(expected, abs=TOL)


def test_from_rotation_matrix_gives_inverse_rotation():
    result = Quaternion.from_rotation_matrix(A.to_matrix())
    assert tuple(result) == pytest.approx(tuple(Quaternion.conjugate(A)), abs=TOL)


@pytest.mark.parametrize("axis", [Vector3.UNIT_X, Vector3.UNIT_Y, Vector3.UNIT_Z])
def test_from_rotation_matrix_large_angles(axis):
    q = Quaternion.from_axis_angle(axis, 2.9)
    result = Quaternion.from_rotation_matrix(q.to_matrix())
    assert _flat(result.to_matrix()) == pytest.approx(
        _flat(Quaternion.conjugate(q).to_matrix()), abs=TOL
    )
    assert math.isclose(Quaternion.norm(result), 1.0)


def test_extract_yaw_of_pure_yaw():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Y, 0.7)
    assert tuple(Quaternion.extract_yaw(q)) == pytest.approx(tuple(q), abs=TOL)


def test_extract_yaw_of_pure_pitch_is_identity():
    q = Quaternion.from_axis_angle(Vector3.UNIT_X, 0.3)
    assert tuple(Quaternion.extract_yaw(q)) == pytest.approx(
        (0.0, 0.0, 0.0, 1.0), abs=TOL
    )


def test_lerp_clamps_t():
    assert Quaternion.lerp(A, B, 2.0) == Quaternion.lerp(A, B, 1.0)
    assert tuple(Quaternion.lerp(A, B, -1.0)) == pytest.approx(
        tuple(Quaternion.normalize(A)), abs=TOL
    )


def test_slerp_endpoints():
    assert tuple(Quaternion.slerp(A, B, 0.0)) == pytest.approx(tuple(A), abs=TOL)
    assert tuple(Quaternion.slerp(A, B, 1.0)) == pytest.approx(tuple(B), abs=TOL)


def test_slerp_midpoint_is_unit_and_symmetric():
    mid = Quaternion.slerp(A, B, 0.5)
    assert math.isclose(Quaternion.norm(mid), 1.0)
    assert math.isclose(Quaternion.dot(mid, A), Quaternion.dot(mid, B))


def test_slerp_takes_short_path_for_opposite():
    q = Quaternion.normalize(Quaternion(1.0, 2.0, 3.0, 4.0))
    assert tuple(Quaternion.slerp(q, -q, 0.3)) == pytest.approx(tuple(-q), abs=TOL)


def test_slerp_toward_matches_static_slerp():
    q = Quaternion(*A)
    q.slerp_toward(B, 0.4)
    assert tuple(q) == pytest.approx(tuple(Quaternion.slerp(A, B, 0.4)), abs=TOL)


def test_add_rotation_composes_in_place():
    q = Quaternion(*A)
    q.add_rotation(B)
    assert tuple(q) == pytest.approx(tuple(Quaternion.normalize(A * B)), abs=TOL)


def test_composition_about_same_axis_adds_angles():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.4)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.9)
    expected = tuple(Quaternion.from_axis_angle(Vector3.UNIT_Z, 1.3))
    assert tuple(a * b) == pytest.approx(expected, abs=TOL)


def test_operators():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert -q == Quaternion(-1.0, -2.0, -3.0, -4.0)
    assert q + q == q * 2.0
    assert 2.0 * q == q * 2.0


def test_multiply_by_unsupported_type_raises():
    with pytest.raises(TypeError):
        Quaternion() * "x"


def test_affine_with_quaternion_matches_euler():
    s = Vector3(2.0, 1.0, 0.5)
    t = Vector3(1.0, -2.0, 3.0)
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.6)
    assert _flat(Matrix4x4.affine(s, q, t)) == pytest.approx(
        _flat(Matrix4x4.affine(s, Vector3(0.0, 0.0, 0.6), t)), abs=TOL
    )