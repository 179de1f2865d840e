import pytest

from gamemath.vector import Vector2, Vector3, Vector4


class _Grid:
    def __init__(self, m):
        self.m = m


def _identity_rows():
    return [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]


def _translation(tx, ty, tz):
    rows = _identity_rows()
    rows[3][0], rows[3][1], rows[3][2] = tx, ty, tz
    return _Grid(rows)


# ---- Vector2 ----

def test_vector2_defaults_to_zero():
    assert Vector2() == Vector2(0.0, 0.0)


def test_vector2_add_sub_round_trip():
    a, b = Vector2(1.5, -2.0), Vector2(0.25, 7.0)
    assert (a + b) - b == a


def test_vector2_scalar_add_sub_round_trip():
    a = Vector2(3.0, -1.0)
    assert (a + 2.5) - 2.5 == a


def test_vector2_mul_div_componentwise_round_trip():
    a, b = Vector2(3.0, 8.0), Vector2(2.0, 4.0)
    result = (a * b) / b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_vector2_scalar_mul_div_round_trip():
    a = Vector2(5.0, -6.0)
    assert (a * 4.0) / 4.0 == a


def test_vector2_length():
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)


def test_vector2_normalized_has_unit_length():
    n = Vector2(-7.0, 2.0).normalized()
    assert n.length() == pytest.approx(1.0)


def test_vector2_normalized_zero_stays_zero():
    assert Vector2().normalized() == Vector2(0.0, 0.0)


def test_vector2_lerp_endpoints_and_unclamped():
    a, b = Vector2(1.0, 2.0), Vector2(5.0, -2.0)
    assert Vector2.lerp(a, b, 0.0) == a
    assert Vector2.lerp(a, b, 1.0) == b
    beyond = Vector2.lerp(a, b, 2.0)
    assert beyond == b + (b - a)


def test_vector2_unpacks():
    x, y = Vector2(1.0, 2.0)
    assert (x, y) == (1.0, 2.0)


# ---- Vector3 ----

def test_vector3_static_add_subtract_match_operators():
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 9.0)
    assert Vector3.add(a, b) == a + b
    assert Vector3.subtract(a, b) == a - b
    assert Vector3.subtract(Vector3.add(a, b), b) == a


def test_vector3_multiply_matches_operators():
    v = Vector3(1.0, -2.0, 3.0)
    assert Vector3.multiply(2.0, v) == v * 2.0
    assert 2.0 * v == v * 2.0


def test_vector3_unary_operators():
    v = Vector3(1.0, -2.0, 3.0)
    assert +v == v
    assert -(-v) == v
    assert v + (-v) == Vector3.ZERO


def test_vector3_unit_cross_products():
    assert Vector3.cross(Vector3.UNIT_X, Vector3.UNIT_Y) == Vector3.UNIT_Z
    assert Vector3.cross(Vector3.UNIT_Y, Vector3.UNIT_Z) == Vector3.UNIT_X
    assert Vector3.cross(Vector3.UNIT_Z, Vector3.UNIT_X) == Vector3.UNIT_Y


def test_vector3_cross_is_orthogonal():
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-2.0, 0.5, 4.0)
    c = Vector3.cross(a, b)
    assert Vector3.dot(c, a) == pytest.approx(0.0)
    assert Vector3.dot(c, b) == pytest.approx(0.0)


def test_vector3_dot_with_self_is_length_squared():
    v = Vector3(2.0, -3.0, 6.0)
    assert Vector3.dot(v, v) == pytest.approx(v.length() ** 2)


def test_vector3_normalize_unit_length_and_direction():
    v = Vector3(2.0, -3.0, 6.0)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert Vector3.dot(n, v) == pytest.approx(v.length())


def test_vector3_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vector3.ZERO.normalize()


def test_vector3_lerp_clamps():
    a, b = Vector3(0.0, 1.0, 2.0), Vector3(4.0, -1.0, 8.0)
    assert Vector3.lerp(a, b, 0.0) == a
    assert Vector3.lerp(a, b, 1.0) == b
    assert Vector3.lerp(a, b, 3.0) == b
    assert Vector3.lerp(a, b, -1.0) == a


def test_vector3_transform_identity():
    v = Vector3(1.5, -2.0, 7.0)
    assert v.transform(_Grid(_identity_rows())) == v


def test_vector3_transform_translation():
    v = Vector3(1.0, 2.0, 3.0)
    result = v.transform(_translation(10.0, -5.0, 0.5))
    assert result == v + Vector3(10.0, -5.0, 0.5)


def test_vector3_transform_zero_w_raises():
    rows = _identity_rows()
    rows[3][3] = 0.0
    with pytest.raises(ValueError):
        Vector3(0.0, 0.0, 0.0).transform(_Grid(rows))


def test_vector3_iadd_rebinds():
    v = Vector3(1.0, 1.0, 1.0)
    v += Vector3.UNIT_X
    assert v == Vector3(2.0, 1.0, 1.0)


# ---- Vector4 ----

def test_vector4_defaults_to_zero():
    assert Vector4() == Vector4(0.0, 0.0, 0.0, 0.0)


def test_vector4_add_sub_round_trip():
    a, b = Vector4(1.0, 2.0, 3.0, 4.0), Vector4(-1.0, 0.5, 9.0, 2.0)
    assert (a + b) - b == a


def test_vector4_negation_cancels():
    a = Vector4(1.0, -2.0, 3.0, -4.0)
    assert a + (-a) == Vector4()


def test_vector4_scalar_mul():
    a = Vector4(1.0, -2.0, 3.0, -4.0)
    assert a * 2.0 == a + a
    assert a * 1.0 == a