import pytest

from lumen.base_object import create_instance
from lumen.vector import Vec2, Vec3, Vec4


def test_vec2_add_sub_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(3.0, 4.25)
    assert (a + b) - b == a


def test_vec2_mul_div_round_trip():
    a = Vec2(3.0, -6.0)
    assert a * 4 / 4 == a


def test_vec2_in_place_ops_mutate_self():
    a = Vec2(1.0, 2.0)
    original = a
    a += Vec2(3.0, 5.0)
    a -= Vec2(3.0, 5.0)
    a *= 2
    a /= 2
    assert a is original
    assert a == Vec2(1.0, 2.0)


def test_vec2_dot_and_length_agree():
    a = Vec2(3.0, 4.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_vec2_normalize_is_unit():
    assert Vec2(3.0, -7.0).normalize().length() == pytest.approx(1.0)


def test_vec2_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2().normalize()


def test_vec2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / 0


def test_vec3_splat():
    v = Vec3.splat(2.5)
    assert (v.x, v.y, v.z) == (2.5, 2.5, 2.5)


def test_vec3_negation_sums_to_zero():
    a = Vec3(1.0, -2.0, 3.0)
    assert a + (-a) == Vec3()


def test_vec3_add_sub_round_trip():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 9.0)
    assert (a - b) + b == a


def test_vec3_in_place_ops_mutate_self():
    a = Vec3(1.0, 2.0, 3.0)
    original = a
    a += Vec3(1.0, 1.0, 1.0)
    a -= Vec3(1.0, 1.0, 1.0)
    a *= 8
    a /= 8
    assert a is original
    assert a == Vec3(1.0, 2.0, 3.0)


def test_vec3_sqr_length_matches_dot():
    a = Vec3(2.0, -3.0, 6.0)
    assert a.sqr_length() == a.dot(a)
    assert a.length() == pytest.approx(a.sqr_length() ** 0.5)


def test_vec3_normalize_is_unit_and_parallel():
    a = Vec3(2.0, -3.0, 6.0)
    n = a.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(a) == pytest.approx(a.length())


def test_vec3_normalize_zero_returns_zero_vector():
    assert Vec3().normalize() == Vec3()


def test_vec3_cross_is_orthogonal_and_anticommutative():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert c == -(b.cross(a))


def test_vec3_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_vec3_element_product_with_ones_is_identity():
    a = Vec3(3.0, -1.0, 7.0)
    assert a.element_product(Vec3.splat(1.0)) == a


def test_vec4_from_vec3_default_w():
    v = Vec4.from_vec3(Vec3(1.0, 2.0, 3.0))
    assert v.w == 1
    assert v.xyz() == Vec3(1.0, 2.0, 3.0)


def test_vec4_from_vec3_explicit_w():
    v = Vec4.from_vec3(Vec3(1.0, 2.0, 3.0), 0.0)
    assert tuple(v) == (1.0, 2.0, 3.0, 0.0)


def test_vec4_arithmetic_round_trips():
    a, b = Vec4(1.0, 2.0, 3.0, 4.0), Vec4(0.5, -1.0, 2.0, 8.0)
    assert (a + b) - b == a
    assert a * 2 / 2 == a


def test_vec4_in_place_ops_mutate_self():
    a = Vec4(1.0, 2.0, 3.0, 4.0)
    original = a
    a += Vec4(1.0, 1.0, 1.0, 1.0)
    a -= Vec4(1.0, 1.0, 1.0, 1.0)
    a *= 4
    a /= 4
    assert a is original
    assert a == Vec4(1.0, 2.0, 3.0, 4.0)


def test_vectors_are_registered_by_name():
    assert create_instance("Vec3") == Vec3()
    assert create_instance("Vec4") == Vec4()