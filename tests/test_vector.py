import numpy as np
import pytest

from symbolic_algebra.exceptions import DimensionMismatchError
from symbolic_algebra.linear_algebra import Point3, Scalar, Vector
from symbolic_algebra.linear_algebra.unit import i2, i3, j2, j3, k3


def test_linear_combination():
    u = Vector([-2.0, 1.0, -2.0])
    v = Vector([1.0, 2.0, 1.0])

    assert (u * 3.0) - (v * 2.0) == Vector([-8.0, -1.0, -8.0])


def test_magnitude():
    u = Vector([-2.0, 1.0, -2.0])
    v = Vector([1.0, 2.0, 1.0])

    assert float((u + (v * 3.0)).magnitude()) == pytest.approx(np.sqrt(51.0))
    assert Vector([3.0, 4.0]).magnitude_squared() == Scalar(25.0)


def test_unit_in_direction():
    v = Vector([2.0, -1.0, 3.0])
    u = v.unit_in_direction()

    assert u.is_close(v / np.sqrt(14.0))
    assert float(u.magnitude()) == pytest.approx(1.0)


def test_zero_vector_has_no_direction():
    u = Vector([0.0, 0.0]).unit_in_direction()
    assert np.all(np.isnan(u.components))


def test_dot_product():
    u = Vector([1.0, 1.0, 4.0])
    v = Vector([3.0, 1.0, -1.0])

    assert u * v == Scalar(0.0)
    assert u.dotted(Vector([1.0, 0.0, 0.0])) == Scalar(1.0)


def test_projection_operators():
    u = Vector([7.0, 0.0, 15.0])
    v = Vector([0.0, 4.0, -2.0])

    assert v << u == Vector([0.0, -6.0, 3.0])
    assert u >> v == Vector([0.0, -6.0, 3.0])


def test_scalar_multiplication_both_sides():
    v = Vector([1.0, -2.0])
    assert 2.0 * v == Vector([2.0, -4.0])
    assert Scalar(2.0) * v == Vector([2.0, -4.0])
    assert v * Scalar(2.0) == Vector([2.0, -4.0])
    assert v / 2 == Vector([0.5, -1.0])
    assert -v == Vector([-1.0, 2.0])


def test_cross_product_of_units():
    assert i3() ^ j3() == k3()
    assert j3() ^ k3() == i3()
    assert k3() ^ i3() == j3()


def test_cross_product():
    assert Vector([2.0, 1.0, 3.0]) ^ Vector([-1.0, 2.0, 2.0]) == Vector([-4.0, -7.0, 5.0])

    u = Vector([3.0, -4.0, 1.0])
    v = Vector([-1.0, 2.0, 5.0])
    assert u ^ u == Vector([0.0, 0.0, 0.0])
    assert u ^ v == Vector([-22.0, -16.0, 2.0])
    assert u ^ v == -(v ^ u)


def test_cross_product_requires_three_dimensions():
    with pytest.raises(DimensionMismatchError):
        i2() ^ j2()


def test_mismatched_dimensions():
    with pytest.raises(DimensionMismatchError) as excinfo:
        Vector([1.0, 2.0]) + Vector([1.0, 2.0, 3.0])
    assert excinfo.value.details == {'left': 2, 'right': 3}

    with pytest.raises(ValueError):
        Vector([1.0]).dotted(Vector([1.0, 2.0]))


def test_angle_between():
    angle = i2().angle_between(j2())
    assert angle.value == pytest.approx(np.pi / 2)
    assert Vector([1.0, 1.0]).angle_between(Vector([2.0, 2.0])).value == pytest.approx(0.0, abs=1e-6)


def test_from_points():
    assert Vector.from_points(Point3(1.0, 2.0, 3.0), Point3(4.0, 6.0, 8.0)) == Vector([3.0, 4.0, 5.0])


def test_vectors_are_immutable():
    v = Vector([1.0, 2.0])
    with pytest.raises(ValueError):
        v.components[0] = 5.0

    source = np.array([1.0, 2.0])
    w = Vector(source)
    source[0] = 9.0
    assert w == Vector([1.0, 2.0])


def test_rejects_non_flat_components():
    with pytest.raises(ValueError):
        Vector([[1.0, 2.0], [3.0, 4.0]])
