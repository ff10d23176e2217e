import pytest

from symbolic_algebra.exceptions import DimensionMismatchError
from symbolic_algebra.linear_algebra import Axis, Intersection3, Plane3, Point3, Vector


def _reference_plane():
    return Plane3(Point3(1.0, 0.0, -1.0), Vector([-4.0, 5.0, -3.0]))


def test_point_arithmetic():
    assert Point3(4.0, 6.0, 8.0) - Point3(1.0, 2.0, 3.0) == Vector([3.0, 4.0, 5.0])
    assert Point3(1.0, 2.0, 3.0) + Vector([1.0, 1.0, 1.0]) == Point3(2.0, 3.0, 4.0)
    assert Point3.ZERO == Point3(0.0, 0.0, 0.0)


def test_point_translation_requires_three_dimensions():
    with pytest.raises(DimensionMismatchError):
        Point3(1.0, 2.0, 3.0) + Vector([1.0, 1.0])


def test_contains():
    plane = _reference_plane()
    assert plane.contains(plane.point)
    assert plane.contains(Point3(1.0, 0.0, -1.0))
    # (5, 4, -1) is (1, 0, -1) moved along (4, 4, 0), which is not orthogonal to the normal
    assert not plane.contains(Point3(5.0, 4.0, -1.0))


def test_equality():
    plane = _reference_plane()
    other = _reference_plane()
    assert plane.is_parallel(other)
    assert plane == other


def test_construction_from_points():
    plane = Plane3.from_points(
        Point3(1.0, 0.0, -1.0),
        Point3(0.0, 1.0, 2.0),
        Point3(3.0, 1.0, -2.0),
    )
    actual = Plane3.from_point_and_normal(Point3(1.0, 0.0, -1.0), Vector([-4.0, 5.0, -3.0]))

    assert plane.contains(actual.point)
    assert plane.is_parallel(actual)
    assert plane == actual

    plane2 = Plane3.from_points(
        Point3(0.0, 1.0, 2.0),
        Point3(1.0, 0.0, -1.0),
        Point3(3.0, 1.0, -2.0),
    )
    plane3 = Plane3.from_points(
        Point3(3.0, 1.0, -2.0),
        Point3(1.0, 0.0, -1.0),
        Point3(0.0, 1.0, 2.0),
    )
    assert plane == plane2
    assert plane2 == plane3
    assert plane == plane3


def test_equation_round_trip():
    plane = Plane3.from_points(
        Point3(1.0, 0.0, -1.0),
        Point3(0.0, 1.0, 2.0),
        Point3(3.0, 1.0, -2.0),
    )
    normal, d = plane.as_equation()
    a, b, c = normal
    assert plane == Plane3.from_equation(a, b, c, float(d))


def test_plane_through_point_along_line_of_intersection():
    plane = Plane3.from_point_and_normal(
        Point3(-3.0, 1.0, 2.0),
        Plane3.from_equation(1.0, 1.0, 1.0, 0.0).normal
        ^ Plane3.from_equation(0.0, 2.0, -1.0, 0.0).normal,
    )
    assert plane == Plane3.from_equation(-3.0, 1.0, 2.0, 14.0)


def test_solve_for():
    plane = Plane3.from_equation(1.0, 1.0, 1.0, 3.0)
    assert float(plane.solve_for(Axis.X, 1.0, 1.0)) == pytest.approx(1.0)
    assert float(plane.solve_for(Axis.Y, 2.0, 0.0)) == pytest.approx(1.0)
    assert float(plane.solve_for(Axis.Z, 0.0, 0.0)) == pytest.approx(3.0)

    horizontal = Plane3.from_equation(0.0, 0.0, 1.0, 5.0)
    assert horizontal.solve_for(Axis.X, 0.0, 0.0) is None


def test_axis_intersects():
    x, y, z = Plane3.from_equation(1.0, 1.0, 1.0, 3.0).axis_intersects()
    assert (x.x, x.y, x.z) == pytest.approx((3.0, 0.0, 0.0))
    assert (y.x, y.y, y.z) == pytest.approx((0.0, 3.0, 0.0))
    assert (z.x, z.y, z.z) == pytest.approx((0.0, 0.0, 3.0))


def test_axis_intersects_parallel_and_coincident():
    x, y, z = Plane3.from_equation(0.0, 0.0, 1.0, 0.0).axis_intersects()
    assert x is Intersection3.COINCIDENT
    assert y is Intersection3.COINCIDENT
    assert z == Point3(0.0, 0.0, 0.0)

    x, y, z = Plane3.from_equation(0.0, 0.0, 1.0, 5.0).axis_intersects()
    assert x is Intersection3.PARALLEL
    assert y is Intersection3.PARALLEL
    assert z.z == pytest.approx(5.0)


def test_orthogonal_and_parallel():
    floor = Plane3.from_equation(0.0, 0.0, 1.0, 0.0)
    wall = Plane3.from_equation(1.0, 0.0, 0.0, 0.0)
    ceiling = Plane3.from_equation(0.0, 0.0, 1.0, 5.0)

    assert floor.is_orthogonal(wall)
    assert not floor.is_parallel(wall)
    assert floor.is_parallel(ceiling)
    assert floor != ceiling
