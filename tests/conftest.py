"""Shared layouts for the hexgeom tests."""
import pytest

from hexgeom.layout import (
    ORIENTATION_FLAT, ORIENTATION_POINTY, Layout, Point, make_layout
)


def assert_point_close(actual, expected, tol=1e-4):
    assert abs(actual[0] - expected[0]) <= tol, f"x: {actual} != {expected}"
    assert abs(actual[1] - expected[1]) <= tol, f"y: {actual} != {expected}"


@pytest.fixture
def flat10():
    return make_layout(10, Point(0, 0), ORIENTATION_FLAT)


@pytest.fixture
def pointy10():
    return make_layout(10, Point(0, 0), ORIENTATION_POINTY)


@pytest.fixture
def stretched():
    """Pointy layout twice as wide as it is tall, with an off-center origin."""
    return Layout(size=Point(20, 10), origin=Point(17.5, -3.25), orientation=ORIENTATION_POINTY)


@pytest.fixture(params=["flat", "pointy", "stretched"])
def any_layout(request, flat10, pointy10, stretched):
    return {"flat": flat10, "pointy": pointy10, "stretched": stretched}[request.param]
