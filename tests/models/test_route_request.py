import pytest
from shapely import Point

from route_schema.models.route_request import RouteRequest, RouteRequestBuilderError


def test_builder_points():
    request = (
        RouteRequest.builder()
        .points([Point(13.388, 52.517), Point(13.397, 52.529)])
        .build()
    )
    assert request.coordinates == '13.388,52.517;13.397,52.529'


def test_builder_point_keeps_order():
    request = (
        RouteRequest.builder()
        .point(Point(1, 2))
        .point(Point(3, 4))
        .point(Point(5.5, 6.5))
        .build()
    )
    assert len(request.points) == 3
    assert request.coordinates == '1.0,2.0;3.0,4.0;5.5,6.5'


def test_builder_points_replaces():
    request = (
        RouteRequest.builder()
        .point(Point(0, 0))
        .points([Point(1, 1), Point(2, 2)])
        .build()
    )
    assert request.coordinates == '1.0,1.0;2.0,2.0'


def test_builder_uninitialized():
    with pytest.raises(RouteRequestBuilderError, match='must be initialized'):
        RouteRequest.builder().build()


def test_builder_single_point():
    with pytest.raises(RouteRequestBuilderError, match='At least two points'):
        RouteRequest.builder().point(Point(0, 0)).build()
