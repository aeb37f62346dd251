from collections.abc import Iterable
from typing import Self

import msgspec
from shapely import Point, get_coordinates


class RouteRequestBuilderError(ValueError):
    pass


class RouteRequest(msgspec.Struct, frozen=True):
    points: tuple[Point, ...]  # x=lon, y=lat

    @property
    def coordinates(self) -> str:
        """
        Format the points as an OSRM coordinates path segment.

        >>> RouteRequest((Point(13.388, 52.517), Point(13.397, 52.529))).coordinates
        '13.388,52.517;13.397,52.529'
        """
        return ';'.join(f'{x},{y}' for x, y in get_coordinates(self.points).tolist())

    @classmethod
    def builder(cls) -> 'RouteRequestBuilder':
        return RouteRequestBuilder()


class RouteRequestBuilder:
    __slots__ = ('_points',)

    def __init__(self) -> None:
        self._points: list[Point] | None = None

    def points(self, points: Iterable[Point]) -> Self:
        """
        Replace the points collected so far.
        """
        self._points = list(points)
        return self

    def point(self, point: Point) -> Self:
        """
        Append a single point.
        """
        if self._points is None:
            self._points = []
        self._points.append(point)
        return self

    def build(self) -> RouteRequest:
        if self._points is None:
            raise RouteRequestBuilderError('`points` must be initialized')
        if len(self._points) < 2:
            raise RouteRequestBuilderError(
                f'At least two points are required, got {len(self._points)}'
            )
        return RouteRequest(tuple(self._points))
