from enum import StrEnum


class GeometryType(StrEnum):
    LineString = 'LineString'
