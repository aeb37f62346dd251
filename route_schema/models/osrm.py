import msgspec

from route_schema.models.driving_side import DrivingSide
from route_schema.models.geometry_type import GeometryType
from route_schema.models.maneuver_type import ManeuverType
from route_schema.models.travel_mode import Mode
from route_schema.models.types import Bearing, Int64, LonLat, NonNegativeFloat

# OSRM API Documentation:
# https://project-osrm.org/docs/v5.24.0/api/#route-service
#
# The structs below are the union of the fields returned by the API versions
# we consume: a field missing from any of them is optional (None) and is
# omitted again on encode.


class _OSRMStruct(msgspec.Struct, frozen=True, omit_defaults=True):
    pass


class OSRMWaypoint(_OSRMStruct):
    name: str
    location: LonLat
    distance: NonNegativeFloat | None = None  # in meters, from the input coordinate
    hint: str | None = None


class OSRMGeometry(_OSRMStruct):
    coordinates: tuple[LonLat, ...]
    geometry_type: GeometryType = msgspec.field(name='type')


class OSRMLane(_OSRMStruct):
    indications: tuple[DrivingSide, ...]
    valid: bool
    active: bool | None = None
    valid_indication: DrivingSide | None = None


class OSRMIntersection(_OSRMStruct):
    entry: tuple[bool, ...]  # parallel to bearings
    bearings: tuple[Bearing, ...]
    location: LonLat
    # indices into bearings, absent at the route endpoints
    intersection_in: Int64 | None = msgspec.field(default=None, name='in')
    out: Int64 | None = None
    lanes: tuple[OSRMLane, ...] | None = None
    classes: tuple[str, ...] | None = None
    duration: float | None = None  # in seconds
    admin_index: Int64 | None = None
    weight: float | None = None
    geometry_index: Int64 | None = None
    turn_weight: float | None = None
    turn_duration: float | None = None  # in seconds


class OSRMManeuver(_OSRMStruct, kw_only=True):
    bearing_after: Bearing
    bearing_before: Bearing
    location: LonLat
    modifier: DrivingSide | None = None
    maneuver_type: ManeuverType = msgspec.field(name='type')
    exit: Int64 | None = None  # roundabout exit number
    instruction: str | None = None  # legacy, newer versions leave it to the client


class OSRMStep(_OSRMStruct):
    intersections: tuple[OSRMIntersection, ...]
    maneuver: OSRMManeuver
    name: str
    duration: NonNegativeFloat  # in seconds
    distance: NonNegativeFloat  # in meters
    driving_side: DrivingSide
    weight: NonNegativeFloat
    mode: Mode
    geometry: OSRMGeometry
    step_ref: str | None = msgspec.field(default=None, name='ref')
    destinations: str | None = None


class OSRMLeg(_OSRMStruct):
    steps: tuple[OSRMStep, ...]
    weight: NonNegativeFloat
    summary: str
    duration: NonNegativeFloat  # in seconds
    distance: NonNegativeFloat  # in meters


class OSRMRoute(_OSRMStruct):
    legs: tuple[OSRMLeg, ...]
    weight_name: str
    geometry: OSRMGeometry
    weight: NonNegativeFloat
    duration: NonNegativeFloat  # in seconds
    distance: NonNegativeFloat  # in meters


class OSRMResponse(_OSRMStruct):
    code: str
    routes: tuple[OSRMRoute, ...]
    waypoints: tuple[OSRMWaypoint, ...]

    @property
    def is_ok(self) -> bool:
        return self.code == 'Ok'


RouteResponse = OSRMResponse


class OSRMSimpleRouteResponse(_OSRMStruct):
    code: str
    durations: NonNegativeFloat  # in seconds
    distance: NonNegativeFloat  # in meters
