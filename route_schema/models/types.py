from typing import Annotated

from msgspec import Meta

Longitude = Annotated[float, Meta(ge=-180, le=180)]
Latitude = Annotated[float, Meta(ge=-90, le=90)]
LonLat = tuple[Longitude, Latitude]

Int64 = Annotated[int, Meta(ge=-(1 << 63), le=(1 << 63) - 1)]
Bearing = Annotated[int, Meta(ge=0, le=359)]  # in degrees, clockwise from true north
NonNegativeFloat = Annotated[float, Meta(ge=0)]
