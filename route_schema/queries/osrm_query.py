from route_schema.config import OSRM_PROFILE, OSRM_URL
from route_schema.exceptions.query_error import OSRMQueryError
from route_schema.lib.route_codec import decode_route_response
from route_schema.models.osrm import OSRMResponse
from route_schema.models.osrm_profile import OSRMProfile, OSRMProfiles
from route_schema.models.route_request import RouteRequest
from route_schema.utils import HTTP


class OSRMQuery:
    @staticmethod
    async def route(
        request: RouteRequest, *, profile: OSRMProfile = OSRM_PROFILE
    ) -> OSRMResponse:
        """
        Query the route service for the given request.

        The document is decoded as-is, decode errors are not retried.
        """
        if profile not in OSRMProfiles:
            raise ValueError(f'Unsupported OSRM profile {profile!r}')

        r = await HTTP.get(
            f'{OSRM_URL}/route/v1/{profile}/{request.coordinates}',
            params={
                'steps': 'true',
                'geometries': 'geojson',
                'overview': 'full',
            },
        )
        content_type: str = r.headers.get('Content-Type', '')
        if not content_type.startswith('application/json'):
            raise OSRMQueryError(r.status_code, r.text)

        if not r.is_success:
            data = r.json()
            if isinstance(data, dict) and 'message' in data and 'code' in data:
                raise OSRMQueryError(r.status_code, f'{data["message"]} ({data["code"]})')
            raise OSRMQueryError(r.status_code, r.text)

        return decode_route_response(r.content)
