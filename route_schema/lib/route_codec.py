import logging
import re
from ast import literal_eval
from typing import NoReturn

import cython
import msgspec

from route_schema.exceptions.decode_error import (
    MalformedDocumentError,
    MissingFieldError,
    RouteDecodeError,
    TypeMismatchError,
    UnknownVariantError,
)
from route_schema.models.osrm import OSRMResponse, OSRMSimpleRouteResponse
from route_schema.utils import MSGSPEC_JSON_ENCODER, format_json_path, join_json_path

# msgspec validation messages look like "<detail> - at `$.routes[0].legs`",
# the location suffix is omitted for errors at the document root
_LOCATION_RE = re.compile(r'^(?P<detail>.*?)(?: - at `(?P<path>\$[^`]*)`)?$', re.DOTALL)
_MISSING_FIELD_RE = re.compile(r'^Object missing required field `(?P<field>[^`]+)`$')
_UNKNOWN_VARIANT_RE = re.compile(r'^Invalid enum value (?P<value>.+)$')
_EXPECTED_RE = re.compile(r'^Expected (?P<expected>.+?)(?:, got `[^`]+`)?$')

_response_decoder = msgspec.json.Decoder(OSRMResponse)
_simple_response_decoder = msgspec.json.Decoder(OSRMSimpleRouteResponse)


def decode_route_response(buffer: bytes | str) -> OSRMResponse:
    """
    Decode a route service JSON document.

    Raises a RouteDecodeError subclass describing the first problem found.
    """
    try:
        return _response_decoder.decode(buffer)
    except msgspec.ValidationError as e:
        _raise_validation_error(e)
    except (msgspec.DecodeError, UnicodeDecodeError) as e:
        logging.debug('Malformed route document: %s', e)
        raise MalformedDocumentError(str(e)) from e


def decode_simple_route_response(buffer: bytes | str) -> OSRMSimpleRouteResponse:
    """
    Decode a route summary JSON document (code, durations, distance).
    """
    try:
        return _simple_response_decoder.decode(buffer)
    except msgspec.ValidationError as e:
        _raise_validation_error(e)
    except (msgspec.DecodeError, UnicodeDecodeError) as e:
        logging.debug('Malformed route summary document: %s', e)
        raise MalformedDocumentError(str(e)) from e


def encode_route_response(response: OSRMResponse) -> bytes:
    """
    Encode a route response back into a JSON document.

    Unset optional fields are omitted, never written as null.
    """
    return MSGSPEC_JSON_ENCODER.encode(response)


def _raise_validation_error(e: msgspec.ValidationError) -> NoReturn:
    error = parse_validation_error(str(e))
    logging.debug('Invalid route document: %s', error)
    raise error from e


@cython.cfunc
def _unrepr(s: str) -> str:
    # msgspec reports the offending token as its Python repr
    try:
        value = literal_eval(s)
    except (ValueError, SyntaxError):
        return s
    return value if isinstance(value, str) else s


def parse_validation_error(message: str) -> RouteDecodeError:
    """
    Translate a msgspec validation message into a RouteDecodeError.

    >>> parse_validation_error('Object missing required field `summary` - at `$.routes[0].legs[0]`').path
    'routes[0].legs[0].summary'
    >>> parse_validation_error("Invalid enum value 'teleport'").value
    'teleport'
    >>> parse_validation_error("Invalid enum value 'off\\\\nramp'").value
    'off\\nramp'
    >>> parse_validation_error('Number out of range - at `$.routes[0].distance`').expected
    'finite number'
    >>> parse_validation_error('Expected `int`, got `str` - at `$.waypoints[0].location[0]`').expected
    'int'
    """
    match = _LOCATION_RE.match(message)
    assert match is not None, 'Location pattern must match any message'
    detail: str = match['detail']
    path = format_json_path(match['path'] or '$')

    if (m := _MISSING_FIELD_RE.match(detail)) is not None:
        return MissingFieldError(join_json_path(path, m['field']))
    if (m := _UNKNOWN_VARIANT_RE.match(detail)) is not None:
        return UnknownVariantError(path, _unrepr(m['value']))
    if (m := _EXPECTED_RE.match(detail)) is not None:
        return TypeMismatchError(path, m['expected'].replace('`', ''))
    if detail == 'Number out of range':
        return TypeMismatchError(path, 'finite number')
    return TypeMismatchError(path, detail)
