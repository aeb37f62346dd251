import logging

import httpx
import msgspec

from route_schema.config import HTTP_TIMEOUT, USER_AGENT


async def _log_http_request(r: httpx.Request) -> None:
    logging.debug('Client HTTP request: %s %s', r.method, r.url)


async def _log_http_response(r: httpx.Response) -> None:
    if r.is_success:
        logging.debug('Client HTTP response: %s %s %s', r.status_code, r.reason_phrase, r.url)
    else:
        logging.info('Client HTTP response: %s %s %s', r.status_code, r.reason_phrase, r.url)


HTTP = httpx.AsyncClient(
    headers={'User-Agent': USER_AGENT},
    timeout=HTTP_TIMEOUT.total_seconds(),
    follow_redirects=True,
    event_hooks={
        'request': [_log_http_request],
        'response': [_log_http_response],
    },
)

MSGSPEC_JSON_ENCODER = msgspec.json.Encoder(decimal_format='number')


def format_json_path(path: str) -> str:
    """
    Convert a msgspec JSON path into a dotted field path.

    >>> format_json_path('$.routes[0].legs[1]')
    'routes[0].legs[1]'
    >>> format_json_path('$')
    ''
    """
    return path.removeprefix('$').removeprefix('.')


def join_json_path(path: str, name: str) -> str:
    """
    Append a field name to a dotted field path.

    >>> join_json_path('routes[0]', 'legs')
    'routes[0].legs'
    >>> join_json_path('', 'code')
    'code'
    """
    return f'{path}.{name}' if path else name
