from pathlib import Path
from typing import Any

import msgspec
import pytest

_ROUTE_DOCUMENT = Path(__file__).parent.joinpath('data', 'osrm_route.json').read_bytes()


@pytest.fixture
def route_document() -> dict[str, Any]:
    """Fresh, mutable copy of a complete route service response."""
    return msgspec.json.decode(_ROUTE_DOCUMENT)


@pytest.fixture
def route_buffer() -> bytes:
    return _ROUTE_DOCUMENT
