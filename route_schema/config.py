from datetime import timedelta
from logging.config import dictConfig
from typing import Annotated, Literal

from githead import githead
from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict

from route_schema.models.osrm_profile import OSRMProfile


def _strip_validator(chars: str, /) -> BeforeValidator:
    """Create a validator that strips the given characters from the input text."""

    def validate(v):
        return str(v).strip(chars)

    return BeforeValidator(validate)


type _StripSlash = Annotated[str, _strip_validator('/')]


class Settings(BaseSettings):
    """
    Environment and .env overridable settings.
    """

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    # Core settings
    ENV: Literal['dev', 'test', 'prod'] = 'prod'
    LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING'] | None = None

    # External services
    OSRM_URL: _StripSlash = 'https://router.project-osrm.org'
    OSRM_PROFILE: OSRMProfile = 'driving'

    # HTTP settings
    HTTP_TIMEOUT: timedelta = timedelta(seconds=20)


_settings = Settings()

ENV = _settings.ENV
LOG_LEVEL = _settings.LOG_LEVEL
OSRM_URL = _settings.OSRM_URL
OSRM_PROFILE = _settings.OSRM_PROFILE
HTTP_TIMEOUT = _settings.HTTP_TIMEOUT

# -------------------- Constant or derived configuration --------------------

try:
    VERSION = 'git#' + githead()[:7]
except FileNotFoundError:
    VERSION = 'dev'  # pyright: ignore [reportConstantRedefinition]

NAME = 'route-schema'
WEBSITE = 'https://project-osrm.org/docs/v5.24.0/api/#route-service'
USER_AGENT = f'{NAME}/{VERSION} (+{WEBSITE})'

if LOG_LEVEL is None:
    LOG_LEVEL = 'INFO' if ENV == 'prod' else 'DEBUG'  # pyright: ignore[reportConstantRedefinition]

dictConfig({
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'default': {
            'formatter': 'default',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'root': {'handlers': ['default'], 'level': LOG_LEVEL},
        **{
            # reduce logging verbosity of some modules
            module: {'handlers': [], 'level': 'INFO'}
            for module in (
                'hpack',
                'httpx',
                'httpcore',
            )
        },
    },
})
