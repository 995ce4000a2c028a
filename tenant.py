import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone

DEFAULT_REGION = 'us-east-1'
PRODUCTION = 'production'


def _env(environ, key, default):
    # empty values count as unset
    return environ.get(key) or default


@dataclass(frozen=True)
class TenantConfig:
    """Tenant identity and deployment metadata, read once at startup."""

    name: str = 'default'
    environment: str = 'development'
    database: str = 'postgresql://localhost:5432/default'
    api_url: str = 'https://api.example.com'
    region: str = DEFAULT_REGION
    version: str = '1.0.0'

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            name=_env(environ, 'TENANT_ID', defaults.name),
            environment=_env(environ, 'ENVIRONMENT', defaults.environment),
            database=_env(environ, 'DATABASE_URL', defaults.database),
            api_url=_env(environ, 'API_URL', defaults.api_url),
            region=_env(environ, 'REGION', defaults.region),
            version=_env(environ, 'APP_VERSION', defaults.version),
        )

    def features(self):
        return {
            'analytics': self.environment == PRODUCTION,
            'debugMode': self.environment != PRODUCTION,
            'multiRegion': self.region != DEFAULT_REGION,
        }

    def to_dict(self):
        return {
            'name': self.name,
            'environment': self.environment,
            'database': self.database,
            'apiUrl': self.api_url,
            'region': self.region,
            'version': self.version,
        }


def utc_timestamp(seconds=None):
    """ISO-8601 UTC with millisecond precision and a trailing Z."""
    if seconds is None:
        moment = datetime.now(timezone.utc)
    else:
        moment = datetime.fromtimestamp(seconds, timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def configure_logging(environ=None):
    if environ is None:
        environ = os.environ
    logging.basicConfig(
        level=environ.get('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
