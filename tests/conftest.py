import pytest

from tenant import TenantConfig

TENANT_VARS = ('TENANT_ID', 'ENVIRONMENT', 'DATABASE_URL', 'API_URL', 'REGION', 'APP_VERSION')


@pytest.fixture
def clean_env(monkeypatch):
    for key in TENANT_VARS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def acme():
    return TenantConfig(
        name='acme',
        environment='staging',
        database='postgresql://db.acme:5432/acme',
        api_url='https://api.acme.test',
        region='eu-west-1',
        version='2.3.1',
    )


@pytest.fixture
def sleeps():
    return []


class FixedRandom:
    """Stand-in for random.Random that always picks the lower bound."""

    def randint(self, a, b):
        return a


@pytest.fixture
def fixed_rng():
    return FixedRandom()
