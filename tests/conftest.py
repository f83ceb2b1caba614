import os
from pathlib import Path

import pytest

# Lowest cost bcrypt accepts.
os.environ.setdefault("BCRYPT_ROUNDS", "4")


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_configure(config):
    """Select the Protean config overlay before the domain is first imported."""
    os.environ["PROTEAN_ENV"] = config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from protean.integrations.pytest import DomainFixture
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    """Run each test inside the storefront domain context, with empty stores."""
    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture()
def client():
    """API client; the domain is already initialised by the session fixture."""
    from fastapi.testclient import TestClient
    from storefront.app import create_app

    app = create_app(init_domain=False, seed_catalogue=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def signed_in_client(client):
    """Client whose session cookie belongs to a freshly registered shopper."""
    response = client.post("/api/auth/register", json={"email": "shopper@example.com", "password": "s3cret-pass"})
    assert response.status_code == 201
    return client
