import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config environment before the domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


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
def bookstore_bed():
    from bookstore.domain import bookstore

    bed = DomainFixture(bookstore)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(bookstore_bed):
    with bookstore_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def domestic_address():
    from bookstore.shared.address import Address

    return Address(street="123 Elm Street", city="Springfield", state="IL", postal_code="62704", country="USA")


@pytest.fixture()
def foreign_address():
    from bookstore.shared.address import Address

    return Address(street="1 Rue de Rivoli", city="Paris", postal_code="75001", country="France")


@pytest.fixture()
def customer(domestic_address):
    from bookstore.identity.customer import Customer

    return Customer.register(name="John Doe", email="john@example.com", shipping_address=domestic_address)


@pytest.fixture()
def book():
    from bookstore.catalogue.book import Book

    return Book.publish(
        title="Clean Architecture",
        author="Robert C. Martin",
        price=50.0,
        isbn="9780134494166",
    )


@pytest.fixture()
def other_book():
    from bookstore.catalogue.book import Book

    return Book.publish(
        title="Domain-Driven Design",
        author="Eric Evans",
        price=100.0,
        isbn="0-321-12521-5",
    )
