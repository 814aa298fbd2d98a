"""
Central pytest configuration for the clinic directory tests.

Provides the Flask application against an in-memory SQLite database loaded
with the clinic fixture, a standalone seeded session for repository tests,
and in-memory entity collections for the service unit tests.
"""

import os

# Test database configuration (set early so import-time engines use it)
TEST_DATABASE_URL = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TESTING"] = "true"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.setdefault("FLASK_ENV", "development")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.db import register_sqlite_pragmas  # noqa: E402
from app.db.seed import OWNERS, VETS, seed_clinic_data  # noqa: E402
from app.db.session import Base, SessionLocal, create_tables, drop_tables  # noqa: E402
from app.domain.entities import Owner, Vet  # noqa: E402
from app.repositories.in_memory import InMemoryOwnerReader, InMemoryVetReader  # noqa: E402

# Import markers from config modules
from config.markers import pytest_collection_modifyitems, pytest_configure  # noqa: E402,F401


# =====================================================
# IN-MEMORY DATA FIXTURES
# =====================================================


def build_seed_vets():
    """Domain vets matching the seeded database (ids follow insertion order)."""
    return [
        Vet(id=i, first_name=first, last_name=last, specialties=names)
        for i, (first, last, names) in enumerate(VETS, start=1)
    ]


def build_seed_owners():
    return [
        Owner(
            id=i,
            first_name=first,
            last_name=last,
            address=address,
            city=city,
            telephone=telephone,
        )
        for i, (first, last, address, city, telephone, _pets) in enumerate(OWNERS, start=1)
    ]


@pytest.fixture
def seed_vets():
    return build_seed_vets()


@pytest.fixture
def seed_owners():
    return build_seed_owners()


@pytest.fixture
def vet_reader(seed_vets):
    """In-memory vet collection with the clinic's six vets."""
    return InMemoryVetReader(seed_vets, specialty_names=["radiology", "surgery", "dentistry"])


@pytest.fixture
def owner_reader(seed_owners):
    """In-memory owner collection with the clinic's ten owners."""
    return InMemoryOwnerReader(seed_owners)


@pytest.fixture
def davis_owner_reader():
    """Eight owners named Davis plus two others."""
    first_names = ["Betty", "Harold", "Ann", "Bob", "Carl", "Dana", "Eve", "Fred"]
    owners = [
        Owner(
            id=i,
            first_name=name,
            last_name="Davis",
            city="Madison",
            telephone=f"60855500{i:02d}",
        )
        for i, name in enumerate(first_names, start=1)
    ]
    owners.append(Owner(id=9, first_name="George", last_name="Franklin", city="Madison", telephone="6085551023"))
    owners.append(Owner(id=10, first_name="Jeff", last_name="Black", city="Monona", telephone="6085555387"))
    return InMemoryOwnerReader(owners)


# =====================================================
# DATABASE FIXTURES
# =====================================================


@pytest.fixture
def seeded_session():
    """Session on a private in-memory SQLite database holding the clinic fixture."""
    import app.db.base  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_pragmas(engine)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    seed_clinic_data(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


# =====================================================
# FLASK APPLICATION FIXTURES
# =====================================================


@pytest.fixture
def app():
    """Create the Flask application on a freshly seeded in-memory database."""
    from app.main import create_app

    drop_tables()
    create_tables()

    application = create_app({"TESTING": True, "SEED_ON_STARTUP": False})
    with SessionLocal() as db:
        seed_clinic_data(db)

    yield application

    drop_tables()


@pytest.fixture
def client(app):
    """Create a test client for Flask application with proper context."""
    with app.test_client() as client:
        with app.app_context():
            yield client
