import os

# must be set before diseasematch.database creates its engine
os.environ["DISEASEMATCH_DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from diseasematch.catalog import InMemoryCatalog
from diseasematch.database import Base


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Small catalog with no accidental fuzzy overlap between its symptoms."""
    return InMemoryCatalog.from_mappings([
        {"id": 1, "name": "Influenza", "symptoms": ["Fever", "Chills", "Muscle Aches"],
         "causes": ["Influenza A virus"], "severity": "medium", "category": "Respiratory"},
        {"id": 2, "name": "Pneumonia", "symptoms": ["fever", "chills", "chest pain"],
         "severity": "high", "category": "Respiratory"},
        {"id": 3, "name": "Common Cold", "symptoms": ["runny nose", "sneezing"], "severity": "low"},
    ])


@pytest.fixture
def session_factory():
    """Isolated in-memory database with the schema created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def client():
    from diseasematch.main import app

    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
