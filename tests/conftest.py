import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

# La config lit DATABASE_URL à l'import: à fixer avant tout import de app.*
os.environ["DATABASE_URL"] = f"sqlite:///{ROOT / 'test.db'}"

from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_tables():
    """Tables vides pour chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def work_category(client):
    """Catégorie Work (#0000ff) créée via l'API"""
    return client.post("/api/categories", json={"name": "Work", "color": "#0000ff"}).json()
