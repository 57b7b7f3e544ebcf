"""
Pytest configuration and fixtures

Every test gets a fresh app, so the memory store starts empty.
"""
import pytest

from app import create_app
from app.extensions import db
from app.services.storage import DatabaseStorage, MemoryStorage
from app.services.validation import validate_clinical_input
from config import TestConfig


class DatabaseTestConfig(TestConfig):
    STORAGE_BACKEND = "database"


@pytest.fixture
def healthy_payload():
    """Example scenario 1: risk score 0."""
    return {
        "age": 45,
        "bloodPressure": 80,
        "specificGravity": 1.020,
        "albumin": 0,
        "sugar": 0,
        "bloodUrea": 36,
        "serumCreatinine": 1.2,
        "hemoglobin": 15.4,
        "hypertension": False,
        "diabetesMellitus": False,
    }


@pytest.fixture
def ckd_payload(healthy_payload):
    """Example scenario 2: risk score 10."""
    return {
        **healthy_payload,
        "serumCreatinine": 1.3,
        "albumin": 3,
        "hemoglobin": 10,
        "diabetesMellitus": True,
    }


@pytest.fixture
def healthy_input(healthy_payload):
    return validate_clinical_input(healthy_payload)


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_app():
    app = create_app(DatabaseTestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def db_client(db_app):
    return db_app.test_client()


@pytest.fixture(params=["memory", "database"])
def store(request):
    """Each store variant, ready to use."""
    if request.param == "memory":
        yield MemoryStorage()
        return

    app = create_app(DatabaseTestConfig)
    with app.app_context():
        yield DatabaseStorage()
        db.session.remove()
        db.drop_all()
