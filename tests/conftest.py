"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample employee payloads
"""

import os

# Keep the application's own engine in memory and skip the startup sample
# data; must happen before app.core.config is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models.employee import Employee  # noqa: F401  registers the table
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_employee_data():
    """Sample employee payload as a client would send it"""
    return {
        "firstName": "Alice",
        "lastName": "Walker",
        "email": "alice.walker@example.com",
        "phoneNumber": "111-222-3333",
        "position": "Data Scientist",
        "salary": 88000.0,
        "hireDate": "2023-04-01",
    }


@pytest.fixture
def employee_list():
    """Three employees: two share a last name, two share a position"""
    return [
        {
            "firstName": "John",
            "lastName": "Doe",
            "email": "john.doe@example.com",
            "phoneNumber": "123-456-7890",
            "position": "Software Engineer",
            "salary": 75000.0,
            "hireDate": "2020-01-15",
        },
        {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane.doe@example.com",
            "phoneNumber": "987-654-3210",
            "position": "Product Manager",
            "salary": 95000.0,
            "hireDate": "2019-05-20",
        },
        {
            "firstName": "Bob",
            "lastName": "Smith",
            "email": "bob.smith@example.com",
            "phoneNumber": "555-123-4567",
            "position": "Software Engineer",
            "salary": 80000.0,
            "hireDate": "2021-03-10",
        },
    ]


@pytest.fixture
def seeded_employees(client, employee_list):
    """Create the employee_list through the API and return the responses"""
    return [client.post("/api/employees", json=data).json() for data in employee_list]
