import json

import pytest
from fastapi.testclient import TestClient

from advocates import repository
from advocates.schemas import Advocate


def make_row(
    id_,
    first_name,
    last_name,
    city,
    degree="MD",
    specialties=("General care",),
    years=5,
    phone=5551234567,
):
    return {
        "id": id_,
        "first_name": first_name,
        "last_name": last_name,
        "city": city,
        "degree": degree,
        # asyncpg returns jsonb columns as text by default.
        "specialties": json.dumps(list(specialties)),
        "years_of_experience": years,
        "phone_number": phone,
        "created_at": None,
    }


SAMPLE_ROWS = [
    make_row(1, "John", "Doe", "Austin", "MD", ["Cardiology", "Sleep issues"], 10, 5551234567),
    make_row(2, "Jane", "Smith", "Dallas", "PhD", ["Cardiovascular health", "Nutrition"], 8, 5559876543),
    make_row(3, "Alice", "Johnson", "Austin", "MSW", ["Trauma & PTSD"], 12, 5554567890),
    make_row(4, "Michael", "Brown", "Houston", "MD", ["Diabetes"], 3, 5556543210),
    make_row(5, "Emily", "Davis", "Dallas", "PhD", ["Pediatrics", "Cardio rehab"], 15, 5553216540),
]


@pytest.fixture
def sample_rows():
    return [dict(row) for row in SAMPLE_ROWS]


@pytest.fixture
def sample_advocates(sample_rows):
    return [
        Advocate(
            first_name=row["first_name"],
            last_name=row["last_name"],
            city=row["city"],
            degree=row["degree"],
            specialties=json.loads(row["specialties"]),
            years_of_experience=str(row["years_of_experience"]),
            phone_number=str(row["phone_number"]),
        )
        for row in sample_rows
    ]


@pytest.fixture
def repo_rows(monkeypatch, sample_rows):
    """
    Replace the DB query with canned rows. Returns a call log.
    """
    calls = []

    async def _list_advocates():
        calls.append("list_advocates")
        return sample_rows

    monkeypatch.setattr(repository, "list_advocates", _list_advocates)
    return calls


@pytest.fixture
def repo_failure(monkeypatch):
    async def _list_advocates():
        raise ConnectionError("connection refused")

    monkeypatch.setattr(repository, "list_advocates", _list_advocates)


@pytest.fixture
def app():
    import main

    return main.app


@pytest.fixture
def client(app):
    # Not used as a context manager, so the lifespan (DB pool) never runs.
    return TestClient(app)
