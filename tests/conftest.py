import pytest
import requests


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._payload


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; returns an installer that records each call."""
    calls = []

    def install(payload=None, status_code=200, exc=None, invalid_json=False):
        def get(url, timeout=None):
            calls.append((url, timeout))
            if exc is not None:
                raise exc
            return FakeResponse(payload, status_code, invalid_json)

        monkeypatch.setattr(requests, "get", get)
        return calls

    return install


@pytest.fixture
def sample_advocates():
    """Four advocates covering names, cities, degrees, specialties and numbers."""
    return [
        {
            "id": 1,
            "firstName": "John",
            "lastName": "Smith",
            "city": "New York",
            "degree": "MD",
            "specialties": ["Anxiety", "Depression"],
            "yearsOfExperience": 10,
            "phoneNumber": 5551234567,
        },
        {
            "id": 2,
            "firstName": "Jane",
            "lastName": "Doe",
            "city": "Los Angeles",
            "degree": "PhD",
            "specialties": ["Trauma", "PTSD"],
            "yearsOfExperience": 8,
            "phoneNumber": 5559876543,
        },
        {
            "id": 3,
            "firstName": "Michael",
            "lastName": "Johnson",
            "city": "Chicago",
            "degree": "LCSW",
            "specialties": ["Substance Abuse", "Family Therapy"],
            "yearsOfExperience": 15,
            "phoneNumber": 5555555555,
        },
        {
            "id": 4,
            "firstName": "Sarah",
            "lastName": "Wilson",
            "city": "Miami",
            "degree": "MD",
            "specialties": ["Bipolar", "Medication Management"],
            "yearsOfExperience": 12,
            "phoneNumber": 5551111111,
        },
    ]
