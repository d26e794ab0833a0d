from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.handle_resolver'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached per process; tests monkeypatch env between cases
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_profile():
    return {
        "id": 123456,
        "urn": "ACoAAB123",
        "username": "jane-doe",
        "firstName": "Jane",
        "lastName": "Doe",
        "isPremium": True,
        "isOpenToWork": False,
        "isHiring": True,
        "profilePictures": [
            {"url": "https://media.example.com/jane-100.jpg", "width": 100, "height": 100},
            {"url": "https://media.example.com/jane-400.jpg", "width": 400, "height": 400},
        ],
        "summary": "Builds data platforms.",
        "headline": "Staff Engineer at Acme",
        "geo": {"country": "Germany", "city": "Berlin", "full": "Berlin, Berlin, Germany", "countryCode": "de"},
        "skills": [{"name": "Python"}, {"name": " Kafka "}, {"name": ""}, {}],
        "educations": [
            {
                "start": {"year": 2008},
                "end": {"year": 2012},
                "schoolName": "TU Berlin",
                "degree": "BSc",
                "fieldOfStudy": "Computer Science",
                "logo": [{"url": ""}, {"url": "https://media.example.com/tu.png"}],
            }
        ],
        "position": [{"title": "Short list entry", "companyName": "Nowhere"}],
        "fullPositions": [
            {
                "title": "Engineer",
                "companyName": "Initech",
                "start": {"year": 2012, "month": 9},
                "end": {"year": 2016, "month": 3},
            },
            {
                "title": "Staff Engineer",
                "companyName": "Acme Corp",
                "companyURL": "https://www.linkedin.com/company/acme/",
                "companyIndustry": "Software",
                "companyStaffCountRange": "1001 - 5000",
                "location": "Berlin",
                "employmentType": "Full-time",
                "locationType": "Hybrid",
                "start": {"year": 2019, "month": 4},
                "end": {"year": 0},
            },
            {
                "title": "Senior Engineer",
                "companyName": "Globex",
                "start": {"year": 2016, "month": 4},
                "end": {"year": 2019, "month": 3},
            },
        ],
        "languages": [{"name": "English", "proficiency": "FULL_PROFESSIONAL"}, {"name": "German"}],
        "certifications": [{"name": "CKA", "issuer": "CNCF", "issued": "2021-05"}],
        "projects": {"total": 1, "items": [{"title": "Streaming ETL", "description": "Kafka to lake"}]},
        "supportedLocales": [{"country": "US", "language": "en"}, "de_DE"],
        "multiLocaleFirstName": {"en": "Jane", "de": "Jane"},
        "multiLocaleHeadline": {"en": "Staff Engineer at Acme"},
        "someFutureField": {"nested": True},
    }
