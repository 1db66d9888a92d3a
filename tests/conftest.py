"""Shared fixtures for the LinkedIn API MCP tests."""

from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest

from linkedin_api_mcp.catalog import ToolCatalog
from linkedin_api_mcp.dispatcher import Dispatcher


class RecordingClient:
    """Fake remote client that records calls and replies with a canned envelope."""

    def __init__(self, envelope: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.envelope = envelope if envelope is not None else {"status": "ok"}
        self.error = error
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        self.calls.append((endpoint, dict(params or {})))
        if self.error is not None:
            raise self.error
        return self.envelope


@pytest.fixture
def catalog() -> ToolCatalog:
    return ToolCatalog()


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def dispatcher(recording_client: RecordingClient, catalog: ToolCatalog) -> Dispatcher:
    return Dispatcher(recording_client, catalog)


def make_profile(experience_count: int = 7) -> Dict[str, Any]:
    """A raw profile element shaped like a HarvestAPI /profile reply."""
    return {
        "id": "ACoAAAEkwwAB",
        "publicIdentifier": "satyanadella",
        "linkedinUrl": "https://www.linkedin.com/in/satyanadella",
        "firstName": "Satya",
        "lastName": "Nadella",
        "headline": "Chairman and CEO at Microsoft",
        "about": None,
        "location": {"linkedinText": "Redmond, Washington, United States", "countryCode": "US"},
        "profilePicture": {"url": "https://media.licdn.com/photo.jpg", "sizes": []},
        "premium": True,
        "influencer": True,
        "verified": True,
        "openToWork": False,
        "hiring": False,
        "connectionsCount": 500,
        "followerCount": 11000000,
        "experience": [
            {
                "position": f"Role {index}",
                "companyName": "Microsoft",
                "location": "Redmond",
                "duration": "1 yr",
                "startDate": {"month": "Feb", "year": 2014, "text": "Feb 2014"},
                "endDate": {"text": "Present"},
                "description": None,
                "companyLogo": "https://media.licdn.com/logo.png",
            }
            for index in range(experience_count)
        ],
        "education": [
            {
                "title": "University of Chicago Booth School of Business",
                "degree": "MBA",
                "fieldOfStudy": None,
                "startDate": {"year": 1994},
                "endDate": {"year": 1996},
            }
        ],
        "skills": [{"name": "Leadership"}, {"name": "Cloud Computing"}],
        "certifications": [],
    }
