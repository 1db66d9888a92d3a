"""Tests for the per-entity projection functions."""

import pytest

from conftest import make_profile
from linkedin_api_mcp import cleaners
from linkedin_api_mcp.cleaners import CLEANERS


@pytest.mark.parametrize("entity", sorted(CLEANERS))
@pytest.mark.parametrize("raw", [None, "text", 42, []])
def test_non_mapping_input_yields_none(entity, raw):
    assert CLEANERS[entity](raw) is None


@pytest.mark.parametrize("entity", sorted(CLEANERS))
def test_empty_mapping_is_tolerated(entity):
    """Every projection is total: missing fields become None or empty lists."""
    cleaned = CLEANERS[entity]({})
    assert isinstance(cleaned, dict)
    for value in cleaned.values():
        assert value in (None, [], False)


def test_profile_projection():
    cleaned = cleaners.clean_profile(make_profile(experience_count=2))
    assert cleaned["name"] == "Satya Nadella"
    assert cleaned["location"] == "Redmond, Washington, United States"
    assert cleaned["photo"] == "https://media.licdn.com/photo.jpg"
    assert cleaned["connections"] == 500
    assert cleaned["followers"] == 11000000
    assert cleaned["experience"][0] == {
        "position": "Role 0",
        "company": "Microsoft",
        "location": "Redmond",
        "duration": "1 yr",
        "startDate": "Feb 2014",
        "endDate": "Present",
        "description": None,
    }
    assert cleaned["education"] == [
        {
            "school": "University of Chicago Booth School of Business",
            "degree": "MBA",
            "field": None,
            "period": "1994-1996",
        }
    ]
    assert cleaned["skills"] == ["Leadership", "Cloud Computing"]
    assert "profilePicture" not in cleaned


def test_profile_name_variants():
    assert cleaners.clean_profile({"firstName": "Ada"})["name"] == "Ada"
    assert cleaners.clean_profile({"lastName": "Lovelace"})["name"] == "Lovelace"
    assert cleaners.clean_profile({"firstName": None, "lastName": None})["name"] is None


def test_profile_dates_accept_plain_strings_and_partial_periods():
    raw = {
        "experience": [{"startDate": "2019", "endDate": ""}],
        "education": [{"schoolName": "MIT", "startDate": {"year": 2001}}],
    }
    cleaned = cleaners.clean_profile(raw)
    assert cleaned["experience"][0]["startDate"] == "2019"
    assert cleaned["experience"][0]["endDate"] is None
    assert cleaned["education"][0]["school"] == "MIT"
    assert cleaned["education"][0]["period"] == "2001"


def test_company_headquarter_prefers_flagged_location():
    raw = {
        "name": "Microsoft",
        "followerCount": 25,
        "locations": [
            {"city": "Dublin", "headquarter": False},
            {"city": "Redmond", "headquarter": True, "parsed": {"text": "Redmond, WA"}},
        ],
    }
    cleaned = cleaners.clean_company(raw)
    assert cleaned["headquarter"] == "Redmond, WA"
    assert cleaned["followers"] == 25

    assert cleaners.clean_company({"locations": [{"city": "Dublin"}]})["headquarter"] == "Dublin"


@pytest.mark.parametrize(
    "salary, expected",
    [
        ({"text": "$100K/yr - $150K/yr"}, "$100K/yr - $150K/yr"),
        ({"min": 100000, "max": 150000, "currency": "USD"}, "100000-150000 USD"),
        ({"min": 100000, "max": 150000}, "100000-150000"),
        ({"min": 100000}, None),
        (None, None),
    ],
)
def test_job_salary(salary, expected):
    assert cleaners.clean_job({"salary": salary})["salary"] == expected


def test_job_projection_fallbacks():
    cleaned = cleaners.clean_job(
        {"url": "https://www.linkedin.com/jobs/view/1", "companyName": "Acme", "jobState": "LISTED"}
    )
    assert cleaned["linkedinUrl"] == "https://www.linkedin.com/jobs/view/1"
    assert cleaned["company"] == "Acme"
    assert cleaned["state"] == "LISTED"


def test_post_media_flags():
    with_media = cleaners.clean_post({"postVideo": {"url": "v.mp4"}, "postImages": [{"url": "a.png"}]})
    assert with_media["hasVideo"] is True
    assert with_media["hasImages"] is True

    without_media = cleaners.clean_post({"postImages": []})
    assert without_media["hasVideo"] is False
    assert without_media["hasImages"] is False


def test_post_engagement_and_author():
    cleaned = cleaners.clean_post(
        {
            "author": {"name": "Satya Nadella", "type": "profile"},
            "postedAt": {"postedAgoShort": "2d"},
            "engagement": {"likes": 10, "comments": 2, "shares": 1},
        }
    )
    assert cleaned["authorName"] == "Satya Nadella"
    assert cleaned["postedAgo"] == "2d"
    assert (cleaned["likes"], cleaned["comments"], cleaned["shares"]) == (10, 2, 1)


def test_group_fallbacks():
    cleaned = cleaners.clean_group({"memberCount": 300, "description": "Python people"})
    assert cleaned["members"] == 300
    assert cleaned["summary"] == "Python people"


def test_small_projections():
    assert cleaners.clean_geo_id({"geoId": "103644278", "title": "United States", "extra": 1}) == {
        "geoId": "103644278",
        "title": "United States",
    }
    assert cleaners.clean_reaction({"name": "Ada", "reactionType": "LIKE"})["reactionType"] == "LIKE"
    assert cleaners.clean_comment({"author": {"name": "Ada"}})["authorName"] == "Ada"
    assert cleaners.clean_job_search_hit({"company": {"name": "Acme"}})["company"] == "Acme"
    assert cleaners.clean_profile_search_hit({"location": {"linkedinText": "Paris"}})["location"] == "Paris"
