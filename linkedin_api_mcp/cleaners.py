# linkedin_api_mcp/cleaners.py
"""
Per-entity projections of raw HarvestAPI objects.

Each cleaner keeps the handful of fields an agent can act on and drops the
decorative or internal ones. Cleaners are pure and total: any field may be
missing or of an unexpected type, in which case the output field is ``None``
(or an empty list for list-valued fields). A ``None`` or non-mapping input
yields ``None``.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

Record = Dict[str, Any]


def _dig(source: Any, *path: str) -> Any:
    """Follow ``path`` through nested mappings, returning None on any miss."""
    current = source
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _first(*values: Any) -> Any:
    """Return the first truthy value, mirroring ``a || b`` fallbacks."""
    for value in values:
        if value:
            return value
    return None


def _items(source: Any, key: str) -> List[Any]:
    value = _dig(source, key)
    return value if isinstance(value, list) else []


def _date_text(value: Any) -> Optional[str]:
    """Normalize a date that is either a ``{text, year, month}`` object or a string."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        text = value.get("text")
        if text:
            return str(text)
        year, month = value.get("year"), value.get("month")
        if year and month:
            return f"{month} {year}"
        if year:
            return str(year)
    return None


def _period(entry: Any) -> Optional[str]:
    period = _dig(entry, "period")
    if period:
        return str(period)
    start = _dig(entry, "startDate", "year") or ""
    end = _dig(entry, "endDate", "year") or ""
    joined = f"{start}-{end}".strip("-")
    return joined or None


def _experience(entry: Any) -> Record:
    return {
        "position": _dig(entry, "position"),
        "company": _dig(entry, "companyName"),
        "location": _dig(entry, "location"),
        "duration": _dig(entry, "duration"),
        "startDate": _date_text(_dig(entry, "startDate")),
        "endDate": _date_text(_dig(entry, "endDate")),
        "description": _dig(entry, "description"),
    }


def _education(entry: Any) -> Record:
    return {
        "school": _first(_dig(entry, "schoolName"), _dig(entry, "title")),
        "degree": _dig(entry, "degree"),
        "field": _dig(entry, "fieldOfStudy"),
        "period": _period(entry),
    }


def _certification(entry: Any) -> Record:
    return {
        "title": _dig(entry, "title"),
        "issuedBy": _dig(entry, "issuedBy"),
        "issuedAt": _dig(entry, "issuedAt"),
    }


def _skill(entry: Any) -> Optional[str]:
    if isinstance(entry, str):
        return entry
    return _dig(entry, "name")


def clean_profile(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    full_name = " ".join(
        part for part in (_dig(raw, "firstName"), _dig(raw, "lastName")) if isinstance(part, str) and part
    ).strip()
    return {
        "id": raw.get("id"),
        "publicIdentifier": raw.get("publicIdentifier"),
        "linkedinUrl": raw.get("linkedinUrl"),
        "name": full_name or None,
        "headline": raw.get("headline"),
        "about": raw.get("about"),
        "location": _dig(raw, "location", "linkedinText"),
        "photo": _first(raw.get("photo"), _dig(raw, "profilePicture", "url")),
        "premium": raw.get("premium"),
        "influencer": raw.get("influencer"),
        "verified": raw.get("verified"),
        "openToWork": raw.get("openToWork"),
        "hiring": raw.get("hiring"),
        "connections": raw.get("connectionsCount"),
        "followers": raw.get("followerCount"),
        "experience": [_experience(entry) for entry in _items(raw, "experience")],
        "education": [_education(entry) for entry in _items(raw, "education")],
        "skills": [_skill(entry) for entry in _items(raw, "skills")],
        "certifications": [_certification(entry) for entry in _items(raw, "certifications")],
    }


def clean_profile_search_hit(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "id": raw.get("id"),
        "name": raw.get("name"),
        "position": raw.get("position"),
        "location": _dig(raw, "location", "linkedinText"),
        "linkedinUrl": raw.get("linkedinUrl"),
        "publicIdentifier": raw.get("publicIdentifier"),
    }


def _headquarter(raw: Mapping) -> Optional[str]:
    locations = [location for location in _items(raw, "locations") if isinstance(location, Mapping)]
    if not locations:
        return None
    flagged = next((location for location in locations if location.get("headquarter")), locations[0])
    return _first(_dig(flagged, "parsed", "text"), flagged.get("city"))


def clean_company(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "id": raw.get("id"),
        "universalName": raw.get("universalName"),
        "linkedinUrl": raw.get("linkedinUrl"),
        "name": raw.get("name"),
        "website": raw.get("website"),
        "logo": raw.get("logo"),
        "description": raw.get("description"),
        "employeeCount": raw.get("employeeCount"),
        "followers": raw.get("followerCount"),
        "headquarter": _headquarter(raw),
    }


def _salary(raw: Mapping) -> Optional[str]:
    salary = raw.get("salary")
    if isinstance(salary, str):
        return salary or None
    if not isinstance(salary, Mapping):
        return None
    if salary.get("text"):
        return str(salary["text"])
    minimum, maximum = salary.get("min"), salary.get("max")
    if minimum and maximum:
        return f"{minimum}-{maximum} {salary.get('currency') or ''}".strip()
    return None


def clean_job(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "id": raw.get("id"),
        "title": raw.get("title"),
        "linkedinUrl": _first(raw.get("linkedinUrl"), raw.get("url")),
        "state": raw.get("jobState"),
        "postedDate": raw.get("postedDate"),
        "location": _dig(raw, "location", "linkedinText"),
        "company": _first(_dig(raw, "company", "name"), raw.get("companyName")),
        "companyUrl": _first(_dig(raw, "company", "linkedinUrl"), raw.get("companyLink")),
        "salary": _salary(raw),
        "employmentType": raw.get("employmentType"),
        "workplaceType": raw.get("workplaceType"),
        "easyApply": raw.get("easyApply"),
        "description": raw.get("descriptionText"),
    }


def clean_job_search_hit(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "id": raw.get("id"),
        "title": raw.get("title"),
        "url": raw.get("url"),
        "postedDate": raw.get("postedDate"),
        "company": _dig(raw, "company", "name"),
        "location": _dig(raw, "location", "linkedinText"),
        "easyApply": raw.get("easyApply"),
    }


def clean_post(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    images = raw.get("postImages")
    return {
        "id": raw.get("id"),
        "linkedinUrl": raw.get("linkedinUrl"),
        "content": raw.get("content"),
        "authorName": _dig(raw, "author", "name"),
        "authorType": _dig(raw, "author", "type"),
        "postedAgo": _first(
            _dig(raw, "postedAt", "postedAgoText"), _dig(raw, "postedAt", "postedAgoShort")
        ),
        "likes": _dig(raw, "engagement", "likes"),
        "comments": _dig(raw, "engagement", "comments"),
        "shares": _dig(raw, "engagement", "shares"),
        "hasVideo": bool(raw.get("postVideo")),
        "hasImages": isinstance(images, list) and len(images) > 0,
    }


def clean_group(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "id": raw.get("id"),
        "linkedinUrl": raw.get("linkedinUrl"),
        "name": raw.get("name"),
        "members": _first(raw.get("members"), raw.get("memberCount")),
        "summary": _first(raw.get("summary"), raw.get("description")),
    }


def clean_geo_id(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {"geoId": raw.get("geoId"), "title": raw.get("title")}


def clean_comment(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "id": raw.get("id"),
        "content": raw.get("content"),
        "authorName": _dig(raw, "author", "name"),
        "postedAgo": _dig(raw, "postedAt", "postedAgoText"),
        "likes": _dig(raw, "engagement", "likes"),
    }


def clean_reaction(raw: Any) -> Optional[Record]:
    if not isinstance(raw, Mapping):
        return None
    return {
        "name": raw.get("name"),
        "headline": raw.get("headline"),
        "reactionType": raw.get("reactionType"),
        "linkedinUrl": raw.get("linkedinUrl"),
    }


CLEANERS: Dict[str, Callable[[Any], Optional[Record]]] = {
    "profile": clean_profile,
    "profile_search_hit": clean_profile_search_hit,
    "company": clean_company,
    "job": clean_job,
    "job_search_hit": clean_job_search_hit,
    "post": clean_post,
    "group": clean_group,
    "geo_id": clean_geo_id,
    "comment": clean_comment,
    "reaction": clean_reaction,
}

# List-valued fields of a shaped profile, bounded by ``max_items``
PROFILE_LIST_FIELDS = ("experience", "education", "skills", "certifications")
