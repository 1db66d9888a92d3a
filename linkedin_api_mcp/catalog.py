# linkedin_api_mcp/catalog.py
"""
Static tool catalog for the LinkedIn API MCP server.

Declares, for each of the 17 tools, the remote endpoint, the parameter schema
(type, advisory enumerations, advertised defaults), the argument rules checked
before a call and the projection applied to the reply. Public parameter names
are the remote API's own names; ``ParameterSpec.query_name`` keeps the mapping
explicit so a public name can diverge without touching the dispatcher. The
local-only ``save_dir`` and ``max_items`` have no remote name.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, create_model

from linkedin_api_mcp.constants import (
    COMPANY_SIZES,
    DEFAULT_DETAIL_MAX_ITEMS,
    DEFAULT_LIST_MAX_ITEMS,
    EMPLOYMENT_TYPES,
    EXPERIENCE_LEVELS,
    MAX_ITEMS_PARAM,
    POSTED_LIMITS,
    SALARY_FLOORS,
    SAVE_DIR_PARAM,
    SORT_ORDERS,
    WORKPLACE_TYPES,
)

ParameterType = Literal["string", "integer", "boolean"]

Entity = Literal[
    "profile",
    "profile_search_hit",
    "company",
    "job",
    "job_search_hit",
    "post",
    "group",
    "geo_id",
    "comment",
    "reaction",
]

_PYTHON_TYPES: Dict[str, type] = {"string": str, "integer": int, "boolean": bool}


@dataclass(frozen=True)
class ParameterSpec:
    """Schema of a single tool parameter."""

    name: str
    type: ParameterType
    description: str
    enum: Optional[Tuple[str, ...]] = None
    default: Any = None
    query_name: Optional[str] = None

    @property
    def is_local(self) -> bool:
        """True when the parameter is consumed here and never sent upstream."""
        return self.query_name is None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        if self.name == MAX_ITEMS_PARAM:
            schema["minimum"] = 0
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    """A named tool: description, endpoint, parameters and argument rules."""

    name: str
    description: str
    endpoint: str
    entity: Entity
    parameters: Tuple[ParameterSpec, ...]
    many: bool = False
    required: Tuple[str, ...] = ()
    one_of: Tuple[str, ...] = ()
    default_max_items: Optional[int] = None
    _index: Dict[str, ParameterSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {spec.name: spec for spec in self.parameters})

    def parameter(self, name: str) -> Optional[ParameterSpec]:
        return self._index.get(name)

    @property
    def parameter_names(self) -> List[str]:
        return [spec.name for spec in self.parameters]

    @property
    def query_parameters(self) -> Tuple[ParameterSpec, ...]:
        return tuple(spec for spec in self.parameters if not spec.is_local)

    @cached_property
    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema advertised to MCP clients for this tool."""
        return {
            "type": "object",
            "properties": {spec.name: spec.json_schema() for spec in self.parameters},
            "required": list(self.required),
        }

    @cached_property
    def arguments_model(self) -> Type[BaseModel]:
        """Typed optional-field record used to validate call arguments.

        Every field defaults to ``None`` so that absent arguments stay absent
        from the outbound query. Advertised defaults are left to the remote
        API, except the item cap which is applied during shaping.
        """
        fields: Dict[str, Any] = {}
        for spec in self.parameters:
            python_type = _PYTHON_TYPES[spec.type]
            constraints: Dict[str, Any] = {"description": spec.description}
            if spec.name == MAX_ITEMS_PARAM:
                constraints["ge"] = 0
            if spec.query_name is not None:
                constraints["serialization_alias"] = spec.query_name
            fields[spec.name] = (Optional[python_type], Field(default=None, **constraints))

        model_name = "".join(part.capitalize() for part in self.name.split("_")) + "Arguments"
        return create_model(
            model_name,
            __config__=ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True),
            **fields,
        )


# Parameter helpers


def _string(
    name: str,
    description: str,
    enum: Optional[Tuple[str, ...]] = None,
    query_name: Optional[str] = None,
) -> ParameterSpec:
    return ParameterSpec(
        name=name,
        type="string",
        description=description,
        enum=enum,
        query_name=query_name or name,
    )


def _flag(name: str, description: str, default: Optional[bool] = None) -> ParameterSpec:
    return ParameterSpec(
        name=name,
        type="boolean",
        description=description,
        default=default,
        query_name=name,
    )


def _page() -> ParameterSpec:
    return ParameterSpec(
        name="page", type="integer", description="Page number", default=1, query_name="page"
    )


def _pagination_token() -> ParameterSpec:
    return _string("paginationToken", "Pagination token returned by a previous page of this listing")


def _posted_limit(description: str = "Filter by time: 24h, week, month") -> ParameterSpec:
    return _string("postedLimit", description, enum=POSTED_LIMITS)


def _sort_by() -> ParameterSpec:
    return _string("sortBy", "Sort by: relevance or date", enum=SORT_ORDERS)


def _save_dir() -> ParameterSpec:
    return ParameterSpec(
        name=SAVE_DIR_PARAM,
        type="string",
        description="Directory to save the cleaned JSON data (created if missing)",
    )


def _max_items(default: int, what: str = "results") -> ParameterSpec:
    return ParameterSpec(
        name=MAX_ITEMS_PARAM,
        type="integer",
        description=f"Maximum {what} (default: {default})",
        default=default,
    )


_SUFFIX = "Returns cleaned data as compact JSON."


TOOL_DEFINITIONS: Tuple[ToolDefinition, ...] = (
    # Profiles
    ToolDefinition(
        name="get_profile",
        description=f"Get LinkedIn profile information by URL, public identifier, or profile ID. {_SUFFIX}",
        endpoint="/profile",
        entity="profile",
        parameters=(
            _string("url", "LinkedIn profile URL"),
            _string("publicIdentifier", "Public identifier (last part of LinkedIn URL)"),
            _string("profileId", "LinkedIn profile ID"),
            _flag("findEmail", "Find email address for the profile", default=False),
            _flag("includeAboutProfile", "Include detailed about section", default=False),
            _save_dir(),
            _max_items(DEFAULT_DETAIL_MAX_ITEMS, "items in experience, education, skills and certifications"),
        ),
        one_of=("url", "publicIdentifier", "profileId"),
        default_max_items=DEFAULT_DETAIL_MAX_ITEMS,
    ),
    ToolDefinition(
        name="search_profiles",
        description=f"Search LinkedIn profiles by name, company, location. {_SUFFIX}",
        endpoint="/profile-search",
        entity="profile_search_hit",
        many=True,
        parameters=(
            _string("search", "Search profiles by name"),
            _string("currentCompany", "Filter by current company ID or URL"),
            _string("pastCompany", "Filter by past company ID or URL"),
            _string("school", "Filter by school ID or URL"),
            _string("firstName", "Filter by first name"),
            _string("lastName", "Filter by last name"),
            _string("title", "Filter by job title"),
            _string("location", "Filter by location text"),
            _string("geoId", "Filter by LinkedIn Geo ID"),
            _string("industryId", "Filter by industry ID"),
            _page(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS),
        ),
        required=("search",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    ToolDefinition(
        name="get_profile_posts",
        description=f"Get posts from a LinkedIn profile. {_SUFFIX}",
        endpoint="/profile-posts",
        entity="post",
        many=True,
        parameters=(
            _string("profile", "LinkedIn profile URL"),
            _string("profileId", "LinkedIn profile ID (faster)"),
            _string("profilePublicIdentifier", "Profile public identifier"),
            _posted_limit(),
            _page(),
            _pagination_token(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS, "posts"),
        ),
        one_of=("profile", "profileId", "profilePublicIdentifier"),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    ToolDefinition(
        name="get_profile_comments",
        description=f"Get comments made by a LinkedIn profile. {_SUFFIX}",
        endpoint="/profile-comments",
        entity="comment",
        many=True,
        parameters=(
            _string("profile", "LinkedIn profile URL"),
            _string("profileId", "LinkedIn profile ID (faster)"),
            _posted_limit(),
            _page(),
            _pagination_token(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS, "comments"),
        ),
        one_of=("profile", "profileId"),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    ToolDefinition(
        name="get_profile_reactions",
        description=f"Get reactions from a LinkedIn profile. {_SUFFIX}",
        endpoint="/profile-reactions",
        entity="reaction",
        many=True,
        parameters=(
            _string("profile", "LinkedIn profile URL"),
            _string("profileId", "LinkedIn profile ID (faster)"),
            _page(),
            _pagination_token(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS, "reactions"),
        ),
        one_of=("profile", "profileId"),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    # Companies
    ToolDefinition(
        name="get_company",
        description=f"Get LinkedIn company information. {_SUFFIX}",
        endpoint="/company",
        entity="company",
        parameters=(
            _string("url", "LinkedIn company URL"),
            _string("universalName", "Company universal name (found in URL)"),
            _string("search", "Company name to search"),
            _save_dir(),
        ),
        one_of=("url", "universalName", "search"),
    ),
    ToolDefinition(
        name="search_companies",
        description=f"Search LinkedIn companies. {_SUFFIX}",
        endpoint="/company-search",
        entity="company",
        many=True,
        parameters=(
            _string("search", "Keywords to search"),
            _string("location", "Filter by location"),
            _string("geoId", "Filter by LinkedIn Geo ID"),
            _string("companySize", "Filter by size (comma-separated): " + ", ".join(COMPANY_SIZES)),
            _page(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS),
        ),
        required=("search",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    ToolDefinition(
        name="get_company_posts",
        description=f"Get posts from a LinkedIn company page. {_SUFFIX}",
        endpoint="/company-posts",
        entity="post",
        many=True,
        parameters=(
            _string("company", "LinkedIn company URL"),
            _string("companyId", "LinkedIn company ID (faster)"),
            _string("companyUniversalName", "Company universal name"),
            _posted_limit(),
            _page(),
            _pagination_token(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS, "posts"),
        ),
        one_of=("company", "companyId", "companyUniversalName"),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    # Jobs
    ToolDefinition(
        name="get_job",
        description=f"Get LinkedIn job details. {_SUFFIX}",
        endpoint="/job",
        entity="job",
        parameters=(
            _string("jobId", "LinkedIn job ID"),
            _string("url", "LinkedIn job URL"),
            _save_dir(),
        ),
        one_of=("jobId", "url"),
    ),
    ToolDefinition(
        name="search_jobs",
        description=f"Search LinkedIn jobs. {_SUFFIX}",
        endpoint="/job-search",
        entity="job_search_hit",
        many=True,
        parameters=(
            _string("search", "Search jobs by title"),
            _string("companyId", "Filter by company ID"),
            _string("location", "Filter by location"),
            _string("geoId", "Filter by LinkedIn Geo ID"),
            _sort_by(),
            _string("workplaceType", "Filter: office, hybrid, remote", enum=WORKPLACE_TYPES),
            _string("employmentType", "Filter: " + ", ".join(EMPLOYMENT_TYPES), enum=EMPLOYMENT_TYPES),
            _string("salary", "Filter by salary: " + ", ".join(SALARY_FLOORS)),
            _posted_limit("Filter by post date: 24h, week, month"),
            _string("experienceLevel", "Filter: " + ", ".join(EXPERIENCE_LEVELS), enum=EXPERIENCE_LEVELS),
            _string("industryId", "Filter by industry ID (comma-separated)"),
            _string("functionId", "Filter by job function ID (comma-separated)"),
            _flag("under10Applicants", "Filter jobs with under 10 applicants"),
            _flag("easyApply", "Filter Easy Apply jobs"),
            _page(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS),
        ),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    # Posts
    ToolDefinition(
        name="get_post",
        description=f"Get LinkedIn post details. {_SUFFIX}",
        endpoint="/post",
        entity="post",
        parameters=(
            _string("url", "LinkedIn post URL (required)"),
            _save_dir(),
        ),
        required=("url",),
    ),
    ToolDefinition(
        name="search_posts",
        description=f"Search LinkedIn posts. {_SUFFIX}",
        endpoint="/post-search",
        entity="post",
        many=True,
        parameters=(
            _string("search", "Keywords to search"),
            _string("profile", "Filter by author profile URL"),
            _string("profileId", "Filter by author profile ID"),
            _string("company", "Filter by company name"),
            _string("companyId", "Filter by company ID"),
            _string("authorsCompany", "Search posts from employees of a company"),
            _string("authorsCompanyId", "Filter by company ID of post authors"),
            _string("group", "Filter by group name"),
            _posted_limit(),
            _sort_by(),
            _page(),
            _pagination_token(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS),
        ),
        required=("search",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    ToolDefinition(
        name="get_post_comments",
        description=f"Get comments on a LinkedIn post. {_SUFFIX}",
        endpoint="/post-comments",
        entity="comment",
        many=True,
        parameters=(
            _string("post", "LinkedIn post URL (required)"),
            _sort_by(),
            _page(),
            _pagination_token(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS, "comments"),
        ),
        required=("post",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    ToolDefinition(
        name="get_post_reactions",
        description=f"Get reactions on a LinkedIn post. {_SUFFIX}",
        endpoint="/post-reactions",
        entity="reaction",
        many=True,
        parameters=(
            _string("post", "LinkedIn post URL (required)"),
            _page(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS, "reactions"),
        ),
        required=("post",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    # Groups
    ToolDefinition(
        name="get_group",
        description=f"Get LinkedIn group information. {_SUFFIX}",
        endpoint="/group",
        entity="group",
        parameters=(
            _string("url", "LinkedIn group URL"),
            _string("groupId", "LinkedIn group ID"),
            _save_dir(),
        ),
        one_of=("url", "groupId"),
    ),
    ToolDefinition(
        name="search_groups",
        description=f"Search LinkedIn groups. {_SUFFIX}",
        endpoint="/group-search",
        entity="group",
        many=True,
        parameters=(
            _string("search", "Keywords to search"),
            _page(),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS),
        ),
        required=("search",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
    # Geo IDs
    ToolDefinition(
        name="search_geo_id",
        description=(
            "Search LinkedIn Geo ID by location (for location-based filtering). " + _SUFFIX
        ),
        endpoint="/geo-id-search",
        entity="geo_id",
        many=True,
        parameters=(
            _string("search", "Location text to search"),
            _save_dir(),
            _max_items(DEFAULT_LIST_MAX_ITEMS),
        ),
        required=("search",),
        default_max_items=DEFAULT_LIST_MAX_ITEMS,
    ),
)


class ToolCatalog:
    """Read-only registry of tool definitions in a fixed order."""

    def __init__(self, definitions: Tuple[ToolDefinition, ...] = TOOL_DEFINITIONS) -> None:
        names = [definition.name for definition in definitions]
        if len(names) != len(set(names)):
            raise ValueError("Tool names must be unique")
        self._definitions = tuple(definitions)
        self._by_name = {definition.name: definition for definition in self._definitions}

    def list(self) -> Tuple[ToolDefinition, ...]:
        return self._definitions

    def names(self) -> List[str]:
        return [definition.name for definition in self._definitions]

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._definitions)
