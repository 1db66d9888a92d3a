"""
Protocol and remote API constants for the LinkedIn API MCP server.

All values that are shared between the catalog, the HTTP client and the
response shaper live here so the three agree on names, limits and timeouts.
"""

from typing import Final, Tuple

from linkedin_api_mcp import __version__

# Server identity
SERVER_NAME: Final[str] = "linkedin-api-mcp"
SERVER_VERSION: Final[str] = __version__

# Remote API
DEFAULT_BASE_URL: Final[str] = "https://api.harvest-api.com/linkedin"
API_KEY_HEADER: Final[str] = "X-API-Key"
USER_AGENT: Final[str] = f"{SERVER_NAME}/{SERVER_VERSION}"
CONTENT_TYPE_JSON: Final[str] = "application/json"

# Default timeout (in seconds) applied to every remote call
DEFAULT_REQUEST_TIMEOUT: Final[float] = 30.0

# Item caps
DEFAULT_DETAIL_MAX_ITEMS: Final[int] = 5
DEFAULT_LIST_MAX_ITEMS: Final[int] = 10

# Parameters handled locally and never forwarded to the remote API
SAVE_DIR_PARAM: Final[str] = "save_dir"
MAX_ITEMS_PARAM: Final[str] = "max_items"

# Advisory value sets, passed through unchanged to the remote API
POSTED_LIMITS: Final[Tuple[str, ...]] = ("24h", "week", "month")
SORT_ORDERS: Final[Tuple[str, ...]] = ("relevance", "date")
WORKPLACE_TYPES: Final[Tuple[str, ...]] = ("office", "hybrid", "remote")
EMPLOYMENT_TYPES: Final[Tuple[str, ...]] = (
    "full-time",
    "part-time",
    "contract",
    "temporary",
    "volunteer",
    "internship",
)
EXPERIENCE_LEVELS: Final[Tuple[str, ...]] = (
    "internship",
    "entry",
    "associate",
    "mid-senior",
    "director",
    "executive",
)
COMPANY_SIZES: Final[Tuple[str, ...]] = (
    "1-10",
    "11-50",
    "51-200",
    "201-500",
    "501-1000",
    "1001-5000",
    "5001-10000",
    "10001+",
)
SALARY_FLOORS: Final[Tuple[str, ...]] = (
    "40k+",
    "60k+",
    "80k+",
    "100k+",
    "120k+",
    "140k+",
    "160k+",
    "180k+",
    "200k+",
)
