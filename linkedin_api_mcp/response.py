# linkedin_api_mcp/response.py
"""
Response shaping: projection, bounding, pagination summary, encoding and
optional persistence of a HarvestAPI envelope.

The envelope is either ``{element, status, error?}`` for single-entity
endpoints or ``{elements, pagination?, status, error?}`` for listings. The
shaped result is always ``{"data": ..., "pagination"?: {...}}``.
"""

import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import structlog

from linkedin_api_mcp.catalog import ToolDefinition
from linkedin_api_mcp.cleaners import CLEANERS, PROFILE_LIST_FIELDS

logger = structlog.get_logger(__name__)

ShapedResult = Dict[str, Any]


@dataclass(frozen=True)
class ToolResult:
    """The single text payload returned to the calling agent."""

    text: str
    shaped: ShapedResult
    saved_path: Optional[Path] = None


def bound(items: Any, max_items: int) -> List[Any]:
    """Keep the first ``max_items`` entries in their original order."""
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
        return []
    return list(items[: max(max_items, 0)])


def summarize_pagination(pagination: Any) -> Optional[Dict[str, Any]]:
    """Reduce a remote pagination block to page, totalPages and totalElements.

    The opaque pagination token is not part of the summary.
    """
    if not isinstance(pagination, Mapping):
        return None
    return {
        "page": pagination.get("pageNumber"),
        "totalPages": pagination.get("totalPages"),
        "totalElements": pagination.get("totalElements"),
    }


def shape(envelope: Any, definition: ToolDefinition, max_items: Optional[int] = None) -> ShapedResult:
    """Project and bound ``envelope`` according to the tool definition."""
    cleaner = CLEANERS[definition.entity]
    limit = max_items if max_items is not None else definition.default_max_items
    body = envelope if isinstance(envelope, Mapping) else {}

    if definition.many:
        elements = bound(body.get("elements"), limit if limit is not None else 0)
        data: Any = [cleaner(element) for element in elements]
    else:
        data = cleaner(body.get("element"))
        if definition.entity == "profile" and data is not None and limit is not None:
            for list_field in PROFILE_LIST_FIELDS:
                data[list_field] = bound(data[list_field], limit)

    shaped: ShapedResult = {"data": data}
    pagination = summarize_pagination(body.get("pagination"))
    if pagination is not None:
        shaped["pagination"] = pagination
    return shaped


def prune_nulls(value: Any) -> Any:
    """Drop ``None``-valued mapping entries at every depth."""
    if isinstance(value, Mapping):
        return {key: prune_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [prune_nulls(item) for item in value]
    return value


def encode_compact(value: Any) -> str:
    """Dense, whitespace-free JSON with null fields omitted.

    Lossless up to null omission: ``decode_compact(encode_compact(x))`` equals
    ``prune_nulls(x)``, not ``x``, whenever a mapping holds ``None`` values. A
    missing key and a ``null`` key mean the same thing to readers of the reply;
    the copy written by ``save_result`` keeps the nulls.
    """
    return json.dumps(prune_nulls(value), separators=(",", ":"), ensure_ascii=False)


def decode_compact(text: str) -> Any:
    return json.loads(text)


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")


def save_result(shaped: ShapedResult, directory: str, tool_name: str) -> Path:
    """Write the full shaped result to a fresh file under ``directory``.

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    target_dir = Path(directory).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / f"{tool_name}_{_timestamp()}_{uuid.uuid4().hex[:8]}.json"
    with path.open("x", encoding="utf-8") as handle:
        json.dump(shaped, handle, indent=2, ensure_ascii=False)
    return path


def render(shaped: ShapedResult, tool_name: str, save_dir: Optional[str] = None) -> ToolResult:
    """Encode the shaped result and, when asked, persist it.

    A persistence failure never aborts the call; it becomes a note appended
    to the reply.
    """
    text = encode_compact(shaped)
    saved_path: Optional[Path] = None

    if save_dir:
        try:
            saved_path = save_result(shaped, save_dir, tool_name)
        except OSError as e:
            logger.warning("Failed to save cleaned data", tool=tool_name, save_dir=save_dir, error=str(e))
            text += f"\n\n[Failed to save cleaned data to {save_dir}: {e}]"
        else:
            logger.info("Cleaned data saved", tool=tool_name, path=str(saved_path))
            text += f"\n\n[Cleaned data saved to: {saved_path}]"

    return ToolResult(text=text, shaped=shaped, saved_path=saved_path)
