# linkedin_api_mcp/dispatcher.py
"""
Tool dispatcher: argument validation, outbound query assembly and the single
remote call behind every tool.

Everything that can be rejected locally (unknown tool, missing arguments,
violated presence rules, badly typed values) is rejected before any network
I/O. A valid call issues exactly one GET and hands the envelope to the
response shaper.
"""

from typing import Any, Dict, Mapping, Optional, Protocol

import structlog
from pydantic import BaseModel, ValidationError

from linkedin_api_mcp.catalog import ToolCatalog, ToolDefinition
from linkedin_api_mcp.constants import MAX_ITEMS_PARAM, SAVE_DIR_PARAM
from linkedin_api_mcp.exceptions import InvalidArgumentsError, UnknownToolError
from linkedin_api_mcp.response import ToolResult, render, shape

logger = structlog.get_logger(__name__)

OutboundQuery = Dict[str, Any]


class RemoteClient(Protocol):
    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]: ...


def _is_supplied(value: Any) -> bool:
    return value is not None and value != ""


def _join_names(names: tuple) -> str:
    if len(names) <= 1:
        return "".join(names)
    if len(names) == 2:
        return f"{names[0]} or {names[1]}"
    return f"{', '.join(names[:-1])}, or {names[-1]}"


def check_presence(definition: ToolDefinition, arguments: Mapping[str, Any]) -> None:
    """Enforce the tool's required names and its one-of group.

    Raises:
        InvalidArgumentsError: Naming the missing parameter(s)
    """
    missing = [name for name in definition.required if not _is_supplied(arguments.get(name))]
    if missing:
        raise InvalidArgumentsError("; ".join(f"{name} is required" for name in missing), fields=missing)

    if definition.one_of and not any(_is_supplied(arguments.get(name)) for name in definition.one_of):
        raise InvalidArgumentsError(
            f"At least one of {_join_names(definition.one_of)} is required",
            fields=definition.one_of,
        )


def validate_arguments(definition: ToolDefinition, arguments: Mapping[str, Any]) -> BaseModel:
    """Validate argument types through the tool's model; unknown keys are ignored."""
    try:
        return definition.arguments_model.model_validate(dict(arguments))
    except ValidationError as e:
        fields = []
        problems = []
        for error in e.errors():
            field_name = ".".join(str(part) for part in error["loc"])
            fields.append(field_name)
            problems.append(f"{field_name}: {error['msg']}")
        raise InvalidArgumentsError(
            f"Invalid arguments for {definition.name}: " + "; ".join(problems),
            fields=fields,
        ) from e


def build_query(definition: ToolDefinition, arguments: BaseModel) -> OutboundQuery:
    """Assemble the outbound query from supplied arguments, keyed by remote names.

    Local-only parameters are never forwarded. Values pass through unmodified,
    including ``False`` booleans the caller chose to send.
    """
    local = {spec.name for spec in definition.parameters if spec.is_local}
    dumped = arguments.model_dump(by_alias=True, exclude_none=True, exclude=local)
    return {name: value for name, value in dumped.items() if value != ""}


class Dispatcher:
    """Routes tool calls to the remote API and shapes the replies."""

    def __init__(self, client: RemoteClient, catalog: Optional[ToolCatalog] = None) -> None:
        self.client = client
        self.catalog = catalog or ToolCatalog()

    def resolve(self, name: str) -> ToolDefinition:
        definition = self.catalog.get(name)
        if definition is None:
            raise UnknownToolError(name)
        return definition

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        """Validate, call and shape one tool invocation.

        Args:
            name: Tool name as advertised in the catalog
            arguments: Caller-supplied argument object

        Returns:
            ToolResult with the compact text payload

        Raises:
            UnknownToolError: If ``name`` is not in the catalog
            InvalidArgumentsError: If the arguments are missing or invalid
            RemoteAPIError: If the remote call fails
        """
        definition = self.resolve(name)
        if arguments is None:
            raise InvalidArgumentsError("Missing arguments")

        check_presence(definition, arguments)
        validated = validate_arguments(definition, arguments)
        query = build_query(definition, validated)

        logger.info("Dispatching tool call", tool=name, endpoint=definition.endpoint, params=sorted(query))
        envelope = await self.client.get(definition.endpoint, query)

        max_items = getattr(validated, MAX_ITEMS_PARAM, None)
        shaped = shape(envelope, definition, max_items)
        if definition.many:
            logger.debug("Shaped listing", tool=name, items=len(shaped["data"]))

        return render(shaped, name, getattr(validated, SAVE_DIR_PARAM, None))
