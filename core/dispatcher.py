# =============================================================================
# core/dispatcher.py  —  Tool Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the catalog and routes one tool call through the pipeline:
#
#     name lookup → validate → resolve search type → Jina call → format
#
# ERROR CLASSIFICATION:
#   - unknown tool name        → MethodNotFoundError  (no HTTP call made)
#   - bad arguments            → InvalidParamsError   (no HTTP call made)
#   - anything else that fails → InternalToolError "Jina API error: ..."
#   The first two keep their classification; everything from the HTTP layer
#   is folded into one InternalError carrying the best message available.
#
# STATELESS:
#   Nothing is remembered between calls.  The catalog is immutable and the
#   client only holds the endpoint and credential.
# =============================================================================

from typing import Any, Mapping, Optional, Sequence

from core.catalog import TOOL_CATALOG
from core.errors import InternalToolError, MethodNotFoundError, ToolCallError, UpstreamFailure
from core.formatting import format_results
from core.jina_client import JinaSearchClient
from core.models import SearchRequest, ToolCatalogEntry
from core.validation import validate_arguments

# Fixed search types; cross_modal_search uses the request's own mode.
_SEARCH_TYPES = {
    "semantic_search": "text",
    "image_search": "image",
}


def resolve_search_type(request: SearchRequest) -> str:
    """Map a validated request to the `type` field Jina expects."""
    if request.mode is not None:
        return request.mode
    return _SEARCH_TYPES[request.tool_name]


def describe_failure(error: Exception) -> str:
    """Best-available text for a failure: Jina's own message, else the raw error."""
    if isinstance(error, UpstreamFailure) and error.upstream_message:
        if error.upstream_code is not None:
            return f"{error.upstream_message} (code {error.upstream_code})"
        return error.upstream_message
    return str(error) or type(error).__name__


class ToolDispatcher:
    """Routes tool calls to the Jina search client."""

    def __init__(
        self,
        client: JinaSearchClient,
        catalog: Sequence[ToolCatalogEntry] = TOOL_CATALOG,
    ) -> None:
        self.client = client
        self._catalog = tuple(catalog)
        self._by_name = {entry.name: entry for entry in self._catalog}

    def list_tools(self) -> list[ToolCatalogEntry]:
        """Return the advertised tools.  Always the same entries, in order."""
        return list(self._catalog)

    async def invoke(
        self,
        tool_name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        """Execute one tool call.

        Returns:
            A one-element list holding the text content item.

        Raises:
            MethodNotFoundError: tool_name is not in the catalog.
            InvalidParamsError: The arguments failed validation.
            InternalToolError: The search itself failed.
        """
        if tool_name not in self._by_name:
            raise MethodNotFoundError(f"Unknown tool: {tool_name}")

        try:
            request = validate_arguments(tool_name, arguments)
            results = await self.client.search(request, resolve_search_type(request))
        except ToolCallError:
            raise
        except Exception as e:
            raise InternalToolError(f"Jina API error: {describe_failure(e)}") from e

        return format_results(results)
