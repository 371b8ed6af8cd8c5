# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the tool layer and the Jina search API.  Nothing here is
# persisted: a SearchRequest lives for exactly one tool call.
#
# WHY FROZEN DATACLASSES?
#   - The catalog is defined once at import time and must never change
#     between calls (discovery always returns the same three tools).
#   - A validated request should not be mutated on its way to the client.
#
# SEARCH RESULTS ARE NOT MODELLED:
#   The upstream hits ({id, score, data}) are kept as the raw dicts the API
#   returned.  The formatter mirrors them back verbatim, so parsing them into
#   a dataclass would only risk dropping fields the caller wants to see.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union

# Ordered exactly as returned upstream — never re-sorted or deduplicated.
SearchResults = list[dict[str, Any]]

# The two cross-modal directions understood by the search API.
CROSS_MODAL_MODES = ("text2image", "image2text")


# -----------------------------------------------------------------------------
# ToolCatalogEntry — one advertised tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolCatalogEntry:
    """A named, schema-described tool advertised for discovery."""

    name: str
    description: str
    parameter_schema: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the entry in the shape MCP clients expect."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameter_schema,
        }


# -----------------------------------------------------------------------------
# SearchRequest — a validated invocation
# -----------------------------------------------------------------------------
# One type covers all three tool kinds:
#   - semantic_search    → query is search text,  mode is None
#   - image_search       → query is an image URL, mode is None
#   - cross_modal_search → query is text or URL,  mode is set
#
# `limit` stays None when the caller omitted it.  The default of 10 is
# applied by the client when it builds the request body, not here.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchRequest:
    """A fully validated search request."""

    tool_name: str
    query: str                              # primary input: text or image URL
    collection: str                         # never empty
    limit: Optional[Union[int, float]] = None
    mode: Optional[str] = None              # text2image | image2text


# -----------------------------------------------------------------------------
# UpstreamErrorBody — what the API sends back on failure
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class UpstreamErrorBody:
    """The {message, code} body of a failed search call. Either may be missing."""

    message: Optional[str] = None
    code: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "UpstreamErrorBody":
        if not isinstance(payload, dict):
            return cls()
        message = payload.get("message")
        code = payload.get("code")
        return cls(
            message=str(message) if message is not None else None,
            code=code if isinstance(code, int) and not isinstance(code, bool) else None,
        )
