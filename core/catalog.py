# =============================================================================
# core/catalog.py  —  The Tool Catalog
# =============================================================================
#
# The three tools this server advertises, with the JSON schemas MCP clients
# use to decide WHAT to pass.  The catalog is built once at import time and
# returned unchanged by every discovery request.
#
# Every tool searches inside a named Jina collection and accepts an optional
# `limit` (default 10).  They differ only in their primary input:
#   semantic_search    → query     (text)
#   image_search       → imageUrl  (URL of the query image)
#   cross_modal_search → query     (text or image URL) + mode
# =============================================================================

from types import MappingProxyType

from core.models import CROSS_MODAL_MODES, ToolCatalogEntry

DEFAULT_LIMIT = 10

_COLLECTION_PROPERTY = {
    "type": "string",
    "description": "Collection name to search in",
}

_LIMIT_PROPERTY = {
    "type": "number",
    "description": "Maximum number of results",
    "default": DEFAULT_LIMIT,
}


SEMANTIC_SEARCH = ToolCatalogEntry(
    name="semantic_search",
    description="Perform semantic/neural search on text documents",
    parameter_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query text",
            },
            "collection": dict(_COLLECTION_PROPERTY),
            "limit": dict(_LIMIT_PROPERTY),
        },
        "required": ["query", "collection"],
    },
)

IMAGE_SEARCH = ToolCatalogEntry(
    name="image_search",
    description="Search for similar images using an image URL",
    parameter_schema={
        "type": "object",
        "properties": {
            "imageUrl": {
                "type": "string",
                "description": "URL of the query image",
            },
            "collection": dict(_COLLECTION_PROPERTY),
            "limit": dict(_LIMIT_PROPERTY),
        },
        "required": ["imageUrl", "collection"],
    },
)

CROSS_MODAL_SEARCH = ToolCatalogEntry(
    name="cross_modal_search",
    description="Perform text-to-image or image-to-text search",
    parameter_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Text query or image URL",
            },
            "mode": {
                "type": "string",
                "enum": list(CROSS_MODAL_MODES),
                "description": "Search mode",
            },
            "collection": dict(_COLLECTION_PROPERTY),
            "limit": dict(_LIMIT_PROPERTY),
        },
        "required": ["query", "mode", "collection"],
    },
)

TOOL_CATALOG: tuple[ToolCatalogEntry, ...] = (
    SEMANTIC_SEARCH,
    IMAGE_SEARCH,
    CROSS_MODAL_SEARCH,
)

# Read-only name → entry lookup.
TOOLS_BY_NAME = MappingProxyType({entry.name: entry for entry in TOOL_CATALOG})
