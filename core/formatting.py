# =============================================================================
# core/formatting.py  —  Response Formatter
# =============================================================================
#
# Turns the upstream result list into the tool-call output: ONE text item
# holding the pretty-printed JSON of the list.  No truncation, no
# re-ranking, no field filtering — the caller sees exactly what Jina sent.
#
# The output is deterministic: the same results always produce
# byte-identical text (dict order is preserved, nothing is timestamped).
# =============================================================================

import json
from typing import Any

from core.models import SearchResults


def format_results(results: SearchResults) -> list[dict[str, Any]]:
    """Wrap search results in a single text content item."""
    return [
        {
            "type": "text",
            "text": json.dumps(results, indent=2, ensure_ascii=False),
        }
    ]
