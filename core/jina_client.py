# =============================================================================
# core/jina_client.py  —  Jina Search API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends ONE POST per tool call to the Jina search API:
#
#       POST {base_url}/collections/{collection}/search
#       Authorization: Bearer <JINA_API_KEY>
#       {"query": ..., "limit": ..., "type": ...}
#
#   and returns the `results` list from the response body untouched.
#
# FAILURES:
#   Every problem — non-2xx status, connection error, timeout, a body that
#   is not the expected JSON — is raised as UpstreamFailure.  When the API
#   sent its own {message, code} body, those fields travel with the error
#   so the caller sees Jina's explanation instead of a bare status line.
#
# NO RETRIES:
#   One failed call is one reported failure.  The timeout is explicit and
#   comes from settings (JINA_TIMEOUT_SECONDS).
# =============================================================================

import logging
from typing import Any
from urllib.parse import quote

import httpx

from core.catalog import DEFAULT_LIMIT
from core.errors import UpstreamFailure
from core.models import SearchRequest, SearchResults, UpstreamErrorBody

logger = logging.getLogger(__name__)


class JinaSearchClient:
    """Async HTTP client for per-collection search."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.jina.ai/v1",
        timeout_seconds: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout_seconds),
        )

    async def __aenter__(self) -> "JinaSearchClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    @staticmethod
    def search_path(collection: str) -> str:
        """Build the search path, encoding the collection as one path segment."""
        return f"/collections/{quote(collection, safe='')}/search"

    @staticmethod
    def build_body(request: SearchRequest, search_type: str) -> dict[str, Any]:
        """Build the JSON body.  The default limit is applied here and only here."""
        limit = request.limit if request.limit is not None else DEFAULT_LIMIT
        return {"query": request.query, "limit": limit, "type": search_type}

    async def search(self, request: SearchRequest, search_type: str) -> SearchResults:
        """Run one search against the request's collection.

        Args:
            request: A validated search request.
            search_type: text | image | text2image | image2text

        Returns:
            The `results` list exactly as the API returned it.

        Raises:
            UpstreamFailure: On any HTTP, network, or response-shape problem.
        """
        path = self.search_path(request.collection)
        body = self.build_body(request, search_type)

        try:
            response = await self.client.post(path, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_failure(e) from e
        except httpx.HTTPError as e:
            logger.warning("Jina request failed: %s: %s", type(e).__name__, e)
            raise UpstreamFailure(str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Jina returned invalid JSON for %s", path)
            raise UpstreamFailure("Jina API returned an invalid JSON response") from e

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            logger.warning("Jina response for %s has no results list", path)
            raise UpstreamFailure("Jina API response is missing the 'results' list")

        return results

    def _status_failure(self, error: httpx.HTTPStatusError) -> UpstreamFailure:
        status_code = error.response.status_code
        body = UpstreamErrorBody()
        try:
            body = UpstreamErrorBody.from_payload(error.response.json())
        except ValueError:
            logger.warning("Jina error body for HTTP %s was not valid JSON", status_code)

        logger.warning(
            "Jina returned HTTP %s: %s",
            status_code,
            body.message if body.message is not None else "<no message>",
        )
        return UpstreamFailure(
            str(error),
            upstream_message=body.message,
            upstream_code=body.code,
            status_code=status_code,
        )
