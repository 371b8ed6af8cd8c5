# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure a caller can see falls into one of three classifications,
# carrying the matching JSON-RPC error code:
#
#   InvalidParams   (-32602)  missing or mistyped tool arguments
#   MethodNotFound  (-32601)  unknown tool name
#   InternalError   (-32603)  anything that went wrong talking to Jina
#
# UpstreamFailure is INTERNAL: the client raises it, the dispatcher turns it
# into an InternalToolError.  It never crosses the tool boundary as-is.
#
# ConfigurationError is fatal and only raised at startup.
# =============================================================================

from typing import Optional

INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class ToolCallError(Exception):
    """Base class for errors reported back to the tool caller."""

    kind = "InternalError"
    code = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InvalidParamsError(ToolCallError):
    """Tool arguments failed validation."""

    kind = "InvalidParams"
    code = INVALID_PARAMS


class MethodNotFoundError(ToolCallError):
    """No tool with the requested name is registered."""

    kind = "MethodNotFound"
    code = METHOD_NOT_FOUND


class InternalToolError(ToolCallError):
    """The search could not be completed."""


class UpstreamFailure(Exception):
    """An HTTP or network level failure while calling the search API.

    Attributes:
        message: The raw transport/HTTP error text.
        upstream_message: The API's own ``message`` field, if it sent one.
        upstream_code: The API's own ``code`` field, if it sent one.
        status_code: HTTP status, or None when no response was received.
    """

    def __init__(
        self,
        message: str,
        upstream_message: Optional[str] = None,
        upstream_code: Optional[int] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        self.upstream_message = upstream_message
        self.upstream_code = upstream_code
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
