# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the three Jina search tools over MCP.  Each tool is a thin
#   wrapper that hands the raw arguments to core.dispatcher.ToolDispatcher
#   and converts the outcome into MCP content (or an MCP tool error).
#
# HOW IT WORKS (the flow):
#   1. An MCP client (an agent, an IDE, an orchestrator) lists the tools
#   2. It calls one by name, e.g. "semantic_search", with an argument object
#   3. FastMCP routes the call to the matching SearchTool below
#   4. SearchTool.run() delegates to the dispatcher:
#        validate → POST to Jina → pretty-print results
#   5. The client receives ONE text item with the results as JSON
#
# WHY NOT @mcp.tool() FUNCTIONS?
#   A decorated function gets its schema generated from its signature.
#   These tools advertise a fixed, hand-written schema (core/catalog.py), and
#   the dispatcher does its own validation so that a bad argument is always
#   reported as InvalidParams.  So each catalog entry becomes a Tool subclass
#   carrying that schema verbatim.
#
# ERRORS:
#   Dispatcher errors are re-raised as ToolError with text
#   "<classification>: <message>", e.g.
#       "InvalidParams: Invalid image search arguments"
#       "InternalError: Jina API error: bad request (code 400)"
#   FastMCP reports ToolError messages to the client unmasked.
#   Unknown tool names never reach a SearchTool, so UnknownToolMiddleware
#   rejects them up front as "MethodNotFound: Unknown tool: <name>".
#
# RUNNING THIS SERVER:
#   python main.py     (reads JINA_API_KEY, serves over stdio)
# =============================================================================

import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.dispatcher import ToolDispatcher
from core.errors import MethodNotFoundError, ToolCallError

SERVER_NAME = "jina-ai-server"
SERVER_VERSION = "0.1.0"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Anything printed to stdout would corrupt the JSON-RPC stream.
#
# Colors:
#   CYAN   → incoming tool calls with their arguments
#   GREEN  → response summaries
#   YELLOW → intermediate status and errors
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color


def configure_logging(level: str = "INFO") -> None:
    """Send all log output to stderr with the [MCP] prefix."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Log the size of the response in GREEN, then return the items."""
    size = sum(len(item["text"]) for item in items)
    logging.info(f"{_GREEN}  ← {tool_name} response: {size} chars{_RESET}")
    return items


# =============================================================================
# SearchTool — one MCP tool per catalog entry
# =============================================================================
class SearchTool(Tool):
    """An MCP tool whose calls are executed by the ToolDispatcher."""

    dispatcher: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        try:
            items = await self.dispatcher.invoke(self.name, arguments)
        except ToolCallError as e:
            _log_status(str(e))
            raise ToolError(str(e)) from e
        except Exception:
            logging.exception("[MCP Error] %s failed unexpectedly", self.name)
            raise

        _log_response(self.name, items)
        return ToolResult(
            content=[TextContent(type="text", text=item["text"]) for item in items]
        )


# =============================================================================
# UnknownToolMiddleware — classify calls to tools that do not exist
# =============================================================================
# FastMCP looks a tool up before any SearchTool runs, so the dispatcher never
# sees an unknown name.  This middleware checks the name against the
# dispatcher's catalog first and reports MethodNotFound the same way
# SearchTool reports its own errors.
# =============================================================================
class UnknownToolMiddleware(Middleware):
    """Reject calls to tools missing from the dispatcher's catalog."""

    def __init__(self, dispatcher: ToolDispatcher) -> None:
        self.tool_names = frozenset(entry.name for entry in dispatcher.list_tools())

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if name not in self.tool_names:
            error = MethodNotFoundError(f"Unknown tool: {name}")
            _log_status(str(error))
            raise ToolError(str(error))
        return await call_next(context)


def create_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Build the FastMCP server and register every catalog tool on it."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    mcp.add_middleware(UnknownToolMiddleware(dispatcher))

    for entry in dispatcher.list_tools():
        mcp.add_tool(
            SearchTool(
                name=entry.name,
                description=entry.description,
                parameters=entry.parameter_schema,
                dispatcher=dispatcher,
            )
        )

    return mcp
