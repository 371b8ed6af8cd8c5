# =============================================================================
# main.py  —  Entry Point for the Jina AI MCP Server
# =============================================================================
#
# HOW TO RUN:
#   JINA_API_KEY=... uv run python main.py
#
#   Usually you don't run it by hand: an MCP client (Claude Desktop, an
#   agent framework, an IDE) starts it as a subprocess and talks to it over
#   stdin/stdout.
#
# WHAT HAPPENS:
#   1. Loads .env (if present) into the environment
#   2. Reads settings — a missing JINA_API_KEY stops the process right here
#   3. Creates the Jina HTTP client, the dispatcher and the FastMCP server
#   4. Serves tool calls over stdio until the client disconnects or Ctrl+C
#   5. Closes the HTTP client on the way out
# =============================================================================

import asyncio
import logging

from dotenv import load_dotenv

# Load environment variables from .env file (JINA_API_KEY, etc.)
# This must happen BEFORE load_settings() reads the environment.
load_dotenv()

from core.config import Settings, load_settings
from core.dispatcher import ToolDispatcher
from core.errors import ConfigurationError
from core.jina_client import JinaSearchClient
from tools.mcp_server import configure_logging, create_server


async def serve(settings: Settings) -> None:
    """Serve the search tools over stdio until the transport closes."""
    client = JinaSearchClient(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )
    mcp = create_server(ToolDispatcher(client))

    logging.info("Jina AI MCP server running on stdio")
    try:
        await mcp.run_async(transport="stdio")
    finally:
        # Runs on normal exit AND when Ctrl+C cancels the task.
        await client.aclose()
        logging.info("Jina HTTP client closed")


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        # Fatal: never start serving without a credential.
        raise SystemExit(f"Configuration error: {e}") from e

    configure_logging(settings.log_level)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logging.info("Interrupted, server stopped")


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
