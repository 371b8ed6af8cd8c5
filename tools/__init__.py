# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server wrapper.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and core/:
#     1. Registers one MCP tool per entry of core.catalog.TOOL_CATALOG
#     2. Hands each call to core.dispatcher.ToolDispatcher
#     3. Converts dispatcher output into MCP TextContent
#     4. Converts dispatcher errors into MCP tool errors
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments (core/validation.py does)
#   - They do NOT talk HTTP (core/jina_client.py does)
# =============================================================================
