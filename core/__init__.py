# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic of the Jina search server:
# the tool catalog, argument validation, the Jina HTTP client, dispatch,
# and result formatting.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP machinery.  The
#   dispatcher takes a tool name and a plain dict, and returns plain dicts.
#   tools/ is the only layer that knows about the protocol.
#
# The only third-party dependency here is httpx, used by jina_client.py.
# =============================================================================
