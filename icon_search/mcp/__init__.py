"""MCP server package for icon-search-service.

The MCP server is meant for LLM agents looking for icons:
- get_icon_libraries
- search_icons
- get_library_icons
- get_icon_details
- get_icon_usage_examples

Transport:
- stdio (`icon-search-mcp --stdio`, the default)
- HTTP/SSE (`icon-search-mcp --sse`): GET /sse + POST /messages/, mounted on
  the FastAPI app in icon_search.main next to the REST API
"""
