"""MCP server for maestrolint."""
