"""Editor-facing helpers shared by the REST API and the MCP server."""

from maestrolint.service.editor import CompletionItem, complete, hover_at, is_flow_document

__all__ = ["CompletionItem", "complete", "hover_at", "is_flow_document"]
