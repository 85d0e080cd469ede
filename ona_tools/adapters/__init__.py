"""Tool Adapters.

Available adapters:
- notion: Notion REST API tools (blocks, pages, databases, users, comments, search)
"""

__all__ = ["notion"]
