"""OpenNotionAI Tool System.

Tool interface, descriptors and the name → factory registry.
"""

from ona_tools.base import Tool, ToolDescriptor, ToolMetadata
from ona_tools.exceptions import ToolError, ToolNotFoundError
from ona_tools.registry import ToolRegistry

__all__ = [
    "Tool",
    "ToolDescriptor",
    "ToolMetadata",
    "ToolError",
    "ToolNotFoundError",
    "ToolRegistry",
]
