"""Tool Interface, Metadata & Descriptor.

A tool is an object bound to one credential that exposes a name, a
natural-language description, an input schema and an async ``execute``.
"""

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict


class ToolMetadata(BaseModel):
    """Tool capability metadata.

    Descriptive only: published by GET /tools for clients to render
    confirmations or filter tools. ``requires_approval`` is advisory and is
    not enforced by ``ChatRuntime``, which runs every call the model makes.
    """

    requires_approval: bool = False
    idempotent: bool = False
    capabilities: list[str] = []
    risk_level: str = "low"


class ToolDescriptor(BaseModel):
    """Agent-facing description of a tool (name, description, input schema)."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: dict[str, Any]
    metadata: ToolMetadata

    def to_anthropic(self) -> dict[str, Any]:
        """Render in the Anthropic Messages API tool format."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


class Tool(Protocol):
    """Tool interface."""

    name: str
    description: str
    metadata: ToolMetadata

    def describe(self) -> ToolDescriptor:
        """Return the agent-facing descriptor."""
        ...

    async def execute(self, ctx: dict, input_data: dict[str, Any]) -> dict[str, Any]:
        """Execute tool action."""
        ...
