"""Tool system exceptions."""


class ToolError(Exception):
    """Base exception for the tool system."""

    pass


class ToolNotFoundError(ToolError):
    """No tool registered under the requested name."""

    pass
