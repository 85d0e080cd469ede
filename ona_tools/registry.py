"""Tool Registry.

Maps tool names to factories. A factory takes the current credential and
returns a tool bound to it, so tools are re-created per request and never
outlive the credential they were built with.
"""

from typing import Any

from ona_tools.exceptions import ToolNotFoundError


class ToolRegistry:
    """Tool factory registry with capability-based lookup."""

    def __init__(self):
        self._factories: dict[str, Any] = {}

    def register(self, factory: Any) -> None:
        """Register a tool factory (a class exposing ``name`` and ``metadata``)."""
        self._factories[factory.name] = factory

    def get(self, name: str) -> Any | None:
        """Get tool factory by name."""
        return self._factories.get(name)

    def names(self) -> list[str]:
        """Registered tool names, in registration order."""
        return list(self._factories)

    def filter_by_capability(self, capability: str) -> list[Any]:
        """Filter tool factories by capability tag."""
        return [f for f in self._factories.values() if capability in f.metadata.capabilities]

    def create(self, name: str, api_key: str | None, **kwargs: Any) -> Any:
        """Build one tool bound to ``api_key``.

        Raises:
            ToolNotFoundError: No tool registered under ``name``
        """
        factory = self.get(name)
        if factory is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")
        return factory(api_key=api_key, **kwargs)

    def bind(self, api_key: str | None, **kwargs: Any) -> dict[str, Any]:
        """Build every registered tool bound to ``api_key``, keyed by name."""
        return {name: factory(api_key=api_key, **kwargs) for name, factory in self._factories.items()}
