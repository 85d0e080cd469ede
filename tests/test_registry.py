"""Tool Registry Tests."""

import pytest

from ona_tools.base import ToolMetadata
from ona_tools.exceptions import ToolNotFoundError
from ona_tools.registry import ToolRegistry


class MockTool:
    name = "mock_tool"
    description = "Mock tool"
    metadata = ToolMetadata(capabilities=["test.mock"])

    def __init__(self, api_key, **kwargs):
        self.api_key = api_key
        self.options = kwargs


def test_register_and_retrieve_tool():
    """Test tool registration and retrieval."""
    registry = ToolRegistry()
    registry.register(MockTool)

    assert registry.get("mock_tool") is MockTool
    assert registry.get("missing") is None
    assert registry.names() == ["mock_tool"]


def test_filter_by_capability():
    """Test capability-based filtering."""
    registry = ToolRegistry()
    registry.register(MockTool)

    assert registry.filter_by_capability("test.mock") == [MockTool]
    assert registry.filter_by_capability("other") == []


def test_create_binds_credential_and_options():
    registry = ToolRegistry()
    registry.register(MockTool)

    tool = registry.create("mock_tool", "secret_abc", base_url="http://localhost")

    assert tool.api_key == "secret_abc"
    assert tool.options == {"base_url": "http://localhost"}


def test_create_unknown_tool():
    with pytest.raises(ToolNotFoundError, match="Unknown tool: nope"):
        ToolRegistry().create("nope", "secret_abc")


def test_bind_creates_fresh_tools():
    registry = ToolRegistry()
    registry.register(MockTool)

    first = registry.bind("secret_a")
    second = registry.bind(None)

    assert first["mock_tool"].api_key == "secret_a"
    assert second["mock_tool"].api_key is None
    assert first["mock_tool"] is not second["mock_tool"]
