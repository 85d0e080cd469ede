"""Tests for the Anthropic client (Claude-only)."""

import pytest
from unittest.mock import AsyncMock, patch, MagicMock

from ona_llm.client import LLMAuthError, LLMError, LLMRateLimitError, LLMResponse
from ona_llm.anthropic_client import AnthropicClient


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_anthropic_api_key(monkeypatch):
    """Mock Anthropic API key in environment."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test-key-12345")


@pytest.fixture
def anthropic_client(mock_anthropic_api_key):
    """Create Anthropic client with mocked API key."""
    return AnthropicClient(model="claude-sonnet-4-5-20250929")


def text_block(text):
    block = MagicMock()
    block.type = "text"
    block.text = text
    return block


def tool_use_block(block_id, name, tool_input):
    block = MagicMock()
    block.type = "tool_use"
    block.id = block_id
    block.name = name
    block.input = tool_input
    return block


# ============================================================================
# ANTHROPIC CLIENT TESTS
# ============================================================================


def test_anthropic_client_initialization(mock_anthropic_api_key):
    """Test Anthropic client initializes correctly."""
    client = AnthropicClient(model="claude-sonnet-4-5-20250929")

    assert client.model_name == "claude-sonnet-4-5-20250929"
    assert client.api_key == "sk-ant-test-key-12345"


def test_anthropic_client_explicit_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    client = AnthropicClient(api_key="sk-ant-explicit")

    assert client.api_key == "sk-ant-explicit"


def test_anthropic_client_missing_api_key(monkeypatch):
    """Test Anthropic client raises error when API key missing."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    with pytest.raises(LLMAuthError, match="ANTHROPIC_API_KEY not found"):
        AnthropicClient()


@pytest.mark.asyncio
async def test_create_message_text(anthropic_client):
    """Test a plain text turn."""
    mock_response = MagicMock()
    mock_response.stop_reason = "end_turn"
    mock_response.content = [text_block("Here is your page.")]

    with patch.object(
        anthropic_client.client.messages,
        "create",
        new_callable=AsyncMock,
    ) as mock_create:
        mock_create.return_value = mock_response

        result = await anthropic_client.create_message(
            messages=[{"role": "user", "content": "Find my notes"}],
            system_prompt="Test system",
        )

        assert isinstance(result, LLMResponse)
        assert result.text == "Here is your page."
        assert result.tool_calls == []

        call_kwargs = mock_create.call_args.kwargs
        assert call_kwargs["model"] == "claude-sonnet-4-5-20250929"
        assert call_kwargs["system"] == "Test system"
        assert "tools" not in call_kwargs


@pytest.mark.asyncio
async def test_create_message_tool_use(anthropic_client):
    """Test tool_use blocks are normalized to dicts."""
    mock_response = MagicMock()
    mock_response.stop_reason = "tool_use"
    mock_response.content = [
        text_block("Searching."),
        tool_use_block("toolu_1", "notion_post_search", {"query": "notes"}),
    ]
    tools = [{"name": "notion_post_search", "description": "Search", "input_schema": {}}]

    with patch.object(
        anthropic_client.client.messages,
        "create",
        new_callable=AsyncMock,
    ) as mock_create:
        mock_create.return_value = mock_response

        result = await anthropic_client.create_message(
            messages=[{"role": "user", "content": "Find my notes"}],
            tools=tools,
            max_tokens=1024,
        )

        assert result.stop_reason == "tool_use"
        assert result.tool_calls == [
            {
                "type": "tool_use",
                "id": "toolu_1",
                "name": "notion_post_search",
                "input": {"query": "notes"},
            }
        ]
        assert mock_create.call_args.kwargs["tools"] == tools
        assert mock_create.call_args.kwargs["max_tokens"] == 1024


# ============================================================================
# ERROR HANDLING TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_anthropic_authentication_error(anthropic_client):
    """Test Anthropic authentication error handling."""
    from anthropic import AuthenticationError

    with patch.object(
        anthropic_client.client.messages,
        "create",
        new_callable=AsyncMock,
    ) as mock_create:
        mock_create.side_effect = AuthenticationError(
            message="Invalid API key",
            response=MagicMock(status_code=401),
            body={"error": {"message": "Invalid API key"}},
        )

        with pytest.raises(LLMAuthError, match="Anthropic authentication failed"):
            await anthropic_client.create_message(messages=[{"role": "user", "content": "Hi"}])


@pytest.mark.asyncio
async def test_anthropic_rate_limit_error(anthropic_client):
    """Test Anthropic rate limit error handling."""
    from anthropic import RateLimitError

    with patch.object(
        anthropic_client.client.messages,
        "create",
        new_callable=AsyncMock,
    ) as mock_create:
        mock_create.side_effect = RateLimitError(
            message="Rate limit exceeded",
            response=MagicMock(status_code=429),
            body={"error": {"message": "Rate limit exceeded"}},
        )

        with pytest.raises(LLMRateLimitError, match="Anthropic rate limit exceeded"):
            await anthropic_client.create_message(messages=[{"role": "user", "content": "Hi"}])


@pytest.mark.asyncio
async def test_anthropic_api_error(anthropic_client):
    """Test generic Anthropic API error handling."""
    from anthropic import APIError

    with patch.object(
        anthropic_client.client.messages,
        "create",
        new_callable=AsyncMock,
    ) as mock_create:
        mock_create.side_effect = APIError(
            message="Server error",
            request=MagicMock(),
            body=None,
        )

        with pytest.raises(LLMError, match="Anthropic API error"):
            await anthropic_client.create_message(messages=[{"role": "user", "content": "Hi"}])
