"""Chat runtime: the model ↔ Notion tool loop.

For each chat request the tools are rebuilt from the registry with the
credential currently in the connector's storage, so a disconnect takes
effect on the next message. The loop runs until the model stops asking
for tools or ``max_steps`` turns have been used.
"""

import asyncio
import json
from typing import Any

from pydantic import BaseModel, Field

from ona_connector import CredentialStorage, read_token
from ona_llm.client import ChatMessage, LLMClient
from ona_obs.logging import get_logger
from ona_tools.registry import ToolRegistry

logger = get_logger(__name__)

SYSTEM_PROMPT = """You are a helpful assistant with access to the user's Notion workspace.

Use the notion_* tools to search, read and edit pages, databases, blocks and comments.
Page and database IDs come from search results or from earlier tool output; never invent them.
If a tool returns an "error" field, explain the problem to the user instead of retrying blindly.
If the Notion integration token is not configured, ask the user to connect Notion first."""


class ToolCallRecord(BaseModel):
    """One tool invocation made during a chat turn."""

    id: str
    name: str
    input: dict[str, Any]
    result: Any


class ChatResult(BaseModel):
    """Outcome of one chat request."""

    chat_id: str
    text: str
    tool_calls: list[ToolCallRecord] = Field(default_factory=list)
    steps: int
    stop_reason: str | None = None


class ChatRuntime:
    """Runs a conversation against the LLM with Notion tools bound to the stored credential."""

    def __init__(
        self,
        llm: LLMClient,
        registry: ToolRegistry,
        storage: CredentialStorage,
        system_prompt: str = SYSTEM_PROMPT,
        max_tokens: int = 4096,
        tool_options: dict[str, Any] | None = None,
    ):
        self.llm = llm
        self.registry = registry
        self.storage = storage
        self.system_prompt = system_prompt
        self.max_tokens = max_tokens
        self.tool_options = tool_options or {}

    async def _call_tool(self, tools: dict[str, Any], call: dict[str, Any], ctx: dict[str, Any]) -> Any:
        tool = tools.get(call["name"])
        if tool is None:
            return {"error": f"Unknown tool: {call['name']}"}
        return await tool.execute(ctx, call.get("input") or {})

    async def run(
        self,
        chat_id: str,
        messages: list[ChatMessage],
        max_steps: int = 8,
    ) -> ChatResult:
        """Run the tool loop for one user request.

        Args:
            chat_id: Chat identifier (log correlation only)
            messages: Conversation history ending with the user's message
            max_steps: Maximum number of model turns

        Returns:
            Final assistant text plus every tool call made

        Raises:
            LLMError: The model call failed
        """
        token = await asyncio.to_thread(read_token, self.storage)
        tools = self.registry.bind(token, **self.tool_options)
        tool_defs = [tool.describe().to_anthropic() for tool in tools.values()]
        conversation: list[dict[str, Any]] = [m.model_dump() for m in messages]
        ctx = {"chat_id": chat_id}

        records: list[ToolCallRecord] = []
        response = None
        steps = 0

        while steps < max_steps:
            steps += 1
            response = await self.llm.create_message(
                conversation,
                tools=tool_defs,
                system_prompt=self.system_prompt,
                max_tokens=self.max_tokens,
            )
            conversation.append({"role": "assistant", "content": response.content})

            calls = response.tool_calls
            if response.stop_reason != "tool_use" or not calls:
                break

            tool_results = []
            for call in calls:
                result = await self._call_tool(tools, call, ctx)
                logger.info(
                    "tool_called",
                    chat_id=chat_id,
                    tool=call["name"],
                    is_error=isinstance(result, dict) and "error" in result,
                )
                records.append(
                    ToolCallRecord(
                        id=call["id"], name=call["name"], input=call.get("input") or {}, result=result
                    )
                )
                tool_results.append(
                    {
                        "type": "tool_result",
                        "tool_use_id": call["id"],
                        "content": json.dumps(result),
                        "is_error": isinstance(result, dict) and "error" in result,
                    }
                )
            conversation.append({"role": "user", "content": tool_results})

        return ChatResult(
            chat_id=chat_id,
            text=response.text if response else "",
            tool_calls=records,
            steps=steps,
            stop_reason=response.stop_reason if response else None,
        )
