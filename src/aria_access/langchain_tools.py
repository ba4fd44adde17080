"""LangChain wrappers for the ARIA tools.

Agent frameworks built on LangChain/LangGraph expect StructuredTool
objects: a coroutine packaged with its name, description and an argument
schema. Each ToolSpec already carries a pydantic args model, so wrapping is
mechanical. The wrapped coroutine goes through ToolSpec.run(), so these
tools also return error text instead of raising.

Usage:
    tools = build_langchain_tools()
    agent = create_react_agent(model=model, tools=tools)
"""

from __future__ import annotations

from typing import Any

from langchain_core.tools import StructuredTool

from aria_access.aria_client import AriaClient
from aria_access.tools import ALL_TOOLS
from aria_access.tools.base import ToolSpec


def as_structured_tool(spec: ToolSpec, client: AriaClient | None = None) -> StructuredTool:
    """Wrap one ToolSpec as a LangChain StructuredTool."""

    async def _run(**kwargs: Any) -> str:
        return await spec.run(kwargs, client=client)

    return StructuredTool.from_function(
        coroutine=_run,
        name=spec.name,
        description=spec.description,
        args_schema=spec.args_model,
    )


def build_langchain_tools(client: AriaClient | None = None) -> list[StructuredTool]:
    """Wrap every ARIA tool, optionally bound to a specific client session."""
    return [as_structured_tool(spec, client=client) for spec in ALL_TOOLS]
