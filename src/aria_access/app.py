"""FastAPI server: the HTTP entry point for the ARIA tools.

Clients that cannot speak MCP can list and call the same tools over plain
HTTP:

- GET  /health       : Simple check that the server is running
- GET  /tools        : Every tool with its description and input schema
- POST /tools/{name} : Run one tool; the JSON body is its arguments

Like the MCP server, a tool call always answers 200 with a text result,
including when ARIA itself failed. Only an unknown tool name is a 404.

Run locally with:
    uvicorn aria_access.app:app --reload
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel

from aria_access import __version__
from aria_access.aria_client import close_client
from aria_access.tools import ALL_TOOLS, get_tool


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await close_client()


app = FastAPI(
    title="ARIA Access Tools",
    description="Call ARIA Access API tools over HTTP",
    version=__version__,
    lifespan=lifespan,
)


class ToolInfo(BaseModel):
    """One entry of the /tools listing."""

    name: str
    description: str
    input_schema: dict[str, Any]


class ToolResponse(BaseModel):
    """What POST /tools/{name} sends back."""

    tool: str
    text: str


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint. Returns 200 if the server is running."""
    return {"status": "ok"}


@app.get("/tools", response_model=list[ToolInfo])
async def list_tools() -> list[ToolInfo]:
    return [
        ToolInfo(name=tool.name, description=tool.description, input_schema=tool.input_schema())
        for tool in ALL_TOOLS
    ]


@app.post("/tools/{name}", response_model=ToolResponse)
async def run_tool(name: str, arguments: dict[str, Any] | None = Body(default=None)) -> ToolResponse:
    """Run a tool with the JSON body as its arguments (empty body = no arguments)."""
    tool = get_tool(name)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")
    text = await tool.run(arguments)
    return ToolResponse(tool=name, text=text)
