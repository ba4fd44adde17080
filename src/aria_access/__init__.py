"""ARIA Access tool server.

This package exposes the Varian ARIA Access API as agent tools. It holds
the authenticated client session, the gateway request envelope, the
declarative tool catalogue, and three ways to reach the tools: an MCP
stdio server, a FastAPI app, and LangChain StructuredTools.
"""

__version__ = "1.0.0"
