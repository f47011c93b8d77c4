"""
up-banking-mcp

MCP server exposing the Up Banking API (accounts, transactions, categories)
as a fixed menu of read-only tools.
"""
__version__ = "1.0.0"
