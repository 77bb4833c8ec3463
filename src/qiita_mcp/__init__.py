"""MCP server for the Qiita API."""

__version__ = "0.1.0"
