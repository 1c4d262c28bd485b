"""Task management MCP server: users, projects, tasks, tags and comments."""

__version__ = "1.0.0"
