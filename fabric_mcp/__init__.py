"""fabric-mcp: Fabric AI patterns over the Model Context Protocol."""

__version__ = "1.0.0"
