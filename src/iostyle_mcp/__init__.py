"""iostyle-mcp — convert WhatsApp-formatted messages to iOS-style Unicode text."""

__version__ = "0.1.0"
