class ToolError(ValueError):
    """A tool call failed; the message is shown to the client as-is."""
