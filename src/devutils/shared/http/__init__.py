from .__http import tool_error_handler

__all__ = ["tool_error_handler"]
