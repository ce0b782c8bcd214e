# Framework-free tool logic. Each module wraps one library call and shapes
# its result; routers translate ToolError into an error response.
from .errors import ToolError

__all__ = ["ToolError"]
