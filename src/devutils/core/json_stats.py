import json
from dataclasses import asdict, dataclass
from typing import Any

from devutils.core.errors import ToolError


@dataclass
class JsonStats:
    objects: int = 0
    arrays: int = 0
    strings: int = 0
    numbers: int = 0
    booleans: int = 0
    nulls: int = 0
    max_depth: int = 0
    total_keys: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name}")


def _loads(text: str) -> Any:
    # NaN and Infinity are not JSON
    return json.loads(text, parse_constant=_reject_constant)


def parse(text: str) -> Any:
    # Oversized integers raise ValueError, deep nesting RecursionError
    try:
        return _loads(text)
    except (ValueError, RecursionError) as e:
        raise ToolError(_describe(e)) from e


def validation_error(text: str) -> str | None:
    """None when `text` is valid JSON, the parser message otherwise."""
    try:
        _loads(text)
    except (ValueError, RecursionError) as e:
        return _describe(e)
    return None


def _describe(error: Exception) -> str:
    if isinstance(error, RecursionError):
        return "JSON is nested too deeply"
    return str(error)


def analyze(value: Any) -> JsonStats:
    """Count value types and measure nesting; the root sits at depth 0."""
    stats = JsonStats()
    stack = [(value, 0)]

    while stack:
        node, depth = stack.pop()
        stats.max_depth = max(stats.max_depth, depth)

        if isinstance(node, dict):
            stats.objects += 1
            stats.total_keys += len(node)
            stack.extend((child, depth + 1) for child in node.values())
        elif isinstance(node, list):
            stats.arrays += 1
            stack.extend((child, depth + 1) for child in node)
        elif isinstance(node, str):
            stats.strings += 1
        # bool is a subclass of int
        elif isinstance(node, bool):
            stats.booleans += 1
        elif isinstance(node, int | float):
            stats.numbers += 1
        elif node is None:
            stats.nulls += 1

    return stats


def format_text(text: str, indent: int = 2) -> str:
    return _dumps(parse(text), indent=indent)


def minify_text(text: str) -> str:
    return _dumps(parse(text), separators=(",", ":"))


def _dumps(value: Any, **kwargs) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, **kwargs)
    except RecursionError as e:
        raise ToolError(_describe(e)) from e


def _members(node: Any, path: str) -> list[tuple[str, Any, str]]:
    if isinstance(node, dict):
        pairs = node.items()
    elif isinstance(node, list):
        pairs = ((str(index), item) for index, item in enumerate(node))
    else:
        return []
    return [(key, child, f"{path}.{key}" if path else key) for key, child in pairs]


def search(value: Any, query: str) -> list[dict]:
    """Case-insensitive match on member keys and string values."""
    needle = query.lower()
    results = []
    if not needle:
        return results

    # Pre-order walk without recursion; reversed pushes keep document order
    stack = list(reversed(_members(value, "")))
    while stack:
        key, child, path = stack.pop()
        key_match = needle in key.lower()
        value_match = isinstance(child, str) and needle in child.lower()
        if key_match or value_match:
            results.append({"path": path, "key": key, "value": child})
        stack.extend(reversed(_members(child, path)))

    return results
