from pydantic import Field

from .serde_base import SerdeBase


class DiffRequest(SerdeBase):
    original: str
    modified: str
    ignore_whitespace: bool = False
    context: int = Field(default=3, ge=0)


class DiffHunk(SerdeBase):
    tag: str  # replace | delete | insert
    original_start: int
    original_end: int
    modified_start: int
    modified_end: int
    original_lines: list[str]
    modified_lines: list[str]


class DiffResponse(SerdeBase):
    identical: bool
    added: int
    removed: int
    unified: str
    hunks: list[DiffHunk]
