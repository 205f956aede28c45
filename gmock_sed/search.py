"""
search.py: Cheap check for old-style macros without rewriting anything.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .patterns import HEAD_RE


class SearchMode(Enum):
    LAZY = 'lazy'
    FULL = 'full'

    @classmethod
    def from_flag(cls, count: bool) -> 'SearchMode':
        return cls.FULL if count else cls.LAZY


class SearchSummary(BaseModel):
    is_match: bool
    count: Optional[int] = None

    def __str__(self) -> str:
        return f":{self.count}" if self.count is not None else ""


def search(buffer: str, mode: SearchMode = SearchMode.LAZY) -> SearchSummary:
    if mode is SearchMode.FULL:
        count = sum(1 for _ in HEAD_RE.finditer(buffer))
        return SearchSummary(is_match=count > 0, count=count)
    return SearchSummary(is_match=HEAD_RE.search(buffer) is not None)
