"""
gmock_sed: rewrite old-style gMock MOCK_METHODn macros as MOCK_METHOD.
"""
from .errors import GmockSedError, ParseSignatureError, UnmatchedParenthesis
from .rewrite import ReplaceMode, ReplaceSummary, RewriteOptions, rewrite
from .search import SearchMode, SearchSummary, search

__all__ = [
    'GmockSedError',
    'ParseSignatureError',
    'ReplaceMode',
    'ReplaceSummary',
    'RewriteOptions',
    'SearchMode',
    'SearchSummary',
    'UnmatchedParenthesis',
    'rewrite',
    'search',
]
