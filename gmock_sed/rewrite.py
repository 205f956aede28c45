"""
rewrite.py: Replace old-style MOCK_METHODn macros in a buffer with MOCK_METHOD.

Each match is rewritten on its own; a match that fails to parse is left
exactly as it was and reported in ``ReplaceSummary.errors``.
"""
import logging
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .errors import GmockSedError, ParseSignatureError
from .extract import extract_from_open
from .patterns import MULTI_LINE_RE, SINGLE_LINE_RE
from .qualifiers import resolve
from .signature import parse_signature

logger = logging.getLogger(__name__)


class ReplaceMode(Enum):
    SINGLE_LINE = 'single-line'
    MULTI_LINE = 'multi-line'

    @classmethod
    def from_flag(cls, multi_line: bool) -> 'ReplaceMode':
        return cls.MULTI_LINE if multi_line else cls.SINGLE_LINE

    @property
    def pattern(self) -> 're.Pattern[str]':
        return MULTI_LINE_RE if self is ReplaceMode.MULTI_LINE else SINGLE_LINE_RE


class RewriteOptions(BaseModel):
    add_override: bool = False
    strict_arity: bool = False


class ReplaceOutcome(BaseModel):
    text: str
    error: Optional[str] = None


class ReplaceSummary(BaseModel):
    suggestion: Optional[str] = None
    total: int = 0
    errors: List[str] = Field(default_factory=list)

    def error_free(self) -> bool:
        """True when something changed and every match was rewritten."""
        return not self.errors and self.suggestion is not None

    def error_summary(self) -> str:
        return '\n'.join(self.errors)

    def ratio(self) -> str:
        if self.suggestion is None:
            return '(0/0)'
        return f'({self.total - len(self.errors)}/{self.total})'


def render(m: 're.Match[str]', options: RewriteOptions) -> str:
    """Build the MOCK_METHOD(...) text for one old-style macro match."""
    params = m.group('params').strip()
    inner = extract_from_open(params)
    if len(inner) + 2 != len(params):
        raise ParseSignatureError(f"unexpected text after {m.group('macro')}(...)")

    q, rest = resolve(m.group('macro'), inner, options.add_override)
    sig = parse_signature(rest, q.declared_arg_count, options.strict_arity)
    semicolon = ';' if m.group('semicolon') else ''
    return f"MOCK_METHOD({sig}{q.clause()}){semicolon}"


def replace_match(m: 're.Match[str]', options: RewriteOptions) -> ReplaceOutcome:
    original = m.group(0)
    try:
        return ReplaceOutcome(text=render(m, options))
    except GmockSedError as e:
        logger.debug("Keeping %r at offset %d: %s", original, m.start(), e)
        return ReplaceOutcome(text=original, error=f"{type(e).__name__}: {e}\t{original}")


def rewrite(buffer: str, mode: ReplaceMode = ReplaceMode.SINGLE_LINE,
            options: Optional[RewriteOptions] = None) -> ReplaceSummary:
    options = options or RewriteOptions()
    errors: list[str] = []
    total = 0

    def repl(m: 're.Match[str]') -> str:
        nonlocal total
        total += 1
        outcome = replace_match(m, options)
        if outcome.error:
            errors.append(outcome.error)
        return outcome.text

    new = mode.pattern.sub(repl, buffer)
    suggestion = new if new != buffer else None
    return ReplaceSummary(suggestion=suggestion, total=total, errors=errors)
