"""
extract.py: Pull the text out of a balanced pair of parentheses.
"""
from .errors import UnmatchedParenthesis


def extract_from_open(s: str) -> str:
    """Return the text between the leading '(' of *s* and its matching ')'."""
    if not s.startswith('('):
        raise UnmatchedParenthesis(s)
    depth = 0
    for i, c in enumerate(s):
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
        if depth == 0:
            return s[1:i]
    raise UnmatchedParenthesis(s)


def extract_from_close(s: str) -> str:
    """Return the text between the trailing ')' of *s* and its matching '('.

    Scanning backwards skips parentheses nested inside the argument list,
    e.g. ``bool(SOME_MACRO(int))`` gives ``SOME_MACRO(int)``.
    """
    if not s.endswith(')'):
        raise UnmatchedParenthesis(s)
    depth = 0
    for i in range(len(s) - 1, -1, -1):
        c = s[i]
        if c == ')':
            depth += 1
        elif c == '(':
            depth -= 1
        if depth == 0:
            return s[i + 1:-1]
    raise UnmatchedParenthesis(s)
