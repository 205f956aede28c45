"""
commas.py: Parenthesise template types whose commas would split a macro argument.

``MOCK_METHOD`` has no arity suffix, so ``std::map<int, double>`` has to be
written as ``(std::map<int, double>)`` to stay a single argument.
"""


def split_top_level(s: str) -> list[str]:
    """Split *s* on commas that are not inside ``<...>``."""
    segments = []
    depth = 0
    start = 0
    for i, c in enumerate(s):
        if c == '<':
            depth += 1
        elif c == '>':
            depth -= 1
        elif c == ',' and depth == 0:
            segments.append(s[start:i])
            start = i + 1
    segments.append(s[start:])
    return segments


def protect(s: str) -> str:
    """Wrap *s* in parentheses if it contains a comma, keeping outer whitespace."""
    if ',' not in s:
        return s
    core = s.strip()
    lead = s[:len(s) - len(s.lstrip())]
    trail = s[len(s.rstrip()):]
    return f"{lead}({core}){trail}"


def protect_arguments(args: str) -> str:
    return ','.join(protect(seg) for seg in split_top_level(args))


def has_unprotected_comma(args: str, declared: int) -> bool:
    """True when the raw comma count does not line up with the declared arity.

    A trailing comma (multi-line argument lists) does not start a new argument.
    """
    commas = args.count(',')
    trailing = args.rstrip().endswith(',')
    return declared != commas + (0 if trailing else 1)


def count_arguments(args: str) -> int:
    """Count arguments separated by commas outside both ``()`` and ``<>``."""
    if not args.strip():
        return 0
    depth = 0
    count = 1
    for c in args:
        if c in '(<':
            depth += 1
        elif c in ')>':
            depth -= 1
        elif c == ',' and depth == 0:
            count += 1
    if args.rstrip().endswith(','):
        count -= 1
    return count
