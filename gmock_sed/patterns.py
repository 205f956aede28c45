"""
patterns.py: Regex definitions for old-style gMock macros.

Every other module matches macro text through these compiled patterns only.
"""
import re

# `10` has to come before `\d` or MOCK_METHOD10 stops at the `1`.
MACRO_NAME = r"MOCK_(?:CONST_)?METHOD(?:10|\d)(?:_T)?(?:_WITH_CALLTYPE)?"

# Macro name followed by the opening parenthesis of its argument list.
HEAD_RE = re.compile(r"\b(?P<macro>" + MACRO_NAME + r")\s*\(")

# Groups: 1 CONST_, 2 arity, 3 _T, 4 _WITH_CALLTYPE
MACRO_RE = re.compile(r"MOCK_(CONST_)?METHOD(10|\d)(_T)?(_WITH_CALLTYPE)?")

SINGLE_LINE_RE = re.compile(
    r"\b(?P<macro>" + MACRO_NAME + r")"
    r"(?P<params>[ \t]*\([^;\n]*\))"
    r"(?P<semicolon>[ \t]*;)?"
)

# Closing parenthesis and semicolon may be separated by newlines.
MULTI_LINE_RE = re.compile(
    r"\b(?P<macro>" + MACRO_NAME + r")"
    r"(?P<params>\s*\([^;]*\))"
    r"(?P<semicolon>\s*;)?"
)

# "name, return-type" with the argument list already removed.
SIG_RE = re.compile(r"\s*([^,\s][^,]*?)\s*,\s*(\S.*?)\s*", re.S)

CALLTYPE_RE = re.compile(r"[^,]+")
