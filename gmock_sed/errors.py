"""
errors.py: Per-match failures raised while rewriting a macro.
"""


class GmockSedError(Exception):
    """Base class for failures that only affect a single macro invocation."""


class UnmatchedParenthesis(GmockSedError):
    def __init__(self, text: str):
        super().__init__(f"no matching parenthesis in {text!r}")
        self.text = text


class ParseSignatureError(GmockSedError):
    pass
