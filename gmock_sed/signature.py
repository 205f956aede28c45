"""
signature.py: Split ``name, return-type(args)`` into the pieces MOCK_METHOD takes.
"""
from pydantic import BaseModel

from .commas import count_arguments, has_unprotected_comma, protect, protect_arguments
from .errors import ParseSignatureError
from .extract import extract_from_close
from .patterns import SIG_RE


class Signature(BaseModel):
    return_type: str
    method_name: str
    argument_list: str = ""

    def __str__(self) -> str:
        return f"{self.return_type}, {self.method_name}, ({self.argument_list})"


def format_arguments(args: str, declared: int) -> str:
    """Drop ``void``/empty argument lists and protect template commas."""
    if not args.strip() or args.strip() == 'void':
        return ''
    if has_unprotected_comma(args, declared):
        return protect_arguments(args)
    return args


def parse_signature(s: str, declared: int, strict_arity: bool = False) -> Signature:
    s = s.strip()
    args = extract_from_close(s)
    head = s[:len(s) - len(args) - 2]

    m = SIG_RE.fullmatch(head)
    if not m:
        raise ParseSignatureError(f"expected 'name, return-type' but got {head.strip()!r}")
    name, ret = m.group(1), m.group(2)

    arguments = format_arguments(args, declared)
    if strict_arity:
        found = count_arguments(arguments)
        if found != declared:
            raise ParseSignatureError(f"{name} declares {declared} argument(s) but has {found}")

    return Signature(return_type=protect(ret), method_name=name, argument_list=arguments)
