"""
qualifiers.py: Decode const / arity / call type from an old-style macro name.
"""
from typing import Optional, Tuple

from pydantic import BaseModel

from .errors import ParseSignatureError
from .patterns import CALLTYPE_RE, MACRO_RE


class Qualifiers(BaseModel):
    is_const: bool = False
    has_call_type: bool = False
    call_type_token: Optional[str] = None
    declared_arg_count: int = 0
    add_override: bool = False

    def clause(self) -> str:
        """Render the trailing qualifier clause, e.g. ``, (const, override)``."""
        parts = []
        if self.is_const:
            parts.append('const')
        if self.add_override:
            parts.append('override')
        if self.call_type_token is not None:
            parts.append(f'Calltype({self.call_type_token})')
        if not parts:
            return ''
        return f", ({', '.join(parts)})"


def resolve(macro: str, params: str, add_override: bool = False) -> Tuple[Qualifiers, str]:
    """Decode *macro* and strip a leading call type from *params*.

    Returns the qualifiers and the parameter text that is left for the
    signature, i.e. ``name, return-type(args)``.
    """
    m = MACRO_RE.fullmatch(macro)
    if not m:
        raise ParseSignatureError(f"not an old-style macro: {macro}")
    q = Qualifiers(
        is_const=m.group(1) is not None,
        has_call_type=m.group(4) is not None,
        declared_arg_count=int(m.group(2)),
        add_override=add_override,
    )
    if not q.has_call_type:
        return q, params

    # The call type is always the first macro parameter.
    token = CALLTYPE_RE.match(params)
    if not token or not token.group(0).strip():
        raise ParseSignatureError(f"{macro} without a call type")
    rest = params[token.end():].lstrip()
    if not rest.startswith(','):
        raise ParseSignatureError(f"{macro} without a signature after the call type")
    q.call_type_token = token.group(0).strip()
    return q, rest[1:]
