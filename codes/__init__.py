"""
codes - Client code generation.

Public API:
    alpha.derive_alpha_part(name)
    suffix.allocate_suffix / format_code / parse_code
    lookup.CodeLookup / InMemoryCodeLookup
    generator.CodeGenerator
"""

from codes.errors import (                          # noqa: F401
    ClientCodeError,
    CodeErrorKind,
    Exhausted,
    InvalidInput,
)
from codes.alpha import derive_alpha_part           # noqa: F401
from codes.suffix import (                          # noqa: F401
    MAX_SUFFIX,
    allocate_suffix,
    format_code,
    parse_code,
)
from codes.lookup import CodeLookup, InMemoryCodeLookup   # noqa: F401
from codes.generator import CodeGenerator, CodeResult     # noqa: F401
