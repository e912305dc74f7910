"""
codes.generator - Client code generation: alpha part + free suffix.

The generator reads the existing codes once and hands back a value;
it never writes.  Two concurrent calls can therefore return the same
code, and the storage layer's UNIQUE constraint plus a retry in the
creation workflow (services.clients_service) settles the race.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from codes.alpha import derive_alpha_part
from codes.errors import ClientCodeError, CodeErrorKind, InvalidInput
from codes.lookup import CodeLookup
from codes.suffix import allocate_suffix, format_code

logger = logging.getLogger(__name__)


@dataclass
class CodeResult:
    code: Optional[str] = None
    kind: Optional[CodeErrorKind] = None
    detail: str = ""
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.kind is None


class CodeGenerator:

    def __init__(self, lookup: CodeLookup):
        self.lookup = lookup

    def generate(self, name: str) -> str:
        """
        Return a new client code for *name*, e.g. 'Acme Co' → 'ACO001'.

        Raises InvalidInput for a blank name and Exhausted when all
        999 suffixes are taken.  Lookup failures propagate as-is with
        a note naming the prefix being looked up.
        """
        if not name or not name.strip():
            raise InvalidInput()

        prefix = derive_alpha_part(name)
        logger.debug("Derived alpha part %s from %r", prefix, name)

        try:
            existing = self.lookup.find_codes_with_prefix(prefix)
        except Exception as exc:
            logger.error("Code lookup failed for prefix %s: %s", prefix, exc)
            exc.add_note(f"while looking up existing client codes for prefix {prefix!r}")
            raise

        code = format_code(prefix, allocate_suffix(prefix, existing))
        logger.info("Allocated client code %s (%d existing for prefix)",
                    code, len(existing))
        return code

    def try_generate(self, name: str) -> CodeResult:
        """Like generate(), but reports failures as a CodeResult kind."""
        try:
            return CodeResult(code=self.generate(name))
        except ClientCodeError as exc:
            return CodeResult(kind=exc.kind, detail=str(exc), error=exc)
        except Exception as exc:
            return CodeResult(kind=CodeErrorKind.DEPENDENCY, detail=str(exc), error=exc)
