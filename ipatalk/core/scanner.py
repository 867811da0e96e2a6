"""Index-based cursor over the codepoints of an IPA string."""

from __future__ import annotations

from typing import List, Optional


class Scanner:
    """Walks a string one codepoint at a time.

    ``current`` is the symbol most recently consumed; errors report it
    together with :meth:`prefix`, the input consumed so far.
    """

    def __init__(self, text: str) -> None:
        self.symbols: List[str] = list(text)
        self.pos = 0
        self.current: str = ""

    def done(self) -> bool:
        return self.pos >= len(self.symbols)

    def peek(self) -> Optional[str]:
        if self.done():
            return None
        return self.symbols[self.pos]

    def advance(self, count: int = 1) -> str:
        """Consume *count* codepoints and return them joined."""
        taken = "".join(self.symbols[self.pos:self.pos + count])
        self.pos += count
        self.current = taken
        return taken

    def prefix(self) -> str:
        return "".join(self.symbols[:self.pos])
