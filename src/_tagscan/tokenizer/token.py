from dataclasses import dataclass
from typing import Optional

from _tagscan.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in a markup document.

    Tokens own a copy of their payload, so they stay valid after the
    source they were scanned from is discarded.
    """

    kind: TokenKind
    start: int
    value: str = ""
    key: str = ""
    end: Optional[int] = None

    def __str__(self):
        """
        :returns: The token rendered on one line, ie. "TagOpen - div [1]",
            "Attribute - id=main [5]" or "Error - SyntaxError ... [0 - 4]".
        """
        name = self.kind.display_name
        if self.kind == TokenKind.ATTRIBUTE:
            return f"{name} - {self.key}={self.value} [{self.start}]"
        if self.kind == TokenKind.ERROR:
            return f"{name} - {self.value} [{self.start} - {self.end}]"
        return f"{name} - {self.value} [{self.start}]"
