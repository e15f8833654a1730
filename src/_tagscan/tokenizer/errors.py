from _tagscan.tokenizer.token import Token
from _tagscan.tokenizer.token_kind import TokenKind


class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token
    is not found at the current position of the scan (however, it could be
    that any other markup token not covered by that tokenizer is at that
    position).
    """

    pass


class UnterminatedTokenError(TokenizationError):
    """
    Thrown when a tokenizer reaches the end of the source while still
    looking for the delimiter that ends its token, ie. the '>' of "<div".

    :param label: Names the tokenizer that failed, one of "StartToken",
        "EndToken", "AttributeNode" or "ValueToken".
    :param start: The mark, where the unfinished token began.
    :param end: The position where scanning gave up, always the
        length of the source.
    :param span: The unscanned source between start and end.
    """

    def __init__(self, label, start, end, span):
        self.label = label
        self.start = start
        self.end = end
        self.span = span
        super().__init__(f"{self.prefix}: {span!r} at {start}-{end}")

    @property
    def prefix(self):
        return f"SyntaxError — {self.label}"

    def to_token(self):
        return Token(
            TokenKind.ERROR,
            self.start,
            value=f"{self.prefix}: {self.span}",
            end=self.end,
        )
