"""
In this module, a tokenizer is a generator that advances a scan over a
markup source and yields tokens. Tokenizers that are tried speculatively
(comments) wind the scan back and raise TokenizationError when they do not
match.

The markup is scanned in a single pass with at most two characters of
lookahead for choosing a tokenizer, and four for recognizing comments. Only
comment detection ever needs to backtrack, and only to one point: just after
the '<' that started it. This means that there is no bookkeeping of
backtracking points.

Tokenizers never resynchronize after running out of input. The first
unterminated token ends the scan with one error token.
"""

from .markup_tokenizer import MarkupTokenizer

__all__ = ["MarkupTokenizer"]
