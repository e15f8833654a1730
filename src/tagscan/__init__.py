import tagscan.version
from _tagscan.config import ScanConfig
from _tagscan.reading import lazy_read, read, tokenize
from _tagscan.tokenizer.errors import TokenizationError, UnterminatedTokenError
from _tagscan.tokenizer.token import Token
from _tagscan.tokenizer.token_kind import TokenKind
from _tagscan.writing import render, write

__version__ = tagscan.version.version

__all__ = [
    "ScanConfig",
    "Token",
    "TokenKind",
    "TokenizationError",
    "UnterminatedTokenError",
    "lazy_read",
    "read",
    "render",
    "tokenize",
    "write",
]
