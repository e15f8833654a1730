from _tagscan.config import ScanConfig
from _tagscan.logger import get_logger
from _tagscan.tokenizer.common import (
    COMMENT_END,
    COMMENT_START,
    END_TAG_START,
    EQUALS,
    QUOTES,
    SPACE,
    TAG_END,
    TAG_NAME_DELIMITERS,
    TAG_START,
    trimmed,
)
from _tagscan.tokenizer.errors import TokenizationError, UnterminatedTokenError
from _tagscan.tokenizer.scan_state import ScanState
from _tagscan.tokenizer.token import Token
from _tagscan.tokenizer.token_kind import TokenKind

logger = get_logger(__name__)


class MarkupTokenizer:
    """
    The markup tokenizer is an iterable of tokens for a given markup source.

    Each tokenize_* method is a tokenizer: a generator that advances the scan
    state and yields the tokens it finds. A tokenizer that reaches the end of
    the source before its closing delimiter raises UnterminatedTokenError,
    which the dispatch loop turns into a single error token (or lets
    propagate, when the config is strict).
    """

    def __init__(self, source, config=None):
        """
        :param source: The complete markup source as a string.
        :param config: The ScanConfig, defaults to ScanConfig().
        """
        self.config = config if config is not None else ScanConfig()
        self.state = ScanState(source)

    def __iter__(self):
        return self.tokenize_markup()

    def tokenize_markup(self):
        """
        The dispatch loop, tokenizes the whole source by repeatedly choosing a
        tokenizer from the next characters.
        """
        state = self.state
        logger.debug("Tokenizing source of length %d", state.length)
        while not state.at_end():
            try:
                yield from self.tokenize_next()
            except UnterminatedTokenError as err:
                if self.config.strict:
                    raise
                logger.debug("Unterminated token: %s", err)
                yield err.to_token()
        logger.debug("Finished tokenizing at %d", state.position)

    def tokenize_next(self):
        state = self.state
        if self.in_verbatim_raw_text():
            yield from self.tokenize_raw_text()
        elif state.startswith(END_TAG_START):
            state.advance(len(END_TAG_START))
            yield from self.tokenize_end_tag()
        elif state.startswith(COMMENT_START) and not state.raw_text_mode:
            yield from self.tokenize_text()
        elif state.startswith(TAG_START):
            state.advance(len(TAG_START))
            yield from self.tokenize_start_tag()
            yield from self.tokenize_attributes()
        else:
            yield from self.tokenize_text()

    def in_verbatim_raw_text(self):
        return (
            self.config.verbatim_raw_text
            and self.state.raw_text_mode
            and not self.state.at_raw_text_end()
        )

    def tag_token(self, kind):
        """
        Make a tag token from the span since the mark and enter or leave
        raw-text mode depending on the tag name.
        """
        state = self.state
        name = state.span()
        entering = name in self.config.raw_text_elements
        if self.config.verbatim_raw_text and kind == TokenKind.TAG_CLOSE:
            entering = False
        state.set_raw_text_tag(name if entering else None)
        return Token(kind, state.mark, name)

    def text_token(self, start, end):
        offset, value = trimmed(self.state.source, start, end)
        if value:
            return Token(TokenKind.TEXT, offset, value)
        return None

    def tokenize_start_tag(self):
        """
        Tokenize the name of a start tag, yields
        Token(TokenKind.TAG_OPEN, 1, "div") for source containing
        '<div class="a">'. The space or '>' following the name is
        left for tokenize_attributes.
        """
        state = self.state
        state.set_mark()
        while not state.at_end():
            if state.current() in TAG_NAME_DELIMITERS:
                yield self.tag_token(TokenKind.TAG_OPEN)
                return
            state.advance()
        raise state.unterminated("StartToken")

    def tokenize_end_tag(self):
        """
        Tokenize an end tag up to and including its '>', yields
        Token(TokenKind.TAG_CLOSE, 2, "div") for source containing "</div >".
        """
        state = self.state
        state.set_mark()
        while not state.at_end():
            if state.current() in TAG_NAME_DELIMITERS:
                yield self.tag_token(TokenKind.TAG_CLOSE)
                yield from self.tokenize_tag_end()
                return
            state.advance()
        raise state.unterminated("EndToken")

    def tokenize_tag_end(self):
        state = self.state
        while not state.at_end():
            if state.current() == TAG_END:
                state.advance()
                return iter([])
            state.advance()
        raise state.unterminated("EndToken")

    def attribute_token(self, pending_key):
        """
        Finalize the span since the mark as the value of the pending key, or
        as a key without value when no key is pending.

        :param pending_key: None, or tuple of the offset and text of the key
            preceding a '='.
        :returns: The attribute token, or None if the span and the key
            are both empty.
        """
        state = self.state
        offset, value = trimmed(state.source, state.mark, state.position)
        if pending_key is not None and pending_key[1]:
            key_offset, key = pending_key
            return Token(TokenKind.ATTRIBUTE, key_offset, value, key=key)
        if value:
            return Token(TokenKind.ATTRIBUTE, offset, "", key=value)
        return None

    def tokenize_attributes(self):
        """
        Tokenize the attributes following the name of a start tag, up to and
        including the closing '>', yields
        [
            Token(TokenKind.ATTRIBUTE, 5, '"a"', key="class"),
            Token(TokenKind.ATTRIBUTE, 15, "", key="hidden"),
        ]
        for source containing '<div class="a" hidden>'.

        Quotes are kept in the value. Unless quote_aware_attributes is set,
        a space inside quotes still ends the value and a '>' inside quotes
        still ends the tag.
        """
        state = self.state
        quote_aware = self.config.quote_aware_attributes
        state.set_mark()
        pending_key = None
        in_quotes = False
        while not state.at_end():
            char = state.current()
            protected = quote_aware and in_quotes
            if char == TAG_END and not protected:
                token = self.attribute_token(pending_key)
                if token is not None:
                    yield token
                state.advance()
                return
            if char == SPACE and not protected:
                token = self.attribute_token(pending_key)
                if token is not None:
                    yield token
                    pending_key = None
                state.set_mark()
            elif char == EQUALS and not in_quotes:
                pending_key = trimmed(state.source, state.mark, state.position)
                state.set_mark(state.position + 1)
            elif char in QUOTES:
                in_quotes = not in_quotes
            state.advance()
        raise state.unterminated("AttributeNode")

    def tokenize_text(self):
        """
        Tokenize character data up to the next '<', yields
        Token(TokenKind.TEXT, 4, "Hello") for source containing
        "<p> Hello </p>" when positioned after "<p>".

        Everything up to a stray '>' is dropped. Comments are handed to
        tokenize_comment. In raw-text mode the data is dropped and the '<'
        is left for the dispatch loop.
        """
        state = self.state
        state.set_mark()
        while not state.at_end():
            char = state.current()
            if char == TAG_START:
                if state.raw_text_mode:
                    return
                text_end = state.position
                try:
                    yield from self.tokenize_comment()
                except TokenizationError:
                    token = self.text_token(state.mark, text_end)
                    if token is not None:
                        yield token
                return
            if char == TAG_END:
                state.set_mark(state.position + 1)
            state.advance()
        yield from self.tokenize_trailing_text()

    def tokenize_trailing_text(self):
        state = self.state
        if not self.config.allow_trailing_text:
            raise state.unterminated("ValueToken")
        if state.raw_text_mode and not self.config.verbatim_raw_text:
            return
        token = self.text_token(state.mark, state.position)
        if token is not None:
            yield token

    def tokenize_raw_text(self):
        """
        Tokenize the body of a raw-text element verbatim, yields
        Token(TokenKind.TEXT, 8, "a < b") for source containing
        "<script>a < b</script>" when positioned after "<script>".
        """
        state = self.state
        state.set_mark()
        while not state.at_end():
            if state.at_raw_text_end():
                token = self.text_token(state.mark, state.position)
                if token is not None:
                    yield token
                return
            state.advance()
        yield from self.tokenize_trailing_text()

    def tokenize_comment(self):
        """
        Tokenize a comment at the current position, yields
        [
            Token(TokenKind.TEXT, 0, "Hello"),
            Token(TokenKind.COMMENT, 11, "note"),
        ]
        for source containing "Hello <!-- note -->". The text preceding the
        comment is taken from the mark, and only yielded if not empty.

        If no comment starts at the position, the position is left unchanged.
        If the comment is never closed, the position is wound back to just
        after the '<' that started it. In both cases TokenizationError is
        raised and nothing is yielded.
        """
        state = self.state
        start = state.position
        if not state.startswith(COMMENT_START):
            raise TokenizationError(f"Expected comment at {start}")
        interior_start = start + len(COMMENT_START)
        close = state.source.find(COMMENT_END, interior_start)
        if close == -1:
            state.seek(start + len(TAG_START))
            raise TokenizationError(
                f"Reached end of source while reading comment started at {start}"
            )
        text = self.text_token(state.mark, start)
        offset, interior = trimmed(state.source, interior_start, close)
        state.seek(close + len(COMMENT_END))
        if text is not None:
            yield text
        yield Token(TokenKind.COMMENT, offset, interior)
