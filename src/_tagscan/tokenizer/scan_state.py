from _tagscan.tokenizer.common import END_TAG_START, TAG_NAME_DELIMITERS
from _tagscan.tokenizer.errors import UnterminatedTokenError


class ScanState:
    """
    The cursor of a single scan over a markup source.

    The source is never modified. position only moves forward, except when
    comment detection winds back to just after the '<' that started it.
    mark records where the text of the token currently being built began.
    """

    def __init__(self, source):
        self.source = source
        self.length = len(source)
        self.position = 0
        self.mark = 0
        self.raw_text_mode = False
        self.raw_text_tag = None

    def at_end(self):
        return self.position >= self.length

    def current(self):
        return self.source[self.position]

    def startswith(self, marker):
        return self.source.startswith(marker, self.position)

    def advance(self, count=1):
        self.position += count

    def seek(self, offset):
        self.position = offset

    def set_mark(self, offset=None):
        if offset is None:
            offset = self.position
        self.mark = offset

    def span(self):
        return self.source[self.mark : self.position]

    def set_raw_text_tag(self, tag_name):
        """
        :param tag_name: The name of the raw-text element that was entered,
            or None when the last tag did not name a raw-text element.
        """
        self.raw_text_tag = tag_name
        self.raw_text_mode = tag_name is not None

    def at_raw_text_end(self):
        """
        :returns: Whether the position is at the end tag closing the
            raw-text element, ie. at "</script>" after "<script>".
        """
        if self.raw_text_tag is None:
            return False
        close = END_TAG_START + self.raw_text_tag
        if not self.startswith(close):
            return False
        after = self.position + len(close)
        return after >= self.length or self.source[after] in TAG_NAME_DELIMITERS

    def unterminated(self, label):
        return UnterminatedTokenError(label, self.mark, self.position, self.span())
