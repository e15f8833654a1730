TAG_START = "<"
END_TAG_START = "</"
TAG_END = ">"
COMMENT_START = "<!--"
COMMENT_END = "-->"
SPACE = " "
EQUALS = "="
QUOTES = ("'", '"')

TAG_NAME_DELIMITERS = (SPACE, TAG_END)


def trimmed(source, start, end):
    """
    Strip surrounding whitespace from a span of the source, ie.
    trimmed("<p> Hi </p>", 3, 7) == (4, "Hi").

    :returns: Tuple of the offset where the stripped value starts and the
        stripped value. For a span containing only whitespace the offset is
        start and the value is empty.
    """
    raw = source[start:end]
    value = raw.strip()
    if not value:
        return start, ""
    return start + len(raw) - len(raw.lstrip()), value
