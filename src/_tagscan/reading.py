import pathlib
from contextlib import contextmanager

from _tagscan.config import ScanConfig
from _tagscan.logger import get_logger
from _tagscan.tokenizer import MarkupTokenizer

logger = get_logger(__name__)


def as_text(source, encoding):
    """
    If a bytelike object, decode it, otherwise do nothing.
    :param source: A byte string, or simply a string.
    :param encoding: The encoding used for decoding byte strings.
    """
    if hasattr(source, "decode"):
        source = source.decode(encoding)
    return source


def tokenize(source, config=None):
    """
    Tokenizes markup held in memory and returns the list of tokens,
    ie. tokens = tokenize('<p class="a">Hello</p>')

    :param source: The markup as a string or byte string.
    :param config: The ScanConfig, defaults to ScanConfig().
    """
    if config is None:
        config = ScanConfig()
    return list(MarkupTokenizer(as_text(source, config.encoding), config))


def read(filelike, config=None):
    """
    Reads a markup file and returns the list of tokens,
    ie. tokens = read("/my/page.html")

    :param filelike: A path or an open stream, in text or binary mode.
    :param config: The ScanConfig, defaults to ScanConfig().
    """
    with lazy_read(filelike, config) as tokens:
        return list(tokens)


@contextmanager
def lazy_read(filelike, config=None):
    """
    Reads a markup file and yields an iterator of its tokens, which are
    produced as the iterator is consumed. The whole file is read before
    scanning starts. A file opened from a path is closed on exit.
    """
    if config is None:
        config = ScanConfig()
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        source = as_text(file_stream.read(), config.encoding)
        logger.debug("Read %d characters from %s", len(source), filelike)
        yield iter(MarkupTokenizer(source, config))
    finally:
        if did_open:
            file_stream.close()
