import pathlib
from functools import wraps


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode) as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def render(tokens):
    """
    :returns: The rendering of each token, ie. ["TagOpen - p [1]",
        "Text - Hello [3]", "TagClose - p [10]"] for the tokens of
        "<p>Hello</p>".
    """
    return [str(token) for token in tokens]


@takes_stream(0, "w")
def write(filelike, tokens):
    """
    Writes the rendering of tokens to the given file, one token per line.

    :param filelike: A path or a text stream.
    :param tokens: Iterable of tokens, ie. the result of tagscan.read().
    """
    for line in render(tokens):
        filelike.write(line)
        filelike.write("\n")
