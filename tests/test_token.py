import pytest

from _tagscan.tokenizer.common import trimmed
from _tagscan.tokenizer.scan_state import ScanState
from _tagscan.tokenizer.token import Token
from _tagscan.tokenizer.token_kind import TokenKind


@pytest.mark.parametrize(
    "token, rendered",
    [
        (Token(TokenKind.TAG_OPEN, 1, "div"), "TagOpen - div [1]"),
        (Token(TokenKind.TAG_CLOSE, 12, "div"), "TagClose - div [12]"),
        (Token(TokenKind.TEXT, 5, "Hello"), "Text - Hello [5]"),
        (Token(TokenKind.COMMENT, 4, "note"), "Comment - note [4]"),
        (Token(TokenKind.ATTRIBUTE, 5, "main", key="id"), "Attribute - id=main [5]"),
        (Token(TokenKind.ATTRIBUTE, 5, "", key="disabled"), "Attribute - disabled= [5]"),
        (
            Token(TokenKind.ERROR, 1, "SyntaxError — StartToken: div", end=4),
            "Error - SyntaxError — StartToken: div [1 - 4]",
        ),
    ],
)
def test_render_token(token, rendered):
    assert str(token) == rendered


def test_every_kind_has_display_name():
    assert set(TokenKind.display_names()) == set(TokenKind)


@pytest.mark.parametrize(
    "source, start, end, expected",
    [
        ("<p> Hi </p>", 3, 7, (4, "Hi")),
        ("abc", 0, 3, (0, "abc")),
        ("a   b", 1, 4, (1, "")),
        ("x\n\ty z", 1, 6, (3, "y z")),
    ],
)
def test_trimmed(source, start, end, expected):
    assert trimmed(source, start, end) == expected


def test_scan_state_starts_at_beginning():
    state = ScanState("<p>")
    assert state.position == 0
    assert state.mark == 0
    assert not state.raw_text_mode
    assert not state.at_end()


def test_scan_state_span():
    state = ScanState("<span>")
    state.advance()
    state.set_mark()
    state.advance(4)
    assert state.span() == "span"
    assert state.current() == ">"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("</script>", True),
        ("</script >", True),
        ("</script", True),
        ("</scripts>", False),
        ("</style>", False),
        ("<script>", False),
    ],
)
def test_scan_state_at_raw_text_end(source, expected):
    state = ScanState(source)
    state.set_raw_text_tag("script")
    assert state.at_raw_text_end() == expected


def test_scan_state_not_at_raw_text_end_outside_raw_text():
    assert not ScanState("</script>").at_raw_text_end()


def test_unterminated_error_to_token():
    state = ScanState("<div")
    state.advance()
    state.set_mark()
    state.advance(3)
    error = state.unterminated("StartToken")
    assert error.to_token() == Token(
        TokenKind.ERROR, 1, "SyntaxError — StartToken: div", end=4
    )
