from hypothesis import example, given

import tagscan
from _tagscan.tokenizer import MarkupTokenizer
from _tagscan.tokenizer.token_kind import TokenKind

from .generators.markup_contents import documents, markup_characters, scan_configs


@given(markup_characters, scan_configs)
@example("<div", tagscan.ScanConfig())
@example("<!-- a --><!-- b", tagscan.ScanConfig())
def test_at_most_one_error_at_end_of_source(source, config):
    tokens = list(MarkupTokenizer(source, config))
    errors = [t for t in tokens if t.kind == TokenKind.ERROR]

    assert len(errors) <= 1
    if errors:
        assert tokens[-1] is errors[0]
        assert errors[0].end == len(source)


@given(markup_characters, scan_configs)
def test_token_offsets_are_ordered(source, config):
    starts = [t.start for t in MarkupTokenizer(source, config)]

    assert starts == sorted(starts)
    assert all(0 <= s <= len(source) for s in starts)


@given(markup_characters, scan_configs)
def test_attributes_have_keys(source, config):
    for token in MarkupTokenizer(source, config):
        if token.kind == TokenKind.ATTRIBUTE:
            assert token.key
        else:
            assert token.key == ""
        assert (token.end is None) == (token.kind != TokenKind.ERROR)


@given(markup_characters)
def test_payload_is_found_at_offset(source):
    for token in MarkupTokenizer(source):
        if token.kind == TokenKind.ATTRIBUTE:
            assert source.startswith(token.key, token.start)
        elif token.kind != TokenKind.ERROR and token.value:
            assert source.startswith(token.value, token.start)


@given(documents())
def test_well_formed_documents(document):
    markup, expected = document

    tokens = tagscan.tokenize(markup)

    assert [(t.kind, t.key, t.value) for t in tokens] == expected


@given(documents())
def test_rendered_values_rescan_the_same(document):
    markup, _ = document
    tokens = tagscan.tokenize(markup)

    rendered = "".join(
        f"<{t.value}>"
        if t.kind == TokenKind.TAG_OPEN
        else f"</{t.value}>"
        if t.kind == TokenKind.TAG_CLOSE
        else t.value
        for t in tokens
        if t.kind != TokenKind.ATTRIBUTE
    )
    rescanned = tagscan.tokenize(rendered)

    assert [(t.kind, t.value) for t in rescanned] == [
        (t.kind, t.value) for t in tokens if t.kind != TokenKind.ATTRIBUTE
    ]


def payload_length(token):
    if token.kind == TokenKind.ATTRIBUTE:
        return len(token.key)
    return len(token.value)


@given(markup_characters, scan_configs)
@example("<a x=y>b<!-- c -->d</a>", tagscan.ScanConfig())
def test_token_spans_do_not_overlap(source, config):
    tokens = [
        t for t in MarkupTokenizer(source, config) if t.kind != TokenKind.ERROR
    ]

    for token, following in zip(tokens, tokens[1:]):
        assert token.start + payload_length(token) <= following.start
