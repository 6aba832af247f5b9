from utils.html_tokens import html_tokens
from utils.tokens import TokenKind


def kinds(html):
    return [token.kind for token in html_tokens(html)]


def test_stream_ends_with_end_of_stream():
    tokens = list(html_tokens("<p>hi</p>"))
    assert [t.kind for t in tokens] == [
        TokenKind.START_TAG,
        TokenKind.CHARACTERS,
        TokenKind.END_TAG,
        TokenKind.END_OF_STREAM,
    ]
    assert tokens[0].name == "p"
    assert tokens[1].data == "hi"
    assert tokens[2].name == "p"


def test_empty_input_is_just_end_of_stream():
    assert kinds("") == [TokenKind.END_OF_STREAM]


def test_adjacent_character_tokens_are_joined():
    tokens = list(html_tokens("<b>Hello &amp; don&#39;t</b>"))
    chars = [t for t in tokens if t.kind is TokenKind.CHARACTERS]
    assert len(chars) == 1
    assert chars[0].data == "Hello & don't"


def test_null_character_gets_its_own_token():
    tokens = list(html_tokens("a\u0000b"))
    assert TokenKind.NULL_CHARACTER in [t.kind for t in tokens]
    chars = [t.data for t in tokens if t.kind is TokenKind.CHARACTERS]
    assert chars == ["a", "b"]


def test_start_tag_carries_attrs_and_self_closing():
    start = next(iter(html_tokens('<img src="x.png" alt="pic"/>')))
    assert start.kind is TokenKind.START_TAG
    assert start.name == "img"
    assert start.attrs == {"src": "x.png", "alt": "pic"}
    assert start.self_closing


def test_tag_names_are_lowercased():
    names = [t.name for t in html_tokens("<DIV></Div>") if t.kind in (TokenKind.START_TAG, TokenKind.END_TAG)]
    assert names == ["div", "div"]


def test_comments_and_doctype_are_other():
    tokens = list(html_tokens("<!DOCTYPE html><!-- secret words -->"))
    others = [t for t in tokens if t.kind is TokenKind.OTHER]
    assert [t.label for t in others] == ["Doctype", "Comment"]


def test_parse_errors_are_passed_through():
    tokens = list(html_tokens("a</>b"))
    assert TokenKind.PARSE_ERROR in [t.kind for t in tokens]


def test_parse_errors_carry_html5lib_message():
    error = next(t for t in html_tokens("a</>b") if t.kind is TokenKind.PARSE_ERROR)
    assert error.code == "expected-closing-tag-but-got-right-bracket"
    assert error.message != error.code
    assert str(error).startswith("expected-closing-tag-but-got-right-bracket - ")
