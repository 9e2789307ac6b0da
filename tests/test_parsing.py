"""Unit tests for url building and response scanning."""

from __future__ import annotations

import pytest

from src.webtranslate.errors import EmptyResponse, ParseError, RateLimited, RequestFailed
from src.webtranslate.parsing import build_url, check_body, encode_query, parse_translation


def test_encode_query_basic():
    """Test spaces and punctuation are percent-encoded."""
    assert encode_query("Hello world!") == "Hello%20world%21"


def test_encode_query_keeps_unreserved():
    """Test the unreserved set passes through untouched."""
    assert encode_query("AZaz09-_.~") == "AZaz09-_.~"


def test_encode_query_utf8_bytes():
    """Test non-ASCII text is encoded byte by byte with upper-case hex."""
    assert encode_query("é") == "%C3%A9"
    assert encode_query("a/b+c") == "a%2Fb%2Bc"


def test_build_url_layout():
    url = build_url("Hi there", "auto", "vi")
    assert url == (
        "https://translate.googleapis.com/translate_a/single"
        "?client=gtx&sl=auto&tl=vi&dt=t&q=Hi%20there"
    )


def test_build_url_custom_endpoint():
    url = build_url("x", "en", "fr", endpoint="https://example.test/t", client="other")
    assert url.startswith("https://example.test/t?client=other&sl=en&tl=fr")


def test_parse_translation_valid():
    body = '[[["Xin chào","Hello",null,null,3,null,null,[[]]]],null,"en"]'
    assert parse_translation(body) == "Xin chào"


def test_parse_translation_first_segment_only():
    body = '[[["Bonjour. ","Hello. ",null],["Au revoir.","Bye.",null]],null,"en"]'
    assert parse_translation(body) == "Bonjour. "


def test_parse_translation_invalid():
    with pytest.raises(ParseError) as excinfo:
        parse_translation("INVALID")
    assert str(excinfo.value) == "Parse error: Unexpected response format: INVALID"


def test_parse_translation_error_truncates_body():
    body = "x" * 500
    with pytest.raises(ParseError) as excinfo:
        parse_translation(body)
    assert excinfo.value.detail == "Unexpected response format: " + "x" * 120


def test_parse_translation_unterminated_segment():
    with pytest.raises(ParseError):
        parse_translation('[[["never closed')


def test_parse_translation_blank_segment():
    with pytest.raises(EmptyResponse):
        parse_translation('[[["   ","Hello",null]]]')


@pytest.mark.parametrize("body", ["", "   \n"])
def test_check_body_empty(body):
    with pytest.raises(EmptyResponse):
        check_body(body)


@pytest.mark.parametrize(
    "body",
    ["[]", "<html><body>blocked</body></html>", "Error 503 Service Unavailable"],
)
def test_check_body_blocked(body):
    with pytest.raises(RateLimited):
        check_body(body)


def test_check_body_accepts_translation():
    check_body('[[["Hola","Hello",null]],null,"en"]')


def test_encode_query_lone_surrogate():
    """Test text holding an unpaired surrogate is reported as a translate error."""
    with pytest.raises(RequestFailed) as excinfo:
        encode_query("bad\udcff")
    assert "cannot encode text as UTF-8" in str(excinfo.value)
