"""Tests for percent-encoding helpers."""

import pytest

from github_issue_url.utils.encoding import encode_query, quote_form, quote_path_segment


class TestQuoteForm:
    """Test query value encoding."""

    def test_space_becomes_plus(self) -> None:
        assert quote_form("a b  c") == "a+b++c"

    def test_unreserved_kept(self) -> None:
        assert quote_form("AZaz09-._*") == "AZaz09-._*"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (",", "%2C"),
            (":", "%3A"),
            ("'", "%27"),
            ("~", "%7E"),
            ("+", "%2B"),
            ("/", "%2F"),
            ("\n", "%0A"),
            ("é", "%C3%A9"),
        ],
    )
    def test_escaped_characters(self, value: str, expected: str) -> None:
        assert quote_form(value) == expected

    def test_lone_surrogate_raises(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            quote_form("\ud800")


class TestEncodeQuery:
    """Test query string serialization."""

    def test_keeps_order(self) -> None:
        pairs = [("title", "Hello world"), ("labels", "bug,docs")]
        assert encode_query(pairs) == "title=Hello+world&labels=bug%2Cdocs"

    def test_empty(self) -> None:
        assert encode_query([]) == ""

    def test_empty_value(self) -> None:
        assert encode_query([("title", "")]) == "title="


class TestQuotePathSegment:
    """Test path segment encoding."""

    def test_plain_name(self) -> None:
        assert quote_path_segment("github-issue-url") == "github-issue-url"

    def test_slash_and_space(self) -> None:
        assert quote_path_segment("a/b c") == "a%2Fb%20c"
