"""Tests for directive tokenizing and interpretation."""
from datetime import timedelta

from cache_control import (
    interpret_directive,
    iter_directive_tokens,
    parse_delta_seconds,
    strip_header_name,
)


class TestIterDirectiveTokens:
    def test_empty_value(self):
        assert list(iter_directive_tokens("")) == []

    def test_splits_and_trims(self):
        assert list(iter_directive_tokens(" public ,max-age=60 ")) == [
            "public",
            "max-age=60",
        ]

    def test_drops_empty_tokens(self):
        assert list(iter_directive_tokens(",,public,, ,no-store,")) == [
            "public",
            "no-store",
        ]

    def test_comma_inside_quotes_is_not_a_separator(self):
        tokens = list(iter_directive_tokens('private="set-cookie, x-foo", max-age=5'))
        assert tokens == ['private="set-cookie, x-foo"', "max-age=5"]

    def test_escaped_quote_does_not_close_string(self):
        tokens = list(iter_directive_tokens(r'ext="a\", b", public'))
        assert tokens == [r'ext="a\", b"', "public"]

    def test_unterminated_quote_runs_to_end(self):
        tokens = list(iter_directive_tokens('public, ext="a, b, max-age=5'))
        assert tokens == ["public", 'ext="a, b, max-age=5']

    def test_is_lazy(self):
        tokens = iter_directive_tokens("public, private")
        assert next(tokens) == "public"
        assert next(tokens) == "private"


class TestInterpretDirective:
    def test_name_only(self):
        assert interpret_directive("No-Store") == ("no-store", None)

    def test_name_and_value(self):
        assert interpret_directive("Max-Age=60") == ("max-age", "60")

    def test_splits_on_first_equals_only(self):
        assert interpret_directive('ext="a=b"') == ("ext", "a=b")

    def test_strips_one_layer_of_quotes(self):
        assert interpret_directive('max-stale=""30""') == ("max-stale", '"30"')

    def test_lone_quote_is_kept(self):
        assert interpret_directive('max-age="') == ("max-age", '"')

    def test_whitespace_around_equals(self):
        assert interpret_directive("max-age = 60") == ("max-age", "60")

    def test_empty_value(self):
        assert interpret_directive("max-age=") == ("max-age", "")

    def test_empty_name(self):
        assert interpret_directive("=60") is None


class TestParseDeltaSeconds:
    def test_valid(self):
        assert parse_delta_seconds("0") == timedelta(0)
        assert parse_delta_seconds("3600") == timedelta(hours=1)

    def test_invalid(self):
        for value in (None, "", "-1", "+1", "1.5", "abc", "1e3", " 1", "٣"):
            assert parse_delta_seconds(value) is None

    def test_limit(self):
        assert parse_delta_seconds("10", max_delta_seconds=10) == timedelta(seconds=10)
        assert parse_delta_seconds("11", max_delta_seconds=10) is None

    def test_overflow(self):
        assert parse_delta_seconds("18446744073709551616") is None
        assert parse_delta_seconds("9" * 40) is None
        assert parse_delta_seconds("9" * 5000) is None

    def test_leading_zeros(self):
        assert parse_delta_seconds("0" * 5000 + "5") == timedelta(seconds=5)
        assert parse_delta_seconds("00") == timedelta(0)


class TestStripHeaderName:
    def test_strips_prefix(self):
        assert strip_header_name("Cache-Control: public") == "public"

    def test_case_insensitive(self):
        assert strip_header_name("cache-control:public") == "public"
        assert strip_header_name("CACHE-CONTROL :  max-age=1") == "max-age=1"

    def test_strips_only_one_prefix(self):
        assert (
            strip_header_name("Cache-Control: Cache-Control: public")
            == "Cache-Control: public"
        )

    def test_no_prefix(self):
        assert strip_header_name("public, max-age=60") is None
        assert strip_header_name("Pragma: no-cache") is None
        assert strip_header_name("") is None

    def test_custom_header_name(self):
        assert strip_header_name("CDN-Cache-Control: max-age=5", "CDN-Cache-Control") == "max-age=5"
