"""
Cache-Control header parsing.

The header value is split into comma-separated tokens (commas inside quoted
strings do not count), each token is split into a directive name and an
optional value, and known directives are folded into a CacheControl.
Unknown directives and unparsable values are skipped.
"""
import logging
import re
from datetime import timedelta
from typing import Any, Dict, Iterator, Optional, Tuple

from .exceptions import CacheControlHeaderError
from .types import (
    UNBOUNDED,
    Cachability,
    CacheControl,
    CacheControlParserConfig,
    Directive,
)

logger = logging.getLogger(__name__)

_DELTA_SECONDS_PATTERN = re.compile(r"[0-9]+")

# Largest whole number of seconds a timedelta can hold.
_TIMEDELTA_MAX_SECONDS = timedelta.max.days * 86400 + timedelta.max.seconds

# max-stale only lands here when it carries a value
_DURATION_FIELDS = {
    Directive.MAX_AGE: "max_age",
    Directive.S_MAXAGE: "s_max_age",
    Directive.MAX_STALE: "max_stale",
    Directive.MIN_FRESH: "min_fresh",
}


DEFAULT_CACHE_CONTROL_PARSER_CONFIG = CacheControlParserConfig(
    header_name="Cache-Control",
    max_delta_seconds=_TIMEDELTA_MAX_SECONDS,
)


def merge_cache_control_parser_config(
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControlParserConfig:
    """Merge user config with defaults."""
    if config is None:
        return CacheControlParserConfig(
            header_name=DEFAULT_CACHE_CONTROL_PARSER_CONFIG.header_name,
            max_delta_seconds=DEFAULT_CACHE_CONTROL_PARSER_CONFIG.max_delta_seconds,
        )

    return CacheControlParserConfig(
        header_name=config.header_name or DEFAULT_CACHE_CONTROL_PARSER_CONFIG.header_name,
        max_delta_seconds=config.max_delta_seconds
        if config.max_delta_seconds is not None
        else DEFAULT_CACHE_CONTROL_PARSER_CONFIG.max_delta_seconds,
    )


def iter_directive_tokens(value: str) -> Iterator[str]:
    """
    Split a Cache-Control value into trimmed directive tokens.

    Commas inside a quoted string are part of the token. A backslash inside
    quotes escapes the next character. An unterminated quote runs to the end
    of the value. Empty tokens are dropped.
    """
    start = 0
    in_quotes = False
    escaped = False

    for index, char in enumerate(value):
        if escaped:
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            token = value[start:index].strip()
            if token:
                yield token
            start = index + 1

    token = value[start:].strip()
    if token:
        yield token


def interpret_directive(token: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Split a token into a lower-cased directive name and its value.

    Only the first '=' separates name from value. One layer of surrounding
    double quotes is removed from the value. Returns None for a token with
    an empty name.
    """
    if "=" in token:
        name, value = token.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
    else:
        name, value = token, None

    name = name.strip().lower()
    if not name:
        return None
    return name, value


def parse_delta_seconds(
    value: Optional[str],
    max_delta_seconds: Optional[int] = None,
) -> Optional[timedelta]:
    """Parse a non-negative integer count of seconds, or return None."""
    if value is None or not _DELTA_SECONDS_PATTERN.fullmatch(value):
        return None

    limit = _TIMEDELTA_MAX_SECONDS
    if max_delta_seconds is not None:
        limit = min(limit, max_delta_seconds)

    # Compare digit counts first so oversized values never reach int()
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(abs(limit))):
        return None

    seconds = int(digits)
    if seconds > limit:
        return None
    return timedelta(seconds=seconds)


def strip_header_name(text: str, header_name: str = "Cache-Control") -> Optional[str]:
    """
    Remove one leading '<header_name>:' prefix and the whitespace after it.

    The field name is matched case-insensitively. Returns None when the text
    does not start with that field name and a colon.
    """
    name, sep, rest = text.partition(":")
    if not sep or name.strip().lower() != header_name.lower():
        return None
    return rest.lstrip()


def parse_cache_control_value(
    value: Optional[str],
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControl:
    """Parse a bare Cache-Control value (everything after 'Cache-Control:')."""
    if not value:
        return CacheControl()

    cfg = merge_cache_control_parser_config(config)
    fields: Dict[str, Any] = {}

    for token in iter_directive_tokens(value):
        pair = interpret_directive(token)
        if pair is None:
            continue
        name, raw = pair

        directive = Directive.lookup(name)
        if directive is None:
            logger.debug(f"parse_cache_control_value: ignoring unknown directive {name!r}")
            continue

        if directive == Directive.PUBLIC:
            fields["cachability"] = Cachability.PUBLIC
        elif directive == Directive.PRIVATE:
            fields["cachability"] = Cachability.PRIVATE
        elif directive == Directive.NO_CACHE:
            fields["cachability"] = Cachability.NO_CACHE
        elif directive == Directive.NO_STORE:
            fields["no_store"] = True
        elif directive == Directive.NO_TRANSFORM:
            fields["no_transform"] = True
        elif directive == Directive.MUST_REVALIDATE:
            fields["must_revalidate"] = True
        elif directive == Directive.PROXY_REVALIDATE:
            fields["proxy_revalidate"] = True
        elif directive == Directive.ONLY_IF_CACHED:
            fields["only_if_cached"] = True
        elif directive == Directive.IMMUTABLE:
            fields["immutable"] = True
        elif directive == Directive.MAX_STALE and raw is None:
            fields["max_stale"] = UNBOUNDED
        else:
            field_name = _DURATION_FIELDS[directive]
            duration = parse_delta_seconds(raw, cfg.max_delta_seconds)
            if duration is None:
                logger.debug(
                    f"parse_cache_control_value: invalid seconds for {name!r}: {raw!r}"
                )
                fields.pop(field_name, None)
            else:
                fields[field_name] = duration

    return CacheControl(**fields)


def parse_cache_control(
    text: Optional[str],
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControl:
    """
    Parse a Cache-Control header line or bare value.

    Accepts both "Cache-Control: public, max-age=60" and "public, max-age=60".
    Never fails on malformed content; the worst case is an empty result.

    Example:
        cc = parse_cache_control("Cache-Control: public, max-age=60")
        cc.cachability  # Cachability.PUBLIC
        cc.max_age      # timedelta(seconds=60)
    """
    if text is None:
        return CacheControl()
    if not isinstance(text, str):
        raise TypeError(f"Cache-Control header must be str, got {type(text).__name__}")

    cfg = merge_cache_control_parser_config(config)
    value = strip_header_name(text, cfg.header_name)
    if value is None:
        value = text
    else:
        logger.debug(f"parse_cache_control: stripped {cfg.header_name!r} field name")

    return parse_cache_control_value(value, cfg)


def parse_cache_control_header(
    line: str,
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControl:
    """
    Parse a full 'Cache-Control: ...' header line.

    Raises:
        CacheControlHeaderError: The line has no ':' or names another field.
    """
    cfg = merge_cache_control_parser_config(config)
    value = strip_header_name(line, cfg.header_name)
    if value is None:
        logger.warning(
            f"parse_cache_control_header: expected a {cfg.header_name!r} field, got {line!r}"
        )
        raise CacheControlHeaderError(
            f"Not a {cfg.header_name} header line: {line!r}",
            header_line=line,
            expected=cfg.header_name,
        )
    return parse_cache_control_value(value, cfg)
