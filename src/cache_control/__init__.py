"""
HTTP Cache-Control header parsing.

Turns a Cache-Control header value into a typed CacheControl record.
Unknown directives and malformed values are skipped, never raised.
"""
from .types import (
    Cachability,
    Staleness,
    UNBOUNDED,
    Directive,
    CacheControl,
    CacheControlParserConfig,
)
from .exceptions import (
    CacheControlError,
    CacheControlHeaderError,
)
from .parser import (
    iter_directive_tokens,
    interpret_directive,
    parse_delta_seconds,
    strip_header_name,
    parse_cache_control_value,
    parse_cache_control,
    parse_cache_control_header,
    DEFAULT_CACHE_CONTROL_PARSER_CONFIG,
    merge_cache_control_parser_config,
)
from .headers import (
    get_header_value,
    get_header_values,
    parse_cache_control_headers,
    parse_message_cache_control,
)

parse = parse_cache_control


__all__ = [
    # Types
    "Cachability",
    "Staleness",
    "UNBOUNDED",
    "Directive",
    "CacheControl",
    "CacheControlParserConfig",
    # Errors
    "CacheControlError",
    "CacheControlHeaderError",
    # Parser
    "parse",
    "iter_directive_tokens",
    "interpret_directive",
    "parse_delta_seconds",
    "strip_header_name",
    "parse_cache_control_value",
    "parse_cache_control",
    "parse_cache_control_header",
    "DEFAULT_CACHE_CONTROL_PARSER_CONFIG",
    "merge_cache_control_parser_config",
    # Header collections
    "get_header_value",
    "get_header_values",
    "parse_cache_control_headers",
    "parse_message_cache_control",
]

__version__ = "1.0.0"
