"""
Cache-Control parsing for header collections and httpx messages.

A message may carry several Cache-Control field lines; they are combined
with ', ' before parsing.
"""
from typing import List, Mapping, Optional, Union

import httpx

from .parser import merge_cache_control_parser_config, parse_cache_control_value
from .types import CacheControl, CacheControlParserConfig

HeadersLike = Union[httpx.Headers, Mapping[str, str]]


def get_header_value(headers: Mapping[str, str], key: str) -> Optional[str]:
    """Get header value case-insensitively."""
    lower_key = key.lower()
    for k, v in headers.items():
        if k.lower() == lower_key:
            return v
    return None


def get_header_values(headers: HeadersLike, key: str) -> List[str]:
    """Get every value of a header field, in order."""
    if isinstance(headers, httpx.Headers):
        return headers.get_list(key)
    lower_key = key.lower()
    return [v for k, v in headers.items() if k.lower() == lower_key]


def parse_cache_control_headers(
    headers: HeadersLike,
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControl:
    """Parse the Cache-Control field(s) of a header collection."""
    cfg = merge_cache_control_parser_config(config)
    values = get_header_values(headers, cfg.header_name)
    return parse_cache_control_value(", ".join(values), cfg)


def parse_message_cache_control(
    message: Union[httpx.Request, httpx.Response],
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControl:
    """Parse the Cache-Control field(s) of an httpx request or response."""
    return parse_cache_control_headers(message.headers, config)
