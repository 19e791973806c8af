"""
Types for the HTTP Cache-Control directive model.
"""
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional, Union


class Cachability(str, Enum):
    """How the data may be cached."""

    PUBLIC = "public"
    """Any cache may store the data."""

    PRIVATE = "private"
    """Shared caches must not store the data."""

    NO_CACHE = "no-cache"
    """A stored copy must be revalidated before use."""


class Staleness(str, Enum):
    """Marker for a max-stale directive sent without a limit."""

    UNBOUNDED = "unbounded"


UNBOUNDED = Staleness.UNBOUNDED
"""Any amount of staleness is acceptable."""


class Directive(str, Enum):
    """Directive names understood by the parser."""

    PUBLIC = "public"
    PRIVATE = "private"
    NO_CACHE = "no-cache"
    NO_STORE = "no-store"
    NO_TRANSFORM = "no-transform"
    MUST_REVALIDATE = "must-revalidate"
    PROXY_REVALIDATE = "proxy-revalidate"
    MAX_AGE = "max-age"
    S_MAXAGE = "s-maxage"
    MAX_STALE = "max-stale"
    MIN_FRESH = "min-fresh"
    ONLY_IF_CACHED = "only-if-cached"
    IMMUTABLE = "immutable"

    @classmethod
    def lookup(cls, name: str) -> Optional["Directive"]:
        """Return the directive for a lower-cased name, or None if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class CacheControl:
    """Parsed Cache-Control header.

    Every field reflects the last occurrence of its directive. A field that
    is None (or False for presence flags) was not in the header.
    """

    cachability: Optional[Cachability] = None
    """Set by public, private or no-cache."""

    no_store: bool = False
    """The response may not be stored in any cache."""

    no_transform: bool = False
    """Intermediaries must not transform the payload."""

    must_revalidate: bool = False
    """A stale copy must not be used without successful validation."""

    proxy_revalidate: bool = False
    """Like must_revalidate, but only for shared caches."""

    max_age: Optional[timedelta] = None
    """How long the response stays fresh, relative to the request."""

    s_max_age: Optional[timedelta] = None
    """Overrides max_age for shared caches."""

    max_stale: Optional[Union[timedelta, Staleness]] = None
    """How stale a response the client accepts. UNBOUNDED when no limit was given."""

    min_fresh: Optional[timedelta] = None
    """How long the response must still be fresh for the client."""

    only_if_cached: bool = False
    """The client only wants a stored response."""

    immutable: bool = False
    """The response body will not change over time."""


@dataclass
class CacheControlParserConfig:
    """Configuration for Cache-Control parsing."""

    header_name: Optional[str] = None
    """Field name accepted as a line prefix. Default: 'Cache-Control'."""

    max_delta_seconds: Optional[int] = None
    """Largest accepted delta-seconds value. Default: what timedelta can hold."""
