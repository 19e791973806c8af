"""
Errors raised by the Cache-Control parser.

Directive-level problems never raise; only a header line that cannot be
split into the expected field name and value does.
"""
from typing import Optional


class CacheControlError(Exception):
    """Base error for Cache-Control parsing."""

    code = "CACHE_CONTROL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.name = type(self).__name__


class CacheControlHeaderError(CacheControlError):
    """Error thrown when a header line is not a Cache-Control field."""

    code = "CACHE_CONTROL_HEADER_INVALID"

    def __init__(
        self,
        message: str,
        header_line: Optional[str] = None,
        expected: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.header_line = header_line
        self.expected = expected
