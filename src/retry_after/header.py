"""Plug the codec into a generic header mapping.

The HTTP library owns header storage and name lookup; these helpers only
locate the ``Retry-After`` entry and hand its value to the codec. Field
names compare case-insensitively, per HTTP semantics.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence

from retry_after.codec import decode, encode
from retry_after.domain.value import At, Delay
from retry_after.errors import InsufficientDataError

logger = logging.getLogger(__name__)

HEADER_NAME = "Retry-After"

HeaderValue = bytes | str


def _name_matches(key: str | bytes) -> bool:
    if isinstance(key, bytes):
        key = key.decode("latin-1")
    return key.lower() == HEADER_NAME.lower()


def _as_bytes(value: HeaderValue) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def parse_header(lines: Sequence[bytes]) -> Delay | At:
    """Decode a Retry-After header from its raw lines.

    HTTP parsers collect every occurrence of a field; Retry-After is a
    singleton, so only the first line is used.

    Raises:
        InsufficientDataError: *lines* is empty (or its first line is).
    """
    if not lines:
        raise InsufficientDataError("no Retry-After header lines")
    if len(lines) > 1:
        logger.debug("Ignoring %d extra Retry-After lines", len(lines) - 1)
    return decode(lines[0])


def format_header(value: Delay | At) -> str:
    """Return the header value text for *value*."""
    return encode(value).decode("ascii")


def get_retry_after(headers: Mapping[str | bytes, HeaderValue]) -> Delay | At | None:
    """Look up and decode the Retry-After field in *headers*.

    Returns None when the field is absent. A present but malformed value
    raises the codec's decode error; whether that means "no guidance" or a
    protocol error is the caller's call.
    """
    for key, value in headers.items():
        if _name_matches(key):
            return decode(_as_bytes(value))
    return None


def set_retry_after(headers: MutableMapping[str, bytes], value: Delay | At) -> None:
    """Store *value* under ``Retry-After``, replacing any existing spelling."""
    for key in [k for k in headers if _name_matches(k)]:
        del headers[key]
    headers[HEADER_NAME] = encode(value)
