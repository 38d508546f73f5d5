"""
Failure Classifier - Maps a failed HTTP attempt to a failure kind.

The transport gives no structured reason for a TLS validation failure, so the
message text is inspected for "SSL" or "certificate" (case-sensitive). This is
a heuristic: message wording depends on platform, library and locale.
"""

import socket
from typing import Iterator, Optional

import requests

from nuget_diagnostics.constants import (
    FAILURE_KIND_CERT_REVOCATION,
    FAILURE_KIND_NETWORK,
    FAILURE_KIND_OTHER,
    TLS_FAILURE_MARKERS,
)
from nuget_diagnostics.utils.logger import get_logger

logger = get_logger(__name__, "FailureClassifier")

NETWORK_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    ConnectionError,
    TimeoutError,
    socket.gaierror,
)


def classify_failure(error: BaseException, correlation_id: Optional[str] = None) -> str:
    """
    Classify an exception raised by the connectivity probe.

    Args:
        error: Exception raised by the HTTP attempt
        correlation_id: Request correlation ID

    Returns:
        FAILURE_KIND_CERT_REVOCATION if any message in the exception chain
        mentions SSL or certificate, FAILURE_KIND_NETWORK for connection,
        DNS and timeout errors, FAILURE_KIND_OTHER otherwise
    """
    for message in _iter_messages(error):
        if any(marker in message for marker in TLS_FAILURE_MARKERS):
            logger.debug(f"TLS marker found in: {message}", correlation_id=correlation_id)
            return FAILURE_KIND_CERT_REVOCATION

    if isinstance(error, NETWORK_ERRORS):
        return FAILURE_KIND_NETWORK

    return FAILURE_KIND_OTHER


def _iter_messages(error: BaseException) -> Iterator[str]:
    """Yield the message of the error and of every chained cause."""
    seen = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield str(current)
        current = current.__cause__ or current.__context__
