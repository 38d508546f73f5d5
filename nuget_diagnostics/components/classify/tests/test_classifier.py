import socket
import pytest
import requests
from nuget_diagnostics.components.classify.classifier import classify_failure
from nuget_diagnostics.constants import (
    FAILURE_KIND_NETWORK,
    FAILURE_KIND_CERT_REVOCATION,
    FAILURE_KIND_OTHER,
)


@pytest.mark.parametrize("message", [
    "The SSL connection could not be established, see inner exception.",
    "The remote certificate is invalid according to the validation procedure",
    "[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed",
])
def test_tls_messages_are_revocation(message):
    assert classify_failure(Exception(message)) == FAILURE_KIND_CERT_REVOCATION


def test_marker_match_is_case_sensitive():
    """Lowercase 'ssl' and capitalised 'Certificate' do not match."""
    assert classify_failure(Exception("ssl handshake stalled")) == FAILURE_KIND_OTHER
    assert classify_failure(Exception("Certificate store busy")) == FAILURE_KIND_OTHER


def test_marker_in_chained_cause_is_detected():
    """Mirrors an outer error wrapping the TLS failure."""
    try:
        try:
            raise OSError("The remote certificate was rejected")
        except OSError as inner:
            raise RuntimeError("One or more errors occurred.") from inner
    except RuntimeError as outer:
        assert classify_failure(outer) == FAILURE_KIND_CERT_REVOCATION


@pytest.mark.parametrize("error", [
    requests.exceptions.ConnectionError("Name or service not known"),
    requests.exceptions.ReadTimeout("Read timed out"),
    ConnectionRefusedError("Connection refused"),
    TimeoutError("timed out"),
    socket.gaierror(-2, "Name or service not known"),
])
def test_connection_errors_are_network(error):
    assert classify_failure(error) == FAILURE_KIND_NETWORK


def test_unrelated_errors_are_other():
    assert classify_failure(ValueError("unexpected payload")) == FAILURE_KIND_OTHER


def test_tls_marker_wins_over_network_type():
    """An SSLError is a ConnectionError subclass but classifies by message first."""
    error = requests.exceptions.SSLError("SSL: unable to get local issuer")
    assert classify_failure(error) == FAILURE_KIND_CERT_REVOCATION
