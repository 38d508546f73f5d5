import pytest
import requests
from unittest.mock import patch, MagicMock
from nuget_diagnostics.components.probe.prober import ConnectivityProber, ConnectivityResult
from nuget_diagnostics.constants import (
    NUGET_INDEX_URL,
    FAILURE_KIND_NONE,
    FAILURE_KIND_NETWORK,
    FAILURE_KIND_CERT_REVOCATION,
    FAILURE_KIND_OTHER,
)
from nuget_diagnostics.exceptions import ProbeError


@pytest.fixture
def prober():
    return ConnectivityProber()


def _response(status_code=200, reason="OK", content=b'{"version": "3.0.0"}'):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.ok = status_code < 400
    response.content = content
    return response


@patch("nuget_diagnostics.components.probe.prober.requests.get")
def test_run_success_marks_reachable(mock_get, prober):
    """Status 200 means reachable with no failure."""
    mock_get.return_value = _response()
    result = prober.run()
    assert result.reachable is True
    assert result.failure_kind == FAILURE_KIND_NONE
    assert result.status_code == 200
    assert result.content_length == len(b'{"version": "3.0.0"}')


@patch("nuget_diagnostics.components.probe.prober.requests.get")
def test_run_makes_single_request_with_timeout(mock_get, prober):
    """One GET to the NuGet index with the given timeout, no retries."""
    mock_get.return_value = _response()
    prober.run(timeout=3)
    assert mock_get.call_count == 1
    args, kwargs = mock_get.call_args
    assert args[0] == NUGET_INDEX_URL
    assert kwargs["timeout"] == 3


@patch("nuget_diagnostics.components.probe.prober.requests.get")
def test_run_certificate_error_is_revocation(mock_get, prober):
    """TLS failures are captured as CertificateRevocation."""
    mock_get.side_effect = requests.exceptions.SSLError(
        "[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed"
    )
    result = prober.run()
    assert result.reachable is False
    assert result.status_code is None
    assert result.failure_kind == FAILURE_KIND_CERT_REVOCATION
    assert "certificate verify failed" in result.message


@patch("nuget_diagnostics.components.probe.prober.requests.get")
def test_run_timeout_is_network_failure(mock_get, prober):
    """Timeouts are classified as network failures, never raised."""
    mock_get.side_effect = requests.exceptions.ConnectTimeout("Connection to api.nuget.org timed out")
    result = prober.run(timeout=1)
    assert result.reachable is False
    assert result.failure_kind == FAILURE_KIND_NETWORK


@patch("nuget_diagnostics.components.probe.prober.requests.get")
def test_run_unexpected_error_is_captured(mock_get, prober):
    """Any other exception becomes an Other result."""
    mock_get.side_effect = ValueError("boom")
    result = prober.run()
    assert result.reachable is False
    assert result.failure_kind == FAILURE_KIND_OTHER
    assert result.message == "boom"


@patch("nuget_diagnostics.components.probe.prober.requests.get")
def test_run_error_status_is_not_reachable(mock_get, prober):
    """Non-success status keeps the code but is not reachable."""
    mock_get.return_value = _response(status_code=503, reason="Service Unavailable")
    result = prober.run()
    assert result.reachable is False
    assert result.status_code == 503
    assert result.failure_kind == FAILURE_KIND_OTHER
    assert result.message == "HTTP 503 Service Unavailable"


def test_run_invalid_inputs_raise_error(prober):
    """Invalid inputs raise ProbeError before any request."""
    with pytest.raises(ProbeError):
        prober.run(url="")
    with pytest.raises(ProbeError):
        prober.run(timeout=0)


@patch.object(ConnectivityProber, "run", side_effect=ProbeError("timeout must be positive, got -1"))
def test_execute_converts_probe_error_to_result(mock_run, prober):
    """Workflow hook always stores a ConnectivityResult."""
    state = {"timeout": -1, "correlation_id": "c1"}
    result = prober._execute(state)
    assert "error" not in result
    assert isinstance(result["connectivity"], ConnectivityResult)
    assert result["connectivity"].failure_kind == FAILURE_KIND_OTHER


def test_result_is_immutable():
    result = ConnectivityResult(reachable=True, status_code=200, failure_kind=FAILURE_KIND_NONE, message="ok")
    with pytest.raises(AttributeError):
        result.reachable = False
