"""
Connectivity Prober - Performs a single HTTPS GET against the NuGet index.
One attempt per run, no retries.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

import certifi
import requests

from nuget_diagnostics.components.base_service import BaseService
from nuget_diagnostics.components.classify.classifier import classify_failure
from nuget_diagnostics.config import config
from nuget_diagnostics.constants import (
    NUGET_INDEX_URL,
    FAILURE_KIND_NONE,
    FAILURE_KIND_OTHER,
    TOOL_PROBE,
)
from nuget_diagnostics.exceptions import ProbeError
from nuget_diagnostics.utils.logger import get_logger

logger = get_logger(__name__, "ConnectivityProber")


@dataclass(frozen=True)
class ConnectivityResult:
    """Outcome of the network attempt"""
    reachable: bool
    status_code: Optional[int]
    failure_kind: str
    message: str
    content_length: Optional[int] = None


class ConnectivityProber(BaseService):
    """Checks whether the NuGet API answers from the current environment."""

    def __init__(self):
        super().__init__(agent_name=TOOL_PROBE)
        logger.debug("Initialized ConnectivityProber", correlation_id="INIT")

    def run(
        self,
        url: str = NUGET_INDEX_URL,
        timeout: Optional[float] = None,
        correlation_id: Optional[str] = None
    ) -> ConnectivityResult:
        """
        Perform one GET request and capture the outcome.

        Args:
            url: Endpoint to probe (default: NuGet v3 index)
            timeout: Seconds before giving up (default: PROBE_TIMEOUT)
            correlation_id: Request correlation ID

        Returns:
            ConnectivityResult; transport failures are captured, never raised

        Raises:
            ProbeError: If url or timeout is invalid
        """
        if not url or not isinstance(url, str):
            raise ProbeError("url must be a non-empty string")

        timeout = config.PROBE_TIMEOUT if timeout is None else timeout
        if timeout <= 0:
            raise ProbeError(f"timeout must be positive, got {timeout}")

        verify = self._resolve_ca_bundle()
        logger.debug(f"GET {url} (timeout={timeout}s, ca_bundle={verify})", correlation_id=correlation_id)

        try:
            response = requests.get(url, timeout=timeout, verify=verify)
        except Exception as e:
            failure_kind = classify_failure(e, correlation_id)
            logger.warning(
                f"Connection failed ({failure_kind}): {e}",
                correlation_id=correlation_id
            )
            return ConnectivityResult(
                reachable=False,
                status_code=None,
                failure_kind=failure_kind,
                message=str(e)
            )

        if not response.ok:
            logger.warning(f"NuGet API returned HTTP {response.status_code}", correlation_id=correlation_id)
            return ConnectivityResult(
                reachable=False,
                status_code=response.status_code,
                failure_kind=FAILURE_KIND_OTHER,
                message=f"HTTP {response.status_code} {response.reason}".strip()
            )

        content_length = len(response.content)
        logger.info(
            f"NuGet API reachable: status={response.status_code}, {content_length} bytes",
            correlation_id=correlation_id
        )
        return ConnectivityResult(
            reachable=True,
            status_code=response.status_code,
            failure_kind=FAILURE_KIND_NONE,
            message=f"HTTP {response.status_code} {response.reason}".strip(),
            content_length=content_length
        )

    def _execute(self, state: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the probe within the workflow.

        Args:
            state: Current workflow state

        Returns:
            Updated state with connectivity result
        """
        correlation_id = state.get("correlation_id")

        try:
            state["connectivity"] = self.run(
                url=state.get("target_url") or NUGET_INDEX_URL,
                timeout=state.get("timeout"),
                correlation_id=correlation_id
            )
        except ProbeError as e:
            logger.error(f"Probe not attempted: {e}", correlation_id=correlation_id)
            state["connectivity"] = ConnectivityResult(
                reachable=False,
                status_code=None,
                failure_kind=FAILURE_KIND_OTHER,
                message=str(e)
            )

        return state

    def _resolve_ca_bundle(self) -> str:
        """
        Pick the CA bundle used to verify the server certificate.

        Returns:
            Configured override if set, else the certifi bundle
        """
        return config.get_ca_bundle() or certifi.where()
