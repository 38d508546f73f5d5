"""
Environment Reader - Snapshots the variables that control .NET revocation checks
"""

import os
from dataclasses import dataclass
from typing import Optional, Mapping, Dict, Any

from nuget_diagnostics.components.base_service import BaseService
from nuget_diagnostics.constants import (
    SOCKET_HANDLER_ENV,
    CERT_REVOCATION_ENV,
    SOCKET_HANDLER_FIX_VALUE,
    CERT_REVOCATION_FIX_VALUE,
    TOOL_ENVIRONMENT,
)
from nuget_diagnostics.utils.logger import get_logger

logger = get_logger(__name__, "EnvironmentReader")


@dataclass(frozen=True)
class EnvironmentState:
    """Raw values of the two diagnosed variables; None when absent"""
    socket_handler_disabled: Optional[str]
    cert_revocation_mode: Optional[str]

    @property
    def is_configured(self) -> bool:
        """True only when both variables carry their fix-values exactly."""
        return (
            self.socket_handler_disabled == SOCKET_HANDLER_FIX_VALUE
            and self.cert_revocation_mode == CERT_REVOCATION_FIX_VALUE
        )


class EnvironmentReader(BaseService):
    """Reads the diagnosed variables once per run."""

    def __init__(self):
        super().__init__(agent_name=TOOL_ENVIRONMENT)

    def run(
        self,
        environ: Optional[Mapping[str, str]] = None,
        correlation_id: Optional[str] = None
    ) -> EnvironmentState:
        """
        Read both variables by exact name.

        Args:
            environ: Mapping to read from (default: os.environ)
            correlation_id: Request correlation ID

        Returns:
            EnvironmentState snapshot
        """
        environ = os.environ if environ is None else environ

        state = EnvironmentState(
            socket_handler_disabled=environ.get(SOCKET_HANDLER_ENV),
            cert_revocation_mode=environ.get(CERT_REVOCATION_ENV),
        )

        logger.debug(
            f"{SOCKET_HANDLER_ENV}={state.socket_handler_disabled!r}, "
            f"{CERT_REVOCATION_ENV}={state.cert_revocation_mode!r}",
            correlation_id=correlation_id
        )
        return state

    def _execute(self, state: Dict[str, Any]) -> Dict[str, Any]:
        state["environment"] = self.run(correlation_id=state.get("correlation_id"))
        return state
