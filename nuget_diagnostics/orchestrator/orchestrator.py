"""
NuGet Diagnostic Orchestrator
"""

from dataclasses import asdict
from typing import Dict, Any, Optional
from datetime import datetime

from nuget_diagnostics.utils.correlation import generate_correlation_id
from nuget_diagnostics.utils.logger import get_logger
from nuget_diagnostics.components.probe.prober import ConnectivityProber
from nuget_diagnostics.components.environment.reader import EnvironmentReader
from nuget_diagnostics.components.nuget_config.config_inspector import NuGetConfigInspector
from nuget_diagnostics.components.report.formatter import ReportFormatter
from nuget_diagnostics.constants import NUGET_INDEX_URL
from nuget_diagnostics.orchestrator.state import DiagnosticState


logger = get_logger(__name__, "DiagnosticOrchestrator")


class DiagnosticOrchestrator:
    """Runs probe, environment read, config inspection and report in order."""

    def __init__(self):
        self.steps = [
            ConnectivityProber(),
            EnvironmentReader(),
            NuGetConfigInspector(),
            ReportFormatter(),
        ]
        logger.debug("Initialised Orchestrator", correlation_id="INIT")

    def run(
        self,
        url: str = NUGET_INDEX_URL,
        timeout: Optional[float] = None,
        check_config: bool = True,
        config_path: Optional[str] = None
    ) -> Dict[str, Any]:
        correlation_id = generate_correlation_id()
        logger.info(f"Starting NuGet diagnostic (url={url})", correlation_id=correlation_id)

        state: DiagnosticState = {
            "target_url": url,
            "timeout": timeout,
            "check_config": check_config,
            "config_path": config_path,
            "correlation_id": correlation_id,
            "nuget_config": None,
            "completed_tools": [],
            "error": None,
        }

        start_time = datetime.now()
        for step in self.steps:
            state = step.execute_node(state)
        duration = (datetime.now() - start_time).total_seconds()

        if state.get("error"):
            logger.error(f"Diagnostic run failed: {state['error']}", correlation_id=correlation_id)
            return {
                "success": False,
                "correlation_id": correlation_id,
                "error": state["error"],
                "completed_tools": state["completed_tools"],
            }

        self._log_summary(state, duration)

        nuget_config = state.get("nuget_config")
        return {
            "success": True,
            "correlation_id": correlation_id,
            "report": state["report"],
            "verdict": state["verdict"],
            "connectivity": asdict(state["connectivity"]),
            "environment": asdict(state["environment"]),
            "nuget_config": asdict(nuget_config) if nuget_config else None,
            "completed_tools": state["completed_tools"],
            "duration": duration,
        }

    def _log_summary(self, state: DiagnosticState, duration: float) -> None:
        cid = state["correlation_id"]
        connectivity = state["connectivity"]
        logger.info(
            f"Reachable: {connectivity.reachable} | Failure: {connectivity.failure_kind} | "
            f"Environment: {state['verdict']} | Duration: {duration:.2f}s",
            correlation_id=cid
        )
        logger.debug(f"Executed Steps ({len(state['completed_tools'])}): {' | '.join(state['completed_tools'])}", correlation_id=cid)
