"""
Diagnostic State : Defines the state structure for one diagnostic run
"""

from typing import TypedDict, Optional, List

from nuget_diagnostics.components.probe.prober import ConnectivityResult
from nuget_diagnostics.components.environment.reader import EnvironmentState
from nuget_diagnostics.components.nuget_config.config_inspector import NuGetConfigState


class DiagnosticState(TypedDict, total=False):
    """NuGet diagnostic workflow state"""

    # Inputs
    target_url: str
    timeout: Optional[float]
    check_config: bool
    config_path: Optional[str]
    correlation_id: str

    # Findings
    connectivity: ConnectivityResult
    environment: EnvironmentState
    nuget_config: Optional[NuGetConfigState]

    # Output
    verdict: str
    report: str

    # Execution tracking
    completed_tools: List[str]
    error: Optional[str]
