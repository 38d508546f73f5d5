"""
Report Formatter - Renders the diagnostic findings as plain text.

format_report() is a pure function of its inputs: it reads no environment,
clock or filesystem state.
"""

from typing import Optional, List, Dict, Any

from nuget_diagnostics.components.base_service import BaseService
from nuget_diagnostics.components.probe.prober import ConnectivityResult
from nuget_diagnostics.components.environment.reader import EnvironmentState
from nuget_diagnostics.components.nuget_config.config_inspector import NuGetConfigState
from nuget_diagnostics.constants import (
    SOCKET_HANDLER_ENV,
    CERT_REVOCATION_ENV,
    NOT_SET,
    REMEDIATION_COMMANDS,
    FAILURE_KIND_CERT_REVOCATION,
    FAILURE_KIND_NETWORK,
    VERDICT_CONFIGURED,
    VERDICT_NEEDS_CONFIGURATION,
    TOOL_REPORT,
)
from nuget_diagnostics.utils.logger import get_logger

logger = get_logger(__name__, "ReportFormatter")

SEPARATOR = "=" * 60


def compute_verdict(environment: EnvironmentState) -> str:
    """
    Returns:
        VERDICT_CONFIGURED iff both variables equal their fix-values exactly,
        VERDICT_NEEDS_CONFIGURATION otherwise (including absent values)
    """
    return VERDICT_CONFIGURED if environment.is_configured else VERDICT_NEEDS_CONFIGURATION


def format_report(
    connectivity: ConnectivityResult,
    environment: EnvironmentState,
    nuget_config: Optional[NuGetConfigState] = None
) -> str:
    """
    Build the full report.

    Args:
        connectivity: Outcome of the HTTP attempt
        environment: Snapshot of the diagnosed variables
        nuget_config: Config inspection result, or None to omit that section

    Returns:
        Report text, one finding per line
    """
    lines = [SEPARATOR, "NuGet Connectivity Diagnostic", SEPARATOR, ""]

    lines.append("Test 1: HTTP connectivity to NuGet API")
    lines.extend(_connectivity_lines(connectivity))
    lines.append("")

    lines.append("Test 2: Environment configuration")
    lines.extend(_environment_lines(environment))
    lines.append("")

    step = 3
    if nuget_config is not None:
        lines.append(f"Test {step}: NuGet configuration")
        lines.extend(_nuget_config_lines(nuget_config))
        lines.append("")
        step += 1

    lines.append(f"Test {step}: Final assessment")
    lines.extend(_assessment_lines(connectivity, environment))
    lines.append("")

    lines.append("Analysis complete. Check output above for details.")
    return "\n".join(lines)


def _connectivity_lines(connectivity: ConnectivityResult) -> List[str]:
    if connectivity.reachable:
        lines = [f"✓ NuGet API reachable - Status: {connectivity.status_code}"]
        if connectivity.content_length is not None:
            lines.append(f"  Response size: {connectivity.content_length} bytes")
        if connectivity.content_length == 0:
            lines.append("⚠ Response body is empty - the service index returned no content")
    else:
        lines = [f"✗ Connection failed: {connectivity.message}"]
        if connectivity.status_code is not None:
            lines.append(f"  HTTP status: {connectivity.status_code}")

    lines.append(f"  Failure kind: {connectivity.failure_kind}")

    if connectivity.failure_kind == FAILURE_KIND_CERT_REVOCATION:
        lines.extend([
            "✗ SSL certificate validation issue detected",
            "  Root cause: certificate revocation checking is failing",
            "  (RevocationStatusUnknown, OfflineRevocation)",
            "  This is the root cause of NuGet restoration failures",
        ])
    return lines


def _environment_lines(environment: EnvironmentState) -> List[str]:
    lines = [
        f"{SOCKET_HANDLER_ENV}: {_display(environment.socket_handler_disabled)}",
        f"{CERT_REVOCATION_ENV}: {_display(environment.cert_revocation_mode)}",
    ]

    if compute_verdict(environment) == VERDICT_CONFIGURED:
        lines.append(f"✓ Environment {VERDICT_CONFIGURED} for NuGet SSL fix")
    else:
        lines.append(f"⚠ Environment {VERDICT_NEEDS_CONFIGURATION}:")
        lines.extend(f"  {command}" for command in REMEDIATION_COMMANDS)
    return lines


def _nuget_config_lines(nuget_config: NuGetConfigState) -> List[str]:
    if nuget_config.local_exists:
        if nuget_config.local_has_source is None:
            lines = ["⚠ Local NuGet configuration found but could not be read"]
        elif nuget_config.local_has_source:
            lines = ["✓ Local NuGet configuration found and contains nuget.org source"]
        else:
            lines = ["⚠ Local NuGet configuration found but does not reference nuget.org"]
        lines.append(f"  Path: {nuget_config.local_path}")
        return lines

    if nuget_config.global_exists:
        return ["✓ Global NuGet configuration found", f"  Path: {nuget_config.global_path}"]

    return ["⚠ No NuGet configuration found - using defaults"]


def _assessment_lines(connectivity: ConnectivityResult, environment: EnvironmentState) -> List[str]:
    lines = ["ANSWER TO: 'Does the NuGet server work?'", "-" * 44]

    if connectivity.reachable:
        lines.append("✓ YES - The NuGet API is reachable and responding")
        if environment.is_configured:
            lines.append("✓ Revocation workaround is active for dotnet commands")
        else:
            lines.append("⚠ Apply the settings above if dotnet restore reports revocation errors")
        return lines

    if connectivity.failure_kind == FAILURE_KIND_CERT_REVOCATION:
        lines.extend([
            "✓ The NuGet server itself is most likely operational",
            "✗ The client cannot complete TLS certificate chain validation",
            "",
            "SOLUTION: Set these environment variables before running dotnet commands:",
        ])
        lines.extend(f"  {command}" for command in REMEDIATION_COMMANDS)
        lines.append("This bypasses revocation checking only; other certificate validation still applies.")
    elif connectivity.failure_kind == FAILURE_KIND_NETWORK:
        lines.extend([
            "✗ NO - The NuGet API could not be reached over the network",
            "  Check DNS, proxy and firewall settings before changing TLS settings",
        ])
    else:
        lines.append("✗ NO - The NuGet API check failed for an unexpected reason")
    return lines


def _display(value: Optional[str]) -> str:
    return NOT_SET if value is None else value


class ReportFormatter(BaseService):
    """Workflow wrapper around format_report()."""

    def __init__(self):
        super().__init__(agent_name=TOOL_REPORT)

    def run(
        self,
        connectivity: ConnectivityResult,
        environment: EnvironmentState,
        nuget_config: Optional[NuGetConfigState] = None,
        correlation_id: Optional[str] = None
    ) -> str:
        report = format_report(connectivity, environment, nuget_config)
        logger.debug(f"Report rendered: {len(report.splitlines())} lines", correlation_id=correlation_id)
        return report

    def _execute(self, state: Dict[str, Any]) -> Dict[str, Any]:
        state["verdict"] = compute_verdict(state["environment"])
        state["report"] = self.run(
            connectivity=state["connectivity"],
            environment=state["environment"],
            nuget_config=state.get("nuget_config"),
            correlation_id=state.get("correlation_id")
        )
        return state
