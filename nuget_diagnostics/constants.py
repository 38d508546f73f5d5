"""
Constants for NuGet connectivity diagnostics
"""

# Target
NUGET_INDEX_URL = "https://api.nuget.org/v3/index.json"
NUGET_ORG_DOMAIN = "nuget.org"

# Diagnosed environment variables and the values that apply the revocation fix
SOCKET_HANDLER_ENV = "DOTNET_SYSTEM_NET_HTTP_USESOCKETSHTTPHANDLER"
CERT_REVOCATION_ENV = "NUGET_CERT_REVOCATION_MODE"
SOCKET_HANDLER_FIX_VALUE = "0"
CERT_REVOCATION_FIX_VALUE = "Offline"
NOT_SET = "NOT SET"

REMEDIATION_COMMANDS = [
    f"export {SOCKET_HANDLER_ENV}={SOCKET_HANDLER_FIX_VALUE}",
    f"export {CERT_REVOCATION_ENV}={CERT_REVOCATION_FIX_VALUE}",
]

# Failure kinds
FAILURE_KIND_NONE = "None"
FAILURE_KIND_NETWORK = "Network"
FAILURE_KIND_CERT_REVOCATION = "CertificateRevocation"
FAILURE_KIND_OTHER = "Other"

# Substrings that mark a TLS validation failure (case-sensitive)
TLS_FAILURE_MARKERS = ("SSL", "certificate")

# Verdicts
VERDICT_CONFIGURED = "correctly configured"
VERDICT_NEEDS_CONFIGURATION = "needs configuration"

# NuGet configuration files
LOCAL_CONFIG_FILENAME = "nuget.config"
GLOBAL_CONFIG_PARTS = (".nuget", "NuGet", "NuGet.Config")

# Workflow steps
TOOL_PROBE = "probe"
TOOL_ENVIRONMENT = "environment"
TOOL_INSPECT_CONFIG = "inspect_config"
TOOL_REPORT = "report"
