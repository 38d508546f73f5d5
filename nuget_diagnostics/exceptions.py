"""
Custom exceptions for NuGet diagnostics
"""

class DiagnosticsError(Exception):
    """Base exception for all diagnostics errors"""
    pass

class ProbeError(DiagnosticsError):
    """Raised when the connectivity probe is given invalid input"""
    pass

class ConfigInspectionError(DiagnosticsError):
    """Raised when a NuGet configuration file cannot be read"""
    pass

class ConfigurationError(DiagnosticsError):
    """Raised when configuration is invalid"""
    pass
