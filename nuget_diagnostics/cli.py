#!/usr/bin/env python
"""Command-line entry point: run one NuGet connectivity diagnostic.

Usage:
  nuget-diagnose
  nuget-diagnose --timeout 15 --skip-config-check
  python -m nuget_diagnostics.cli --verbose
"""
import sys

import click

from nuget_diagnostics.config import config
from nuget_diagnostics.orchestrator.orchestrator import DiagnosticOrchestrator
from nuget_diagnostics.utils.logger import setup_logging, enable_debug_mode


def _replace_unencodable_output():
    # Consoles such as cp1252 cannot encode the report symbols; print '?' instead
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, 'reconfigure', None)
        if reconfigure is not None:
            reconfigure(errors='replace')


@click.command()
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Seconds to wait for the NuGet API (default: PROBE_TIMEOUT).')
@click.option('--skip-config-check', is_flag=True, help='Do not inspect nuget.config files.')
@click.option('--verbose', is_flag=True, help='Enable debug logging on stderr.')
def main(timeout, skip_config_check, verbose):
    """Check NuGet API reachability and the .NET revocation-check settings."""
    _replace_unencodable_output()
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    if verbose:
        enable_debug_mode()

    result = DiagnosticOrchestrator().run(timeout=timeout, check_config=not skip_config_check)

    if not result['success']:
        click.echo('Diagnostic run failed: %s' % result['error'], err=True)
        return

    click.echo(result['report'])


if __name__ == '__main__':
    main()
