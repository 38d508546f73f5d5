"""
Correlation ID helpers for diagnostic runs
"""
import random


def generate_correlation_id() -> str:
    """
    Generate a numeric correlation ID that tags every log line of one run.

    Returns:
        str: 8-digit ID (e.g., '48273945')
    """
    return f"{random.randint(0, 99999999):08d}"
