"""Aggregate application use cases."""

from .bootstrap import run_bootstrap, verify_bootstrap

__all__ = [
    "run_bootstrap",
    "verify_bootstrap",
]
