"""
Local package for the Keepalive supervisor.

This package provides the merged runtime configuration through the
effective_settings singleton and the supervisor that consumes it.
"""

from .config import effective_settings

__all__ = ["effective_settings"]
