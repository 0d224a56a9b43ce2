"""
This module initializes the console package, exposing command execution,
the config sub-commands and help output.
"""

from .process import execute_command
from .handler import handle_config_command, print_help

__all__ = ["execute_command", "handle_config_command", "print_help"]
