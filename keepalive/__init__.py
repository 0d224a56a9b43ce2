"""Keepalive: keeps a single executable running, relaunching it whenever it exits."""

__version__ = "0.1.0"
