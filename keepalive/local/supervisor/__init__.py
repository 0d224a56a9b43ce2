"""
The Supervisor package.
Keeps the configured executable running for the lifetime of this process.

This package contains the ProcessSupervisor class and its helper modules,
which handle permissions, launching, waiting and configuration checks.
"""
from .supervisor import ProcessSupervisor

__all__ = ['ProcessSupervisor']
