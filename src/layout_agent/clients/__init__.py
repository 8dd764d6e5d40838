"""
Client modules for external service communication
"""

from .layout import ErrorKind, LayoutClient, LayoutClientError

__all__ = ["ErrorKind", "LayoutClient", "LayoutClientError"]
