"""
API Routers module.
"""
from sysinfo.routers import health

__all__ = ["health"]
