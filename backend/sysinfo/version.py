"""
Build metadata for the running process.

Release builds overwrite these through the environment
(``SYSINFO_VERSION`` / ``SYSINFO_GIT_REVISION``); local builds report
the development defaults.
"""
import os

VELA_VERSION: str = os.getenv("SYSINFO_VERSION", "UNKNOWN")
GIT_REVISION: str = os.getenv("SYSINFO_GIT_REVISION", "UNKNOWN")
