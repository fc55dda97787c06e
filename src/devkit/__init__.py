"""devkit - project scaffolding and editor settings tools for a development shell.

By default, devkit's internal logging is disabled when used as a library.
Library users can enable logging by calling devkit.enable_logging().
"""

from devkit.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
