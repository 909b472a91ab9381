"""gam - scaffold Go backend services from per-flavor folder layouts.

By default, gam's internal logging is disabled when used as a library.
Library users can enable logging by calling gam.enable_logging().
"""

from gam.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
