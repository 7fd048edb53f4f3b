"""CLI helpers for PARASEMPRE.

Utilities used by the command-line interface: URL sanitization for safe
display, stderr message emitters with emoji to ASCII fallbacks, the mapping
of domain failures to exit codes, and renderers for guests and credentials.
"""

from .db_url import sanitize_url
from .failures import EXIT_CODES, DomainFailure, domain_failures
from .messages import error, success, warn

__all__ = [
    "DomainFailure",
    "EXIT_CODES",
    "domain_failures",
    "error",
    "sanitize_url",
    "success",
    "warn",
]
