"""Bootstrap (composition root) for PARASEMPRE.

Assembles the application at runtime: reads configuration, builds the
engine and unit of work, wires the two services together and seeds the
owner accounts.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `parasempre.adapters`, `parasempre.service_layer`,
  `parasempre.interfaces`, `parasempre.domain`, and `parasempre.config`.
- Inner layers must not import `parasempre.bootstrap`.
"""

from parasempre.adapters.guest_import import parse_guest_file

from .bootstrap import AppContainer, bootstrap, build_services, build_write_uow

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_services",
    "build_write_uow",
    "parse_guest_file",
]
