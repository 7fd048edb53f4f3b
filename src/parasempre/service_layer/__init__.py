"""Service layer for PARASEMPRE.

Implements the application use-cases: the guest directory, the access
registry and the bulk-import loop. Owns transaction boundaries and maps
storage outcomes onto domain failures.

Dependency rule: may import `parasempre.domain` and `parasempre.interfaces`,
but not `parasempre.adapters` or `parasempre.entrypoints`.
"""
