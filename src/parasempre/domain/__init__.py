"""Domain layer for PARASEMPRE.

Contains the business rules that are independent of storage: the shared
validation predicates (phone pattern, credential-code format, relationship and
role enums) and the typed failures every use-case reports.

Dependency rule: do not import from `parasempre.adapters` or
`parasempre.entrypoints`.
"""
