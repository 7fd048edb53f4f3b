"""Entrypoints (inbound adapters) for PARASEMPRE.

Expose the application to the outside world through the command line. Parse
and validate inputs, call the services assembled by `parasempre.bootstrap`,
and present results or failures.

Dependency rule: may import `parasempre.bootstrap`, `parasempre.service_layer`
and the `UNSET` sentinel; only the `db` commands reach into
`parasempre.adapters` (for the engine factory).
"""
