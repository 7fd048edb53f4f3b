"""Interfaces (application boundary) for PARASEMPRE.

Defines framework-free application contracts: storage ports as ABCs, the
read/write models they exchange, the unit of work, and the tri-state
``UNSET`` sentinel used by partial updates. Business rules stay out of this
package.

Dependency rule: may import `parasempre.domain` only. It may be imported by
`parasempre.service_layer`, `parasempre.adapters`, and `parasempre.bootstrap`.
"""
