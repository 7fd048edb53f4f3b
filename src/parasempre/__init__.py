"""PARASEMPRE

Guest list and access-credential management for a wedding.
It keeps the invitation list consistent (unique names and phones,
coherent family groups) and links staff access codes to guests.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
