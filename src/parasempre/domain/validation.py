"""Shared validation predicates and closed vocabularies.

Pure, side-effect-free helpers used by both the guest directory and the
access registry so the phone pattern, the credential-code format and the
relationship/role enums are defined exactly once.
"""

from __future__ import annotations

import re
from enum import Enum

from .errors import ValidationError

#: National mobile number: 2-digit area code, a literal 9, then 8 digits.
PHONE_PATTERN = re.compile(r"[0-9]{2}9[0-9]{8}")

#: Access codes are exactly this many characters long.
CREDENTIAL_CODE_LENGTH = 5
CREDENTIAL_CODE_PATTERN = re.compile(rf"[A-Z0-9]{{{CREDENTIAL_CODE_LENGTH}}}")

PHONE_FORMAT_MSG = "invalid phone. Use area code + 9 + 8 digits (e.g. 11912345678)"


class Relationship(str, Enum):
    """How a guest relates to the couple.

    Values are the single-letter source codes used on import files and in
    storage.
    """

    PRINCIPAL = "P"
    RESPONSIBLE = "R"

    @classmethod
    def parse(cls, value: str | Relationship) -> Relationship:
        """Convert a source code (``"P"``/``"R"``) into a Relationship.

        Args:
            value: A Relationship member or its source code. Surrounding
                whitespace is ignored; the code is case-sensitive.

        Returns:
            The matching Relationship member.

        Raises:
            ValidationError: If the value is not one of the two codes.
        """
        if isinstance(value, Relationship):
            return value
        try:
            return cls(value.strip())
        except (ValueError, AttributeError) as e:
            raise ValidationError(
                "relationship", "invalid relationship type"
            ) from e


class Role(str, Enum):
    """Category of an access credential."""

    OWNER_A = "groom"
    OWNER_B = "bride"
    GUEST = "guest"


def clean_text(value: object, field: str) -> str:
    """Return *value* without surrounding whitespace; None reads as empty.

    Raises:
        ValidationError: If *value* is neither None nor a string.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(field, f"{field.replace('_', ' ')} must be text")
    return value.strip()


def is_valid_phone(phone: str) -> bool:
    """Return True if *phone* matches the national mobile pattern."""
    return PHONE_PATTERN.fullmatch(phone) is not None


def normalize_credential_code(code: str) -> str:
    """Strip surrounding whitespace and upper-case a credential code."""
    return code.strip().upper()


def is_valid_credential_code(code: str) -> bool:
    """Return True if *code* is a canonical (upper-case) credential code."""
    return CREDENTIAL_CODE_PATTERN.fullmatch(code) is not None


def require_phone(phone: str, field: str = "phone") -> str:
    """Validate a mandatory phone number and return it trimmed.

    Raises:
        ValidationError: If the phone is empty or malformed.
    """
    phone = clean_text(phone, field)
    if not phone:
        raise ValidationError(field, "phone is required")
    if not is_valid_phone(phone):
        raise ValidationError(field, PHONE_FORMAT_MSG)
    return phone


def require_credential_code(code: str, field: str = "code") -> str:
    """Validate a mandatory credential code and return its canonical form.

    Raises:
        ValidationError: If the code is empty or not fixed-length alphanumeric.
    """
    code = clean_text(code, field).upper()
    if not code:
        raise ValidationError(field, "access code is required")
    if not is_valid_credential_code(code):
        raise ValidationError(
            field,
            f"access code must be exactly {CREDENTIAL_CODE_LENGTH} "
            "alphanumeric characters",
        )
    return code
