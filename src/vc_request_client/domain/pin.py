"""PIN policy for PIN-protected issuance

A PIN is generated by the caller, shown to the user out-of-band and sent to
the request service either in plain text or as a salted hash. Both
representations share the ``pin.value`` field on the wire, so they are kept
apart here as a tagged variant.
"""

import base64
import binascii
import hashlib
import secrets
from dataclasses import dataclass
from typing import Final

from vc_request_client.domain.errors import InvalidPinLength, InvalidPinValue

MIN_PIN_LENGTH: Final[int] = 4
MAX_PIN_LENGTH: Final[int] = 16
DEFAULT_PIN_LENGTH: Final[int] = 6


def validate_pin_length(length: object) -> bool:
    """Check that length is an integer in [4, 16]"""
    if isinstance(length, bool) or not isinstance(length, int):
        return False
    return MIN_PIN_LENGTH <= length <= MAX_PIN_LENGTH


def generate_pin(length: int = DEFAULT_PIN_LENGTH) -> str:
    """
    Generate a random numeric PIN.

    Args:
        length: Number of digits, 4 to 16

    Returns:
        String of decimal digits

    Raises:
        InvalidPinLength: If length is out of range
    """
    if not validate_pin_length(length):
        raise InvalidPinLength(length)
    return "".join(str(secrets.randbelow(10)) for _ in range(length))


@dataclass(frozen=True)
class PlaintextPin:
    """PIN sent to the request service as typed by the user"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not (self.value.isascii() and self.value.isdigit()):
            raise InvalidPinValue("Plaintext PIN must be a non-empty string of digits")


@dataclass(frozen=True)
class HashedPin:
    """PIN sent as base64(SHA-256(salt + pin))"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidPinValue("Hashed PIN cannot be blank")
        try:
            base64.b64decode(self.value, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidPinValue("Hashed PIN must be base64 encoded")


PinValue = PlaintextPin | HashedPin


def hash_pin(pin: str, salt: str) -> HashedPin:
    """
    Hash a plaintext PIN with a salt the wallet also knows.

    Args:
        pin: Plaintext digits
        salt: Salt prepended to the PIN before hashing

    Returns:
        HashedPin holding the base64 encoded digest
    """
    digest = hashlib.sha256((salt + pin).encode("utf-8")).digest()
    return HashedPin(value=base64.b64encode(digest).decode("ascii"))
