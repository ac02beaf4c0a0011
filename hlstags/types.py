"""
Attribute value types for hlstags.

Provides the typed values that appear inside HLS tag attribute lists
(RFC 8216 section 4.2) and the protocol version enumeration.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .error import InvalidInputError

_SIGNED_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")


class ProtocolVersion(Enum):
    """HLS protocol compatibility version (EXT-X-VERSION)."""
    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5
    V6 = 6
    V7 = 7

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, text: str) -> "ProtocolVersion":
        """
        Parse a protocol version number.

        Example:
            >>> ProtocolVersion.parse("3")
            <ProtocolVersion.V3: 3>
        """
        for version in cls:
            if str(version) == text:
                return version
        raise InvalidInputError(f"Unknown protocol version: {text!r}")


@dataclass(frozen=True)
class SignedDecimalFloatingPoint:
    """
    A finite signed decimal floating-point number.

    NaN and infinities are rejected at construction time, so every instance
    can be written back out as a plain decimal number.
    """
    value: float

    def __post_init__(self):
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(f"Not a number: {value!r}")
        value = float(value)
        if not math.isfinite(value):
            raise InvalidInputError(f"Not a finite number: {value!r}")
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, text: str) -> "SignedDecimalFloatingPoint":
        """
        Parse a signed-decimal-floating-point string.

        Accepts an optional sign, one or more digits and an optional
        fractional part. Exponents, whitespace and non-finite tokens are
        rejected.

        Args:
            text: Raw attribute value

        Returns:
            Parsed value

        Raises:
            InvalidInputError: If the text is not a signed decimal float

        Example:
            >>> SignedDecimalFloatingPoint.parse("-1.23")
            SignedDecimalFloatingPoint(value=-1.23)
        """
        if not _SIGNED_DECIMAL_PATTERN.fullmatch(text):
            raise InvalidInputError(f"Not a signed decimal floating-point number: {text!r}")
        return cls(float(text))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        text = repr(self.value)
        if 'e' in text:
            text = format(Decimal(text), 'f')
        if text.endswith('.0'):
            text = text[:-2]
        return text


def parse_yes_or_no(text: str) -> bool:
    """
    Parse an enumerated ``YES``/``NO`` attribute value.

    Matching is case-sensitive.

    Raises:
        InvalidInputError: If the text is neither ``YES`` nor ``NO``
    """
    if text == "YES":
        return True
    if text == "NO":
        return False
    raise InvalidInputError(f"Expected YES or NO, got {text!r}")
